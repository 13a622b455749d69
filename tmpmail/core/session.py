"""File-backed session state: the active address and the last viewed message.

Each slot is a separate file in the session directory. Writes are
last-write-wins with no locking; two invocations racing on the same
directory can interleave.
"""

from pathlib import Path
from typing import Optional

from tmpmail.core.models import EmailAddress, RenderedDocument, RenderFormat
from tmpmail.utils.errors import SessionStoreError
from tmpmail.utils.html import looks_like_html
from tmpmail.utils.logging import get_logger
from tmpmail.utils.paths import ADDRESS_FILENAME, DOCUMENT_FILENAME

logger = get_logger(__name__)


class SessionStore:
    """Key/value cache with one slot for the address and one for the document."""

    def __init__(self, session_dir: Path):
        self.session_dir = Path(session_dir)

    @property
    def address_path(self) -> Path:
        return self.session_dir / ADDRESS_FILENAME

    @property
    def document_path(self) -> Path:
        return self.session_dir / DOCUMENT_FILENAME

    def _read(self, path: Path) -> Optional[str]:
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            raise SessionStoreError(
                f"Failed to read {path}: {e}", details={"path": str(path)}
            ) from e

    def _write(self, path: Path, content: str) -> None:
        try:
            self.session_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise SessionStoreError(
                f"Failed to write {path}: {e}", details={"path": str(path)}
            ) from e

    def read_address(self) -> Optional[EmailAddress]:
        """Return the stored address, or None if the slot is empty or unreadable."""
        try:
            content = self._read(self.address_path)
        except UnicodeDecodeError:
            logger.warning(f"Ignoring undecodable address in {self.address_path}")
            return None

        if not content or not content.strip():
            return None

        first_line = content.strip().splitlines()[0]
        try:
            return EmailAddress.parse(first_line)
        except ValueError:
            logger.warning(f"Ignoring malformed address in {self.address_path}")
            return None

    def write_address(self, address: EmailAddress) -> None:
        self._write(self.address_path, address.address)
        logger.debug(f"Stored active address in {self.address_path}")

    def read_document(self) -> Optional[RenderedDocument]:
        """Return the last rendered document, or None if nothing was viewed yet."""
        try:
            content = self._read(self.document_path)
        except UnicodeDecodeError:
            logger.warning(f"Ignoring undecodable document in {self.document_path}")
            return None

        if content is None:
            return None

        fmt = RenderFormat.HTML if looks_like_html(content) else RenderFormat.TEXT
        return RenderedDocument(content=content, format=fmt)

    def write_document(self, document: RenderedDocument) -> None:
        self._write(self.document_path, document.content)
        logger.debug(f"Stored {document.format.value} document in {self.document_path}")
