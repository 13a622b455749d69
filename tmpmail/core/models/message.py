"""Message domain models built from provider payloads"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


def _require(payload: Dict[str, Any], key: str) -> Any:
    if key not in payload:
        raise KeyError(key)
    return payload[key]


def _optional_text(payload: Dict[str, Any], key: str) -> Optional[str]:
    value = payload.get(key)
    return None if value is None else str(value)


@dataclass(frozen=True)
class MessageSummary:
    """One row of an inbox listing."""

    id: int
    sender: str
    subject: str
    date: str = ""

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "MessageSummary":
        """Create MessageSummary from a getMessages entry.

        Raises:
            KeyError: If a required field is absent.
            ValueError: If the id is not numeric.
        """
        return cls(
            id=int(_require(payload, "id")),
            sender=str(payload.get("from") or ""),
            subject=str(payload.get("subject") or ""),
            date=str(payload.get("date") or ""),
        )


@dataclass(frozen=True)
class Attachment:
    """Attachment metadata; the content is downloaded on demand."""

    filename: str
    content_type: str = ""
    size: int = 0

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Attachment":
        return cls(
            filename=str(_require(payload, "filename")),
            content_type=str(payload.get("contentType") or ""),
            size=int(payload.get("size") or 0),
        )


@dataclass
class MessageDetail:
    """Full content of a single message."""

    id: int
    sender: str
    subject: str
    html_body: Optional[str] = None
    text_body: Optional[str] = None
    date: str = ""
    attachments: List[Attachment] = field(default_factory=list)

    def __post_init__(self):
        if self.html_body is None and self.text_body is None:
            raise ValueError("Message has neither an HTML nor a text body")

    def has_attachments(self) -> bool:
        """Check if message has attachments."""
        return len(self.attachments) > 0

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "MessageDetail":
        """Create MessageDetail from a readMessage response.

        Attachments keep the provider's order; duplicate filenames are
        kept as separate entries.

        Raises:
            KeyError: If a required field is absent.
            ValueError: If the id is not numeric or both bodies are missing.
        """
        attachments = payload.get("attachments") or []
        if not isinstance(attachments, list):
            raise ValueError("attachments must be a list")

        return cls(
            id=int(_require(payload, "id")),
            sender=str(payload.get("from") or ""),
            subject=str(payload.get("subject") or ""),
            html_body=_optional_text(payload, "htmlBody"),
            text_body=_optional_text(payload, "textBody"),
            date=str(payload.get("date") or ""),
            attachments=[Attachment.from_payload(item) for item in attachments],
        )


class RenderFormat(Enum):
    """Output formats for a rendered message."""

    HTML = "html"
    TEXT = "text"


@dataclass(frozen=True)
class RenderedDocument:
    """A message ready for display, in either HTML or plain text."""

    content: str
    format: RenderFormat = RenderFormat.HTML

    @property
    def is_text(self) -> bool:
        return self.format is RenderFormat.TEXT


@dataclass(frozen=True)
class ShortenedUrl:
    """Outcome of a shortening attempt; falls back to the original link."""

    url: str
    shortened: bool
