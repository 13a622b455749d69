"""Turns provider messages into displayable documents."""

import html

from tmpmail.core.models import (
    EmailAddress,
    MessageDetail,
    RenderedDocument,
    RenderFormat,
)
from tmpmail.core.provider import ProviderClient
from tmpmail.core.session import SessionStore
from tmpmail.utils.html import html_to_text
from tmpmail.utils.logging import get_logger, log_call

logger = get_logger(__name__)


class MessageRenderer:
    """Builds the header, body and attachment sections of a message.

    The header block is synthesized locally; the body is the provider's
    markup passed through untouched.
    """

    def __init__(self, provider: ProviderClient, store: SessionStore):
        self.provider = provider
        self.store = store

    @staticmethod
    def select_body(detail: MessageDetail) -> str:
        """Pick the HTML body, or the text body wrapped as preformatted."""
        if detail.html_body:
            return detail.html_body
        return f"<pre>{detail.text_body or ''}</pre>"

    @staticmethod
    def _header(address: EmailAddress, detail: MessageDetail) -> str:
        return (
            f"<pre><b>To:</b> {address}\n"
            f"<b>From:</b> {detail.sender}\n"
            f"<b>Subject:</b> {detail.subject}</pre>"
        )

    def _attachments(
        self, address: EmailAddress, detail: MessageDetail, fmt: RenderFormat
    ) -> str:
        section = ["<br><b>[Attachments]</b><br>"]

        for attachment in detail.attachments:
            link = self.provider.download_link(address, detail.id, attachment.filename)

            if fmt is RenderFormat.TEXT:
                shortened = self.provider.shorten_url(link)
                section.append(f"{html.escape(shortened.url)}  [{html.escape(attachment.filename)}]<br>")
            else:
                section.append(
                    f'<a href="{html.escape(link)}" download="{html.escape(attachment.filename)}">'
                    f"{html.escape(attachment.filename)}</a><br>"
                )

        return "".join(section)

    def render(
        self,
        address: EmailAddress,
        detail: MessageDetail,
        fmt: RenderFormat = RenderFormat.HTML,
    ) -> RenderedDocument:
        """Build the document for one message.

        Text output is the HTML document reduced to plain text, headers
        and attachment list included.
        """
        document = f"{self._header(address, detail)}\n{self.select_body(detail)}\n\n"

        if detail.has_attachments():
            document += self._attachments(address, detail, fmt)

        if fmt is RenderFormat.TEXT:
            return RenderedDocument(content=html_to_text(document), format=fmt)

        return RenderedDocument(content=document, format=fmt)

    @log_call
    def view(
        self,
        address: EmailAddress,
        message_id: int,
        fmt: RenderFormat = RenderFormat.HTML,
    ) -> RenderedDocument:
        """Fetch, render and cache a message.

        The cached document is only replaced once rendering succeeded, so
        a NotFoundError leaves the previous one in place.
        """
        detail = self.provider.fetch_message(address, message_id)
        document = self.render(address, detail, fmt)
        self.store.write_document(document)
        logger.info(f"Rendered message {message_id} as {fmt.value}")
        return document
