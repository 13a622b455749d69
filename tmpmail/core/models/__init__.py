"""Domain models."""

from .address import EmailAddress
from .message import (
    Attachment,
    MessageDetail,
    MessageSummary,
    RenderedDocument,
    RenderFormat,
    ShortenedUrl,
)

__all__ = [
    "Attachment",
    "EmailAddress",
    "MessageDetail",
    "MessageSummary",
    "RenderedDocument",
    "RenderFormat",
    "ShortenedUrl",
]
