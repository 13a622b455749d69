"""Reduce HTML documents to plain text for terminal output."""

import html
import re

_DROPPED_BLOCKS = re.compile(r"<(script|style|head)\b.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
_COMMENTS = re.compile(r"<!--.*?-->", re.DOTALL)
_LINE_BREAKS = re.compile(
    r"<br\s*/?>|</(?:p|div|tr|li|h[1-6]|table|blockquote)\s*>", re.IGNORECASE
)
_TAGS = re.compile(r"<[^>]+>")
# Tag-shaped text produced by decoding entities such as &lt;b&gt;
_DECODED_TAGS = re.compile(r"</?[A-Za-z][\w:-]*(?:\s[^<>]*)?/?>|<![^<>]*>")
_TRAILING_SPACE = re.compile(r"[ \t]+$", re.MULTILINE)
_BLANK_RUNS = re.compile(r"\n{3,}")


def _strip_decoded_tags(text: str) -> str:
    """Remove tag-shaped sequences until none remain.

    Removal can join the pieces of a nested sequence ('<<b>b>') into a new
    tag, so this repeats until the text stops changing.
    """
    while True:
        stripped = _DECODED_TAGS.sub("", text)
        if stripped == text:
            return text
        text = stripped


def html_to_text(markup: str) -> str:
    """Strip tags from markup, keeping line structure and decoding entities.

    The result never contains tag markup, including tags that were only
    spelled out with entities in the source.
    """
    if not markup:
        return ""

    text = _DROPPED_BLOCKS.sub("", markup)
    text = _COMMENTS.sub("", text)
    text = _LINE_BREAKS.sub("\n", text)
    text = _TAGS.sub("", text)
    text = html.unescape(text).replace("\xa0", " ")
    text = _strip_decoded_tags(text)
    text = _TRAILING_SPACE.sub("", text)
    text = _BLANK_RUNS.sub("\n\n", text)

    return text.strip("\n")


def looks_like_html(content: str) -> bool:
    """Check whether content carries tag markup."""
    return bool(re.search(r"<(?:[a-zA-Z][\w-]*|/[a-zA-Z][\w-]*)(?:\s[^>]*)?/?>", content))
