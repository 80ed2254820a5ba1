"""HTML sanitization for provider-supplied descriptions.

Providers return descriptions containing arbitrary markup. ``sanitize``
reduces them to plain text that is safe to display.
"""

from __future__ import annotations

import html
import re

from bs4 import BeautifulSoup

_WHITESPACE_RE = re.compile(r"\s+")
_DROPPED_TAGS = ["script", "style", "iframe", "object", "embed"]
_BLOCK_TAGS = ["p", "div", "li", "blockquote", "h1", "h2", "h3", "h4", "h5", "h6"]


def sanitize(text: str | None) -> str | None:
    """Strip markup from *text*, returning display-safe plain text.

    Content of script-like elements is removed entirely; other tags are
    unwrapped. Block elements and line breaks become word boundaries, and
    whitespace runs collapse to a single space. The result is HTML-escaped
    so that entity-encoded markup in the input cannot turn into live tags.

    Args:
        text: Raw text, possibly containing HTML. ``None`` is passed through.

    Returns:
        Plain text, or ``None`` if *text* was ``None``.
    """
    if text is None:
        return None
    soup = BeautifulSoup(text, "html.parser")
    for node in soup.find_all(_DROPPED_TAGS):
        node.decompose()
    for node in soup.find_all("br"):
        node.replace_with(" ")
    for node in soup.find_all(_BLOCK_TAGS):
        node.append(" ")
    text = _WHITESPACE_RE.sub(" ", soup.get_text()).strip()
    return html.escape(text, quote=False)
