"""Text escaping for document node content.

Two independent decisions apply to text:

1. Neutralize markup characters (``escape_html``, ``escape_plain_text``).
   Each construction operation decides this for itself.
2. Let the template layer escape again, or mark the text as literal
   markup (``escape_text_nodes``). Decided once, by ``is_escape_html``.

Example:
    >>> escape_html("<b>a & b</b>")
    '&lt;b&gt;a &amp; b&lt;/b&gt;'
    >>> escape_text_nodes("x", is_escape_html=False)
    (RawHtml(html='x'),)

Thread Safety:
All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

import html
from collections.abc import Iterable
from typing import Any

from bemjson_md.nodes import Item, RawHtml


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts ``&``, ``<``, ``>``, ``"`` and ``'`` to entities. Single quotes
    become ``&#39;`` rather than Python's ``&#x27;``.

    Args:
        text: Text to escape

    Returns:
        Escaped text
    """
    if not text:
        return text
    return html.escape(text, quote=True).replace("&#x27;", "&#39;")


def normalize_items(value: Any) -> tuple[Any, ...]:
    """Normalize content to an ordered tuple.

    A list or tuple is flattened one level; None becomes empty; anything
    else is a one-element tuple.
    """
    match value:
        case None:
            return ()
        case tuple():
            return value
        case list():
            return tuple(value)
        case _:
            return (value,)


def escape_plain_text(items: Iterable[Any]) -> tuple[Any, ...]:
    """Entity-escape every plain-text item, leaving built nodes alone."""
    return tuple(_escape_item(item) for item in items)


def escape_text_nodes(items: Any, *, is_escape_html: bool) -> tuple[Any, ...]:
    """Apply the escaping policy to content.

    With ``is_escape_html`` on, text is returned as-is: the template layer
    escapes it. Off, every plain string is wrapped as ``RawHtml`` so the
    template layer emits it verbatim. ``RawHtml`` and ``DocumentNode``
    items are never wrapped twice.

    Args:
        items: A single item or a sequence of items
        is_escape_html: Whether the template layer escapes text

    Returns:
        Tuple of items in original order
    """
    normalized = normalize_items(items)
    if is_escape_html:
        return normalized
    return tuple(_wrap_item(item) for item in normalized)


def _escape_item(item: Any) -> Any:
    match item:
        case str():
            return escape_html(item)
        case _:
            return item


def _wrap_item(item: Any) -> Item | Any:
    match item:
        case str():
            return RawHtml(item)
        case _:
            # RawHtml, DocumentNode and nested groups pass through
            return item


__all__ = [
    "escape_html",
    "escape_plain_text",
    "escape_text_nodes",
    "normalize_items",
]
