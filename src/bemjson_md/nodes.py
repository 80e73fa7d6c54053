"""Document nodes for bemjson-md.

Every construction operation returns a ``DocumentNode``: a frozen dataclass
with slots whose optional fields are ``None`` when absent. Serialization
drops absent fields, so "absent" and "empty" stay distinct (an image always
carries an ``elem_mods`` mapping, possibly empty; a paragraph carries none).

Content items form a closed union:

- ``str``: plain text
- ``RawHtml``: literal markup the template layer must not escape again
- ``DocumentNode``: an already-built child

Thread Safety:
All nodes are frozen, and mapping fields are wrapped in read-only proxies.
Safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class RawHtml:
    """Raw-text wrapper.

    Marks a fragment as pre-formed markup. Serializes to ``{"html": ...}``.

    """

    html: str


@dataclass(frozen=True, slots=True)
class DocumentNode:
    """One rendered markdown construct.

    Attributes:
        elem: Semantic name of the construct ("p", "h2", "blockcode", ...)
        content: Tuple of items, a single child node, or None for leaves
        elem_mods: Modifier mapping ("lang" on code blocks, "align" on images)
        attrs: Literal markup attributes (tag mode only)
        tag: Literal markup tag name (tag mode only)
        url: Link target or image source
        title: Link/image title, only when non-empty
        alt: Image alternative text
        bem: False on line breaks in tag mode, None otherwise

    """

    elem: str
    content: Content | None = None
    elem_mods: Mapping[str, str] | None = None
    attrs: Mapping[str, str] | None = None
    tag: str | None = None
    url: str | None = None
    title: str | None = None
    alt: str | None = None
    bem: bool | None = None

    def __post_init__(self) -> None:
        # Copy mappings so callers can't mutate a returned node through them
        for name in ("elem_mods", "attrs"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, MappingProxyType):
                object.__setattr__(self, name, MappingProxyType(dict(value)))

    @property
    def children(self) -> tuple[Item | tuple[Item, ...], ...]:
        """Content as a tuple, whatever shape it was stored in."""
        match self.content:
            case None:
                return ()
            case tuple():
                return self.content
            case _:
                return (self.content,)


type Item = str | RawHtml | DocumentNode
"""A single content element."""

type Content = tuple[Item | tuple[Item, ...], ...] | DocumentNode
"""Node content: an ordered tuple (list items nest one level) or one child."""


__all__ = ["Content", "DocumentNode", "Item", "RawHtml"]
