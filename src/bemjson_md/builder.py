"""Node builder: one construction operation per markdown construct.

A markdown parser calls these operations bottom-up, in document order:
inline constructs first, their results then passed as ``text``/``content``
to the enclosing block construct. The builder never parses markdown and
never reorders what it is given.

Output Modes:
    semantic (default): nodes carry elem, elem_mods and content only.
    tag: nodes also carry ``tag`` (and ``attrs`` for links, images, some
    code blocks and aligned cells) naming the element they render as;
    line breaks get ``bem=False``.

Usage:
    >>> builder = NodeBuilder(RulesConfig(tag=True))
    >>> builder.heading("Title", 2)
    DocumentNode(elem='h2', content=('Title',), ..., tag='h2', ...)

Thread Safety:
The builder holds only its frozen config. Every call returns a fresh node.
Safe to share across threads.

"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from bemjson_md.config import RulesConfig
from bemjson_md.escaping import (
    escape_html,
    escape_plain_text,
    escape_text_nodes,
    normalize_items,
)
from bemjson_md.highlighting import call_highlighter
from bemjson_md.nodes import DocumentNode


def _sequence(value: Any) -> Any:
    """Freeze a caller-built list into a tuple, order untouched."""
    if isinstance(value, list):
        return tuple(value)
    return value


class NodeBuilder:
    """Build document nodes from parser events.

    No operation validates its input. Heading levels, flags and params
    arrive already checked by the parser.

    """

    __slots__ = ("_config",)

    def __init__(self, config: RulesConfig | None = None) -> None:
        """Initialize builder.

        Args:
            config: Rules configuration (defaults to semantic mode with
                template-side escaping and no highlighter)
        """
        self._config = config if config is not None else RulesConfig()

    @property
    def config(self) -> RulesConfig:
        """The configuration captured at creation."""
        return self._config

    # =========================================================================
    # Helpers
    # =========================================================================

    def _tag(self, name: str) -> str | None:
        return name if self._config.tag else None

    def _text(self, text: Any) -> tuple[Any, ...]:
        """Escape plain text (when the template escapes) and apply the policy."""
        items = normalize_items(text)
        if self._config.is_escape_html:
            items = escape_plain_text(items)
        return escape_text_nodes(items, is_escape_html=self._config.is_escape_html)

    def _node(self, elem: str, content: Any = None, **fields: Any) -> DocumentNode:
        return DocumentNode(elem=elem, content=content, tag=self._tag(elem), **fields)

    # =========================================================================
    # Block level
    # =========================================================================

    def code(self, code: str, lang: str | None = None, escaped: bool = False) -> DocumentNode:
        """Fenced or indented code block.

        The highlight hook, if configured, runs once. A transformed result
        replaces the code and is treated as already escaped; otherwise the
        code is escaped here unless the caller says it already is.

        Args:
            code: Raw code text
            lang: Language label from the info string
            escaped: Code is already escaped

        Returns:
            ``blockcode`` node wrapping a single ``code`` node
        """
        highlight = self._config.highlight
        if highlight is not None:
            highlighted = call_highlighter(highlight, code, lang)
            if highlighted is not None:
                code = highlighted
                escaped = True

        text = code if escaped else escape_html(code)
        tag = self._config.tag

        inner = DocumentNode(
            elem="code",
            content=escape_text_nodes(text, is_escape_html=self._config.is_escape_html),
            tag="code" if tag else None,
            attrs={"class": f"language-{lang}"} if tag and lang else None,
        )
        return DocumentNode(
            elem="blockcode",
            content=inner,
            tag="pre" if tag else None,
            elem_mods={"lang": lang} if lang else None,
        )

    def blockquote(self, quote: Any) -> DocumentNode:
        return self._node("blockquote", self._text(quote))

    def html(self, html: Any) -> Any:
        """Raw HTML block: returned exactly as given."""
        return html

    def heading(self, text: Any, level: int) -> DocumentNode:
        """Heading of any positive level, ``elem`` is ``h{level}``."""
        return self._node(f"h{level}", self._text(text))

    def hr(self) -> DocumentNode:
        return self._node("hr")

    def list(self, body: Sequence[Any], ordered: bool = False) -> DocumentNode:
        """Ordered or bullet list around pre-built list items."""
        return self._node("ol" if ordered else "ul", _sequence(body))

    def listitem(self, text: Any) -> DocumentNode:
        """List item.

        Content is normalized to a sequence and each element gets the
        escaping policy on its own, so an item holding a paragraph and a
        nested list keeps one group per element.
        """
        groups = tuple(self._text(part) for part in normalize_items(text))
        return self._node("li", groups)

    def paragraph(self, text: Any) -> DocumentNode:
        return self._node("p", self._text(text))

    def table(self, header: Sequence[Any] | None, body: Sequence[Any]) -> DocumentNode:
        """Table.

        With a header, content is ``(thead, tbody)``. Without one, the body
        rows are the table's content directly, with no wrapper nodes.
        """
        if header:
            thead = self._node("thead", _sequence(header))
            tbody = self._node("tbody", _sequence(body))
            return self._node("table", (thead, tbody))
        return self._node("table", _sequence(body))

    def tablerow(self, content: Sequence[Any]) -> DocumentNode:
        return self._node("tr", _sequence(content))

    def tablecell(self, content: Any, flags: Mapping[str, Any] | None = None) -> DocumentNode:
        """Table cell: ``th`` for header cells, ``td`` otherwise."""
        flags = flags or {}
        elem = "th" if flags.get("header") else "td"
        align = flags.get("align")
        attrs = {"align": align} if self._config.tag and align else None
        return self._node(elem, self._text(content), attrs=attrs)

    # =========================================================================
    # Inline level
    # =========================================================================

    def strong(self, text: Any) -> DocumentNode:
        return self._node("strong", self._text(text))

    def em(self, text: Any) -> DocumentNode:
        return self._node("em", self._text(text))

    def codespan(self, text: Any) -> DocumentNode:
        return self._node("code", self._text(text))

    def br(self) -> DocumentNode:
        # Not a BEM entity in tag mode
        return self._node("br", bem=False if self._config.tag else None)

    def strikethrough(self, text: Any) -> DocumentNode:
        return self._node("del", self._text(text))

    def link(self, href: str, title: str | None, text: Any) -> DocumentNode:
        """Hyperlink.

        ``title`` is set only when non-empty. In tag mode ``attrs`` is
        exactly ``{"href": href}``; the title stays on the node.
        """
        return self._node(
            "a",
            self._text(text),
            url=href,
            title=title or None,
            attrs={"href": href} if self._config.tag else None,
        )

    def image(
        self,
        href: str,
        title: str | None,
        text: str,
        params: Mapping[str, Any] | None = None,
    ) -> DocumentNode:
        """Image.

        Args:
            href: Image source
            title: Title, kept only when non-empty
            text: Alternative text
            params: Optional ``size`` (``width``, optional ``height``) and
                ``align``

        Returns:
            ``img`` node. A ``size`` in tag mode replaces ``attrs`` with a
            single ``style`` entry; ``src`` and ``alt`` are dropped from it.
        """
        tag = self._config.tag
        elem_mods: dict[str, str] = {}
        attrs = {"src": href, "alt": text} if tag else None

        if params:
            size = params.get("size")
            if size and tag:
                style = f"width: {size['width']}px"
                if size.get("height"):
                    style += f"; height: {size['height']}px"
                attrs = {"style": style}

            if params.get("align"):
                elem_mods["align"] = params["align"]

        return self._node(
            "img",
            url=href,
            alt=text,
            title=title or None,
            elem_mods=elem_mods,
            attrs=attrs,
        )


__all__ = ["NodeBuilder"]
