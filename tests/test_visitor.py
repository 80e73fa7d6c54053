"""Tests for read-only tree traversal."""

from collections import Counter

from bemjson_md.builder import NodeBuilder
from bemjson_md.nodes import RawHtml
from bemjson_md.visitor import find_all, iter_nodes, walk


def _document() -> tuple:
    builder = NodeBuilder()
    return (
        builder.heading("Title", 1),
        builder.paragraph(["See ", builder.link("/a", None, builder.em("a")), RawHtml("<hr>")]),
        builder.list(
            [
                builder.listitem("one"),
                builder.listitem(["two", builder.list([builder.listitem("nested")])]),
            ]
        ),
        builder.code("x", "py"),
    )


class TestIterNodes:
    """Depth-first, document-order traversal."""

    def test_order(self) -> None:
        elems = [node.elem for node in iter_nodes(_document())]
        assert elems == [
            "h1",
            "p",
            "a",
            "em",
            "ul",
            "li",
            "li",
            "ul",
            "li",
            "blockcode",
            "code",
        ]

    def test_skips_text(self) -> None:
        assert list(iter_nodes("text")) == []
        assert list(iter_nodes(RawHtml("<b>"))) == []

    def test_single_node(self) -> None:
        node = NodeBuilder().hr()
        assert list(iter_nodes(node)) == [node]


class TestWalk:
    """Callback traversal helpers."""

    def test_walk_counts(self) -> None:
        counts: Counter[str] = Counter()
        walk(_document(), lambda node: counts.update([node.elem]))
        assert counts["li"] == 3
        assert counts["ul"] == 2

    def test_find_all(self) -> None:
        links = find_all(_document(), "a")
        assert [link.url for link in links] == ["/a"]
