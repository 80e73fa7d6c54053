"""Property-based tests using Hypothesis.

These tests verify invariants that should hold for any text and any
configuration:
1. Escaped text never contains raw markup characters and unescapes back
2. With escaping off, text is wrapped and built nodes pass through
3. Tag mode is all-or-nothing across every construct
4. Content order is never changed
"""

import html

from hypothesis import given, settings
from hypothesis import strategies as st

from bemjson_md import RulesConfig, default_rules
from bemjson_md.nodes import DocumentNode, RawHtml
from bemjson_md.visitor import iter_nodes

TEXT_OPERATIONS = ["paragraph", "blockquote", "strong", "em", "codespan", "del"]

texts = st.text(max_size=40)
text_lists = st.lists(texts, max_size=6)
operations = st.sampled_from(TEXT_OPERATIONS)


def _every_construct(rules):  # type: ignore[no-untyped-def]
    """One node of every kind, nested the way a parser would build them."""
    row = rules["tablerow"]([rules["tablecell"]("h", {"header": True, "align": "left"})])
    return (
        rules["heading"]("t", 2),
        rules["paragraph"](
            [
                rules["strong"]("s"),
                rules["em"]("e"),
                rules["codespan"]("c"),
                rules["del"]("d"),
                rules["br"](),
                rules["link"]("/l", "title", "l"),
                rules["image"]("/i", None, "i", {"size": {"width": 1}, "align": "center"}),
            ]
        ),
        rules["blockquote"](rules["paragraph"]("q")),
        rules["list"]([rules["listitem"]("a")], True),
        rules["list"]([rules["listitem"]("b")], False),
        rules["table"]([row], [row]),
        rules["table"](None, [row]),
        rules["code"]("x", "py"),
        rules["hr"](),
    )


class TestEscapingProperties:
    """Text content invariants."""

    @given(text=texts, operation=operations)
    @settings(max_examples=100)
    def test_escaped_text_has_no_markup(self, text: str, operation: str) -> None:
        node = default_rules()[operation](text)
        (content,) = node.content
        assert "<" not in content
        assert ">" not in content
        assert html.unescape(content) == text

    @given(text=texts, operation=operations)
    @settings(max_examples=100)
    def test_escape_off_wraps_text_verbatim(self, text: str, operation: str) -> None:
        node = default_rules(is_escape_html=False)[operation](text)
        assert node.content == (RawHtml(text),)

    @given(items=text_lists)
    @settings(max_examples=50)
    def test_order_preserved(self, items: list[str]) -> None:
        rules = default_rules()
        br = rules["br"]()
        content = [*items, br]
        node = rules["paragraph"](content)
        assert len(node.content) == len(content)
        assert [html.unescape(part) for part in node.content[:-1]] == items
        assert node.content[-1] is br

    @given(items=text_lists)
    @settings(max_examples=50)
    def test_built_nodes_never_wrapped(self, items: list[str]) -> None:
        rules = default_rules(is_escape_html=False)
        children = [rules["em"](text) for text in items]
        node = rules["strong"](children)
        assert all(a is b for a, b in zip(node.content, children, strict=True))

    @given(code=texts)
    @settings(max_examples=50)
    def test_code_always_escaped(self, code: str) -> None:
        node = default_rules()["code"](code)
        assert isinstance(node.content, DocumentNode)
        (text,) = node.content.content
        assert html.unescape(text) == code
        assert "<" not in text


class TestModeProperties:
    """Tag mode stamps every node or none."""

    @given(escape=st.booleans())
    @settings(max_examples=10)
    def test_tag_mode_every_node_tagged(self, escape: bool) -> None:
        rules = default_rules(RulesConfig(tag=True, is_escape_html=escape))
        nodes = list(iter_nodes(_every_construct(rules)))
        assert nodes
        assert all(node.tag is not None for node in nodes)

    @given(escape=st.booleans())
    @settings(max_examples=10)
    def test_semantic_mode_no_markup_fields(self, escape: bool) -> None:
        rules = default_rules(RulesConfig(tag=False, is_escape_html=escape))
        for node in iter_nodes(_every_construct(rules)):
            assert node.tag is None
            assert node.attrs is None
            assert node.bem is None

    @given(level=st.integers(min_value=1, max_value=100), tag=st.booleans())
    @settings(max_examples=50)
    def test_heading_elem_follows_level(self, level: int, tag: bool) -> None:
        node = default_rules(tag=tag)["heading"]("x", level)
        assert node.elem == f"h{level}"
        assert node.tag == (f"h{level}" if tag else None)
