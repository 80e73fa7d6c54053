"""Read-only traversal over built document node trees.

Example, collect link targets:

    urls = [node.url for node in iter_nodes(tree) if node.elem == "a"]

Example, count elements:

    counts = Counter()
    walk(tree, lambda node: counts.update([node.elem]))

Thread Safety:
Traversal never mutates nodes. Safe to call from any thread.

"""

from collections.abc import Callable, Iterator
from typing import Any

from bemjson_md.nodes import DocumentNode


def iter_nodes(value: Any) -> Iterator[DocumentNode]:
    """Yield every DocumentNode depth-first, in document order.

    Accepts a node, a content item, or (nested) tuples/lists of them.
    Plain text and RawHtml are skipped.
    """
    match value:
        case DocumentNode():
            yield value
            yield from iter_nodes(value.content)
        case tuple() | list():
            for item in value:
                yield from iter_nodes(item)
        case _:
            return


def walk(value: Any, fn: Callable[[DocumentNode], object]) -> None:
    """Call ``fn`` on every node of a tree, parents before children."""
    for node in iter_nodes(value):
        fn(node)


def find_all(value: Any, elem: str) -> list[DocumentNode]:
    """All nodes with the given ``elem``, in document order."""
    return [node for node in iter_nodes(value) if node.elem == elem]


__all__ = ["find_all", "iter_nodes", "walk"]
