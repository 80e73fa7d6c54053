"""Rules bundle: the named construction operations handed to a parser.

Example:
    >>> rules = default_rules({"tag": True})
    >>> rules["heading"]("Hello", 1).tag
    'h1'
    >>> "del" in rules
    True

Thread Safety:
Rules is immutable after creation. Safe to share.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from bemjson_md.builder import NodeBuilder
from bemjson_md.config import RulesConfig
from bemjson_md.utils.logger import get_logger

logger = get_logger(__name__)

# Construct name -> NodeBuilder method, in registration order
RULE_METHODS: Mapping[str, str] = {
    # Block level
    "code": "code",
    "blockquote": "blockquote",
    "html": "html",
    "heading": "heading",
    "hr": "hr",
    "list": "list",
    "listitem": "listitem",
    "paragraph": "paragraph",
    "table": "table",
    "tablerow": "tablerow",
    "tablecell": "tablecell",
    # Inline level
    "strong": "strong",
    "em": "em",
    "codespan": "codespan",
    "br": "br",
    "del": "strikethrough",
    "link": "link",
    "image": "image",
}


class Rules(Mapping[str, Callable[..., Any]]):
    """Immutable mapping of construct names to bound builder operations."""

    __slots__ = ("_builder", "_rules")

    def __init__(self, builder: NodeBuilder) -> None:
        self._builder = builder
        self._rules: dict[str, Callable[..., Any]] = {
            name: getattr(builder, method) for name, method in RULE_METHODS.items()
        }

    def __getitem__(self, name: str) -> Callable[..., Any]:
        return self._rules[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Rules(mode={self.config.mode!r}, names={list(self._rules)!r})"

    @property
    def builder(self) -> NodeBuilder:
        """The builder the operations are bound to."""
        return self._builder

    @property
    def config(self) -> RulesConfig:
        """The configuration captured at creation."""
        return self._builder.config

    @property
    def names(self) -> frozenset[str]:
        """All construct names."""
        return frozenset(self._rules)


def default_rules(
    options: Mapping[str, Any] | RulesConfig | None = None,
    **overrides: Any,
) -> Rules:
    """Create the default rules bundle.

    Args:
        options: An options mapping (see ``RulesConfig.from_dict``) or a
            ready RulesConfig
        **overrides: Extra options. Merged over a mapping; applied with
            ``dataclasses.replace`` to a RulesConfig, so they must be
            field names there

    Returns:
        Rules bundle bound to a fresh NodeBuilder

    Raises:
        ConfigError: If an option has the wrong shape
    """
    if isinstance(options, RulesConfig):
        config = dataclasses.replace(options, **overrides) if overrides else options
    else:
        config = RulesConfig.from_dict({**(options or {}), **overrides})

    logger.debug("Creating %d rules in %s mode", len(RULE_METHODS), config.mode)
    return Rules(NodeBuilder(config))


__all__ = ["RULE_METHODS", "Rules", "default_rules"]
