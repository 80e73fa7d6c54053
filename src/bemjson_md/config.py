"""Rules configuration for bemjson-md.

Configuration is captured once, when the rules bundle is created, and
injected into the node builder. There is no module-level state: two
bundles with different configs can be used side by side.

Usage:
    # Direct construction
    config = RulesConfig(tag=True)

    # From the options mapping used by markdown integrations
    config = RulesConfig.from_dict({
        "tag": True,
        "isEscapeHtml": False,
        "markdown": {"highlight": my_highlight},
    })

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from bemjson_md.errors import ConfigError
from bemjson_md.highlighting import HighlightHook
from bemjson_md.utils.logger import get_logger

logger = get_logger(__name__)

# Option keys accepted by from_dict, mapped to field names
_OPTION_ALIASES: dict[str, str] = {
    "tag": "tag",
    "isEscapeHtml": "is_escape_html",
    "is_escape_html": "is_escape_html",
    "highlight": "highlight",
}


@dataclass(frozen=True, slots=True)
class RulesConfig:
    """Immutable rules configuration.

    Attributes:
        tag: Stamp nodes with literal markup fields (tag, attrs, bem=False)
        is_escape_html: The template layer escapes text. When False, plain
            text is wrapped as RawHtml and left unescaped
        highlight: Optional highlight hook for code blocks

    """

    tag: bool = False
    is_escape_html: bool = True
    highlight: HighlightHook | None = None

    def __post_init__(self) -> None:
        if self.highlight is not None and not callable(self.highlight):
            msg = f"expected a callable, got {type(self.highlight).__name__}"
            raise ConfigError(msg, option="highlight")

    @property
    def mode(self) -> str:
        """Output mode name: "tag" or "semantic"."""
        return "tag" if self.tag else "semantic"

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> RulesConfig:
        """Create RulesConfig from an options mapping.

        Accepts both the camelCase keys of markdown integrations and the
        field names. The highlight hook may sit at the top level or under
        ``markdown.highlight``; the nested one wins. Unknown keys are
        silently ignored.

        Args:
            options: Mapping of option names to values

        Returns:
            New RulesConfig instance

        Raises:
            ConfigError: If ``markdown`` is not a mapping or ``highlight``
                is not callable

        Example:
            >>> config = RulesConfig.from_dict({"tag": 1, "unknown_key": 2})
            >>> config.tag
            True

        """
        values: dict[str, Any] = {}
        for key, value in options.items():
            field_name = _OPTION_ALIASES.get(key)
            if field_name is None:
                continue
            if field_name == "highlight":
                values[field_name] = value
            else:
                values[field_name] = bool(value)

        markdown = options.get("markdown")
        if markdown is not None:
            if not isinstance(markdown, Mapping):
                msg = f"expected a mapping, got {type(markdown).__name__}"
                raise ConfigError(msg, option="markdown")
            if markdown.get("highlight") is not None:
                values["highlight"] = markdown["highlight"]

        config = cls(**values)
        logger.debug(
            "Rules config: mode=%s is_escape_html=%s highlight=%s",
            config.mode,
            config.is_escape_html,
            config.highlight is not None,
        )
        return config


__all__ = ["RulesConfig"]
