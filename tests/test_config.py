"""Tests for RulesConfig and its from_dict() loader."""

import dataclasses

import pytest

from bemjson_md.config import RulesConfig
from bemjson_md.errors import ConfigError


def _hook(code: str, lang: str | None) -> str | None:
    return None


class TestRulesConfigDataclass:
    """Test RulesConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config is semantic mode with template-side escaping."""
        config = RulesConfig()
        assert config.tag is False
        assert config.is_escape_html is True
        assert config.highlight is None
        assert config.mode == "semantic"

    def test_tag_mode(self) -> None:
        assert RulesConfig(tag=True).mode == "tag"

    def test_frozen(self) -> None:
        config = RulesConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.tag = True  # type: ignore[misc]

    def test_non_callable_highlight_rejected(self) -> None:
        with pytest.raises(ConfigError, match="highlight"):
            RulesConfig(highlight="pygments")  # type: ignore[arg-type]


class TestRulesConfigFromDict:
    """Test RulesConfig.from_dict() factory method."""

    def test_empty(self) -> None:
        """from_dict with empty dict should return default config."""
        assert RulesConfig.from_dict({}) == RulesConfig()

    def test_camel_case_keys(self) -> None:
        config = RulesConfig.from_dict({"tag": True, "isEscapeHtml": False})
        assert config.tag is True
        assert config.is_escape_html is False

    def test_field_names(self) -> None:
        config = RulesConfig.from_dict({"is_escape_html": False, "highlight": _hook})
        assert config.is_escape_html is False
        assert config.highlight is _hook

    def test_nested_markdown_highlight(self) -> None:
        config = RulesConfig.from_dict({"markdown": {"highlight": _hook}})
        assert config.highlight is _hook

    def test_nested_highlight_wins(self) -> None:
        def other(code: str, lang: str | None) -> str | None:
            return code

        config = RulesConfig.from_dict({"highlight": other, "markdown": {"highlight": _hook}})
        assert config.highlight is _hook

    def test_markdown_without_highlight(self) -> None:
        assert RulesConfig.from_dict({"markdown": {}}).highlight is None

    def test_values_coerced_to_bool(self) -> None:
        config = RulesConfig.from_dict({"tag": 1, "isEscapeHtml": None})
        assert config.tag is True
        assert config.is_escape_html is False

    def test_ignores_unknown_keys(self) -> None:
        """from_dict should silently ignore unknown keys."""
        config = RulesConfig.from_dict({"tag": True, "gfm": True, "breaks": 1})
        assert config == RulesConfig(tag=True)

    def test_markdown_must_be_mapping(self) -> None:
        with pytest.raises(ConfigError, match="markdown"):
            RulesConfig.from_dict({"markdown": ["highlight"]})

    def test_non_callable_nested_highlight(self) -> None:
        with pytest.raises(ConfigError):
            RulesConfig.from_dict({"markdown": {"highlight": 42}})

    def test_logs_resolved_mode(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("DEBUG", logger="bemjson_md"):
            RulesConfig.from_dict({"tag": True})
        assert "mode=tag" in caplog.text
