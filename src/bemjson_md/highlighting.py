"""Syntax highlighting hook for code blocks.

A highlight hook is any callable taking ``(code, lang)`` and returning
either highlighted markup or None. The code-block operation calls it once;
a result that is not None and differs from the input is trusted as already
escaped and used verbatim.

Usage:
    # Plain function
    def shout(code: str, lang: str | None) -> str | None:
        return code.upper() if lang == "txt" else None

    rules = default_rules({"markdown": {"highlight": shout}})

    # Rosettes, with bemjson-md[syntax] installed
    from bemjson_md.highlighting import RosettesHighlighter

    rules = default_rules(highlight=RosettesHighlighter())

"""

from __future__ import annotations

import importlib
import importlib.util
from collections.abc import Callable
from typing import Any, Protocol

from bemjson_md.errors import ConfigError
from bemjson_md.utils.logger import get_logger

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Protocol for highlight hooks.

    Contract:
        - MUST NOT mutate the input
        - MUST return escaped markup, or None for "no transformation"
        - MAY raise; errors propagate to the caller of the code operation

    Thread Safety:
        Implementations must be thread-safe if rules are shared across
        threads.
    """

    def __call__(self, code: str, lang: str | None, /) -> str | None:
        """Highlight code.

        Args:
            code: Raw source code
            lang: Language label from the fence info string, if any

        Returns:
            Highlighted markup, or None to leave the code alone
        """
        ...


type HighlightHook = Highlighter | Callable[[str, str | None], str | None]


def call_highlighter(hook: HighlightHook, code: str, lang: str | None) -> str | None:
    """Run a highlight hook once and interpret its result.

    Args:
        hook: The configured highlight hook
        code: Raw source code
        lang: Language label, if any

    Returns:
        The replacement markup, or None when the hook returned None or
        handed the code back unchanged.
    """
    highlighted = hook(code, lang)
    if highlighted is None or highlighted == code:
        return None
    return highlighted


def has_rosettes() -> bool:
    """Check whether the Rosettes highlighter is importable."""
    return importlib.util.find_spec("rosettes") is not None


def _import_rosettes() -> Any:
    try:
        return importlib.import_module("rosettes")
    except ImportError as e:
        msg = "Rosettes is not installed (pip install bemjson-md[syntax])"
        raise ConfigError(msg, option="highlight") from e


class RosettesHighlighter:
    """Highlight hook backed by Rosettes.

    Returns None for code without a language label or with a language
    Rosettes doesn't know, so those blocks fall back to plain escaping.

    Thread Safety:
        Holds only immutable options. Safe to share.
    """

    __slots__ = ("_rosettes", "_show_linenos")

    def __init__(self, *, show_linenos: bool = False) -> None:
        """Initialize highlighter.

        Args:
            show_linenos: Include line numbers in output

        Raises:
            ConfigError: If Rosettes is not installed
        """
        self._rosettes = _import_rosettes()
        self._show_linenos = show_linenos

    def supports_language(self, language: str) -> bool:
        """Check if Rosettes supports the language."""
        try:
            result: bool = self._rosettes.supports_language(language)
            return result
        except Exception:
            return False

    def __call__(self, code: str, lang: str | None) -> str | None:
        if not lang:
            return None
        if not self.supports_language(lang):
            logger.debug("No highlighter for language %r, leaving code unhighlighted", lang)
            return None
        result: str = self._rosettes.highlight(
            code,
            language=lang,
            show_linenos=self._show_linenos,
        )
        return result


__all__ = [
    "HighlightHook",
    "Highlighter",
    "RosettesHighlighter",
    "call_highlighter",
    "has_rosettes",
]
