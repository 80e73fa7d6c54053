"""Exception classes for bemjson-md.

Node construction never raises on its own; these cover configuration
loading and optional integrations.
"""

from __future__ import annotations


class BemjsonError(Exception):
    """Base exception for all bemjson-md errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(BemjsonError):
    """Invalid rules configuration.

    Raised when an option has the wrong shape (e.g. a non-callable
    highlight hook) or an optional integration is not installed.
    """

    def __init__(self, message: str, option: str | None = None) -> None:
        """Initialize config error.

        Args:
            message: Description of the problem
            option: Name of the offending option (optional)
        """
        self.option = option
        prefix = f"Option '{option}': " if option else ""
        super().__init__(f"{prefix}{message}")
