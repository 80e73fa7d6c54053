"""Utility modules for bemjson-md.

Provides:
- logger: get_logger for logging
"""

from bemjson_md.utils.logger import get_logger

__all__ = ["get_logger"]
