"""
Utility helpers shared across BlazeAuth packages.
"""

from .logging import configure_logging, get_correlation_id, get_logger, set_correlation_id, time_call
from .naming import camel_to_snake, normalize_option_key

__all__ = [
    "camel_to_snake",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "normalize_option_key",
    "set_correlation_id",
    "time_call",
]
