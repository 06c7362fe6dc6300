"""Utility modules for http-probe."""

from .logging import (
    setup_logging,
    get_logger,
    null_logger,
    console,
)
from .helpers import (
    Timer,
    canonical_header_key,
    format_seconds,
    header_line_size,
)

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "null_logger",
    "console",
    # Timing
    "Timer",
    # Header formatting
    "canonical_header_key",
    "format_seconds",
    "header_line_size",
]
