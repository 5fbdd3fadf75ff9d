# Area: Shared
"""
Shared utilities: logging configuration.
"""

from .logging_config import (
    setup_logging,
    parse_level,
    log_load_error,
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)

__all__ = [
    "setup_logging",
    "parse_level",
    "log_load_error",
    "enable_quiet_mode",
    "disable_quiet_mode",
    "is_quiet_mode_enabled",
]
