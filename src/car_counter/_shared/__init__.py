# Area: Shared
"""
Shared utilities: logging configuration and terminal display constants.
"""

from .logging_config import (
    setup_logging,
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)

__all__ = [
    "setup_logging",
    "enable_quiet_mode",
    "disable_quiet_mode",
    "is_quiet_mode_enabled",
]
