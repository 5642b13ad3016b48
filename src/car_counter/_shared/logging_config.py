# Area: Shared
"""
car_counter._shared.logging_config — Structured logging setup
=============================================================

Configures dual logging: terminal (colored, stderr) + file (JSON).
Quiet mode keeps the terminal clear while a game is being played.
"""

from __future__ import annotations
import logging
import sys
from pathlib import Path
from typing import Optional

from .logging_formatters import (
    QuietFilter,
    TerminalFormatter,
    JSONFormatter,
    enable_quiet_mode,
    disable_quiet_mode,
    is_quiet_mode_enabled,
)

# Package logger
logger = logging.getLogger("car_counter")

DEFAULT_LOG_FILE = "car_counter.log"


def setup_logging(
    log_file_path: Optional[str] = DEFAULT_LOG_FILE,
    level: int = logging.INFO,
) -> None:
    """
    Configure logging for the package.

    Parameters
    ----------
    log_file_path : str or None
        Path to the JSON log file. None disables file logging.
    level : int
        Logging level. Defaults to INFO.
    """
    pkg_logger = logging.getLogger("car_counter")
    pkg_logger.setLevel(level)

    # Remove existing handlers
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
        handler.close()

    # Terminal handler with colors; stdout belongs to the presenter
    terminal_handler = logging.StreamHandler(sys.stderr)
    terminal_handler.setLevel(level)
    terminal_handler.setFormatter(TerminalFormatter(
        fmt="%(asctime)s │ %(levelname)s │ %(name)s │ %(message)s",
        datefmt="%H:%M:%S",
    ))
    terminal_handler.addFilter(QuietFilter())
    pkg_logger.addHandler(terminal_handler)

    if log_file_path:
        try:
            log_path = Path(log_file_path)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())
            pkg_logger.addHandler(file_handler)
        except OSError as e:
            pkg_logger.warning(f"Could not create log file: {e}")

    # Prevent propagation to root logger
    pkg_logger.propagate = False


__all__ = [
    "setup_logging",
    "enable_quiet_mode",
    "disable_quiet_mode",
    "is_quiet_mode_enabled",
    "DEFAULT_LOG_FILE",
]
