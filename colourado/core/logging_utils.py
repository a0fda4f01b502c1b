"""Logging utilities for consistent status messages."""

import logging
import sys
from typing import Optional


class StatusLogger:
    """Status logger used by the CLI and configuration layer.

    Wraps a standard library logger and prefixes messages with
    [OK] or [WARNING] so output stays easy to scan.
    """

    def __init__(self, name: str = "colourado", verbose: bool = True):
        """Initialize the status logger.

        Args:
            name: Logger name for Python logging integration
            verbose: If False, suppresses info messages
        """
        self.verbose = verbose
        self._logger = logging.getLogger(name)

        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter('%(message)s'))
            self._logger.addHandler(handler)
            self._logger.setLevel(logging.INFO)
            self._logger.propagate = False

    def success(self, message: str) -> None:
        """Log a success message with [OK] prefix."""
        if self.verbose:
            self._logger.info(f"[OK] {message}")

    def warning(self, message: str) -> None:
        """Log a warning message with [WARNING] prefix."""
        self._logger.warning(f"[WARNING] {message}")

    def info(self, message: str) -> None:
        """Log an info message (respects verbose setting)."""
        if self.verbose:
            self._logger.info(message)

    def header(self, title: str, width: int = 40) -> None:
        """Print a header section.

        Args:
            title: The header title
            width: Width of the separator line
        """
        if not self.verbose:
            return
        self._logger.info("=" * width)
        self._logger.info(title)
        self._logger.info("=" * width)

    def set_verbose(self, verbose: bool) -> None:
        """Set verbose mode."""
        self.verbose = verbose


_default_logger: Optional[StatusLogger] = None


def get_logger(verbose: bool = True) -> StatusLogger:
    """Get the shared status logger instance.

    Args:
        verbose: If False, info and success messages are suppressed

    Returns:
        StatusLogger instance
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = StatusLogger(verbose=verbose)
    else:
        _default_logger.set_verbose(verbose)
    return _default_logger
