# utils/logger.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Logging utility for formula parsing and checking with configurable levels

import logging
import sys
from enum import Enum
from typing import Mapping, Optional


class LogLevel(Enum):
    """Log levels for formula checking."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class PropLogger:
    """Centralized logger for parsing and satisfiability checking."""

    def __init__(self, name: str = "propsat", level: LogLevel = LogLevel.INFO):
        """Initialize the logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(PropFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for parsing and checking events
    def token_accepted(self, kind: str, lexeme: str, position: int):
        """Log a token that passed the grammar guard."""
        self.debug(f"    token {kind:<10} {lexeme!r} at {position}")

    def tree_folded(self, kind: str, lexeme: str, depth: int, head):
        """Log the tree built so far at the current bracket level."""
        # Rendering walks the whole tree, so only pay for it when shown
        if self.is_debug():
            shown = "(empty)" if head is None else head
            self.debug(f"      🌱 folded {kind} {lexeme!r} → depth {depth}: {shown}")

    def parse_failed(self, message: str, position: int):
        """Log a rejected formula."""
        self.debug(f"💥 Parse failed at position {position}: {message}")

    def assignment_checked(self, assignment: Mapping, result: bool):
        """Log one assignment tried by the satisfiability search."""
        if self.is_debug():
            values = ", ".join(
                f"{literal}={'T' if value else 'F'}" for literal, value in assignment.items()
            )
            self.debug(f"    🔍 {{{values}}} → {result}")

    def verdict(self, formula: str, satisfiable: bool):
        """Log the satisfiability verdict."""
        mark = "✅ SATISFIABLE" if satisfiable else "❌ UNSATISFIABLE"
        self.info(f"\n>>> {formula}: {mark} <<<")


class PropFormatter(logging.Formatter):
    """Custom formatter with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[PropLogger] = None


def get_logger(name: str = "propsat") -> PropLogger:
    """Get or create the global logger instance.

    Args:
        name: Logger name (default: "propsat")

    Returns:
        PropLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = PropLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    logger = get_logger()
    logger.set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
