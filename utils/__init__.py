# utils/__init__.py
# This file is part of Propsat - A Propositional Formula Checker
#
# Utility module exports

from .logger import (
    LogLevel,
    PropLogger,
    get_logger,
    set_log_level,
    configure_logging,
)

__all__ = [
    "LogLevel",
    "PropLogger",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
