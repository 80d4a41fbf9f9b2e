# utils/logger.py
# This file is part of Veritas - A Propositional Logic Truth Table Generator
#
# Logging utility for truth table generation with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for truth table generation."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class VeritasLogger:
    """Centralized logger for formula parsing and evaluation with clean output."""

    def __init__(self, name: str = "veritas", level: LogLevel = LogLevel.INFO):
        """Initialize the Veritas logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        # Diagnostics go to stderr so rendered tables stay clean on stdout
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(VeritasFormatter())

        self.logger.addHandler(console_handler)

        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

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

    # Specialized methods for truth table events
    def formula_parsed(self, source: str, rendered: str, variables: list):
        """Log a successfully parsed formula."""
        self.info(f"Formula: {source}")
        self.info(f"Parsed as: {rendered}")
        self.info(f"Variables: {', '.join(variables) if variables else '(none)'}")

    def table_built(self, row_count: int, step_count: int):
        """Log truth table construction."""
        self.debug(f"Truth table built: {row_count} rows, {step_count} step columns")


class VeritasFormatter(logging.Formatter):
    """Custom formatter for Veritas logging with clean output."""

    def format(self, record):
        # For INFO level, show message only (clean output)
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[VeritasLogger] = None


def get_logger(name: str = "veritas") -> VeritasLogger:
    """Get or create the global Veritas logger instance.

    Args:
        name: Logger name (default: "veritas")

    Returns:
        VeritasLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = VeritasLogger(name)
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
