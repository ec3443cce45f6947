#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for textnote commands and pipelines.

Each component (cli, archive, ...) gets two rotating log files:
- <component>.log: everything from DEBUG up
- errors.log: errors with context and traceback, shared by components

Warnings and errors are echoed to the console as well.

Pipeline functions take an optional logger; wrap it with safe_logger()
so they can log unconditionally.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class TextnoteLogger:
    """
    Per-component logger writing to rotating files.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Component this logger belongs to
        main_logger: Logger for all activity
        error_logger: Logger for errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "textnote",
        max_bytes: int = 2 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Component identifier, e.g. 'cli' or 'archive'
            max_bytes: Size at which a log file rotates (default: 2MB)
            backup_count: Rotated files kept per log (default: 3)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._fresh_logger(
            f"textnote.{self.component_name}", logging.DEBUG
        )
        self.error_logger = self._fresh_logger(
            f"textnote.{self.component_name}.errors", logging.ERROR
        )
        # Error records are written to errors.log, not twice to component.log
        self.error_logger.propagate = False

        self._add_file_handler(
            self.main_logger, self.log_dir / f"{self.component_name}.log", logging.DEBUG
        )
        self._add_file_handler(self.error_logger, self.log_dir / "errors.log", logging.ERROR)

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

    @staticmethod
    def _fresh_logger(name: str, level: int) -> logging.Logger:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Only this logger's handlers; re-creating a component logger must
        # not stack duplicate handlers
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        return logger

    def _add_file_handler(self, logger: logging.Logger, file_path: Path, level: int) -> None:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    def _log(
        self, level: int, tag: str, message: str, details: Optional[Dict[str, Any]]
    ) -> None:
        if details:
            message = f"{message}: {json.dumps(details, default=str)}"
        self.main_logger.log(level, f"{tag} - {message}")

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record that an operation ran, with its parameters or results."""
        self._log(logging.INFO, "OPERATION", operation, details or {})

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.DEBUG, "DEBUG", message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.INFO, "INFO", message, details)

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self._log(logging.WARNING, "WARNING", message, details)

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Write an exception, its context and the current traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Optional key/value context (file, operation, ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """
        Log an error in full and return a one-line message for the terminal.

        Examples:
            >>> logger.log_cli_error(EmptyInputError("cannot parse Document from empty input"))
            'Error: EmptyInputError: cannot parse Document from empty input'
        """
        self.log_error(error, context or {"source": "cli"})
        message = format_cli_error(error)
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def format_cli_error(error: Exception) -> str:
    return f"Error: {type(error).__name__}: {error}"


class NullLogger:
    """
    TextnoteLogger stand-in that discards everything.

    Lets pipeline code call logger methods without checking for None.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error)


_null_logger = NullLogger()


def safe_logger(logger: Optional[TextnoteLogger]) -> TextnoteLogger:
    """
    The given logger, or the shared NullLogger when None.

    Use:
        safe_logger(logger).log_info("message")
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def handle_cli_error(
    ctx: click.Context,
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed CLI command and exit.

    Logs the error through the logger stored on the click context,
    prints a short message to stderr (with traceback when --verbose),
    and exits with `exit_code`. Never returns.

    Args:
        ctx: Click context with "logger" and "verbose" in ctx.obj
        error: Exception that occurred
        operation: Failed command, e.g. 'archive'
        additional_context: Extra context such as the note file path
        exit_code: Process exit status (default: 1)
    """
    obj = ctx.obj or {}
    logger: Optional[TextnoteLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context: Dict[str, Any] = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    message = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)
    click.echo(message, err=True)
    sys.exit(exit_code)
