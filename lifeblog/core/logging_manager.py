#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Build logging for lifeblog.

Every CLI run gets a BlogLogger that writes a rotating per-component log
(``build.log``, ``serve.log``...) plus a shared ``errors.log``, and echoes
warnings to the console. Library code accepts an optional logger and
wraps it with ``safe_logger`` so it can log unconditionally.
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


class BlogLogger:
    """
    Per-component logger for build, scaffold and preview operations.

    Attributes:
        log_dir: Directory for log files
        component_name: Name of the component using this logger
        main_logger: Logger for all build activity
        error_logger: Dedicated logger for errors only
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "lifeblog",
        max_bytes: int = 2 * 1024 * 1024,
        backup_count: int = 3,
        console_level: int = logging.WARNING,
    ) -> None:
        """
        Initialize the logger and its handlers.

        Args:
            log_dir: Directory for log files
            component_name: Component name ('build', 'serve', 'new')
            max_bytes: Maximum log file size before rotation (default: 2MB)
            backup_count: Number of rotated files to keep (default: 3)
            console_level: Minimum level echoed to stderr
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self.console_level = console_level
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        """Attach file and console handlers to fresh component loggers."""
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = logging.getLogger(f"lifeblog.{self.component_name}")
        self.main_logger.setLevel(logging.DEBUG)
        self.main_logger.propagate = False
        self.main_logger.handlers = []

        self.error_logger = logging.getLogger(f"lifeblog.{self.component_name}.errors")
        self.error_logger.setLevel(logging.ERROR)
        self.error_logger.propagate = False
        self.error_logger.handlers = []

        self._add_file_handler(
            self.main_logger,
            self.log_dir / f"{self.component_name}.log",
            logging.DEBUG,
        )
        self._add_file_handler(
            self.error_logger,
            self.log_dir / "errors.log",
            logging.ERROR,
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.console_level)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console_handler)

    def _add_file_handler(
        self, logger: logging.Logger, file_path: Path, level: int
    ) -> None:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)

    def close(self) -> None:
        """Close and detach all handlers (releases log files)."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    @staticmethod
    def _with_details(prefix: str, message: str, details: Optional[Dict[str, Any]]) -> str:
        if details:
            return f"{prefix} - {message}: {json.dumps(details, default=str)}"
        return f"{prefix} - {message}"

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a completed build step (page written, asset copied...).

        Args:
            operation: Name of the operation
            details: Optional operation details dictionary
        """
        self.main_logger.info(self._with_details("OPERATION", operation, details or {}))

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(self._with_details("DEBUG", message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(self._with_details("INFO", message, details))

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        self.main_logger.warning(self._with_details("WARNING", message, details))

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error with context and traceback to ``errors.log``.

        Args:
            error: Exception that occurred
            context: Optional context information dictionary
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
        Log full error details to file and return a short CLI message.

        Args:
            error: Exception to log
            context: Where the error occurred
            show_traceback: Append the traceback to the returned message

        Returns:
            Message suitable for ``click.echo(..., err=True)``

        Examples:
            >>> logger.log_cli_error(BuildError("dist is not writable"))
            '❌ BuildError: dist is not writable'
        """
        self.log_error(error, context or {"source": "cli"})
        message = f"❌ {type(error).__name__}: {error}"
        if show_traceback:
            return f"{message}\n\n{traceback.format_exc()}"
        return message


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Standard error exit for CLI commands.

    Logs the error through the context's logger, prints a one-line
    message (with traceback when ``--verbose``) and exits.

    Args:
        ctx: Click context holding ``logger`` and ``verbose``
        error: Exception that occurred
        operation: Name of the failed operation (e.g. 'build')
        additional_context: Extra context (paths, slugs)
        exit_code: Process exit code (default: 1)
    """
    obj = ctx.obj or {}
    logger: Optional[BlogLogger] = obj.get("logger")
    verbose: bool = obj.get("verbose", False)

    context: Dict[str, Any] = {"operation": operation}
    if additional_context:
        context.update(additional_context)

    error_msg = safe_logger(logger).log_cli_error(error, context, show_traceback=verbose)
    click.echo(error_msg, err=True)
    sys.exit(exit_code)


class NullLogger:
    """
    Logger with the BlogLogger interface that does nothing.

    Used by ``safe_logger`` so library code never needs ``if logger:``.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return f"❌ {type(error).__name__}: {error}"


_null_logger = NullLogger()


def safe_logger(logger: Optional[BlogLogger]) -> BlogLogger:
    """
    Return the provided logger, or a NullLogger if None.

    Args:
        logger: BlogLogger instance or None

    Returns:
        The provided logger or the shared NullLogger
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]
