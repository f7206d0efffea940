"""
Logging configuration for the NetSuite client.

Provides:
- Log level resolution from LOG_LEVEL / DEBUG
- Console and rotating file handlers
- GitHub Actions annotations for warnings and errors
- Timing of individual API calls
"""

from datetime import datetime
import logging
import logging.handlers
import os
from pathlib import Path
import sys
import time
from typing import Any

# -------------------- Configuration --------------------


# Log directory
LOG_DIR = Path.home() / ".cache" / "netsuite-rest" / "logs"

# Log retention
LOG_RETENTION_DAYS = 3

# Log format strings
CONSOLE_FORMAT = "%(name)s %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
GITHUB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

# Date format for logs
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


# -------------------- Utility Functions --------------------


def get_log_level() -> int:
    """
    Get the current log level from environment configuration.

    Checks LOG_LEVEL environment variable first, then DEBUG flag.

    Returns:
        Logging level constant (logging.DEBUG, logging.INFO, etc.)
    """
    level_str = os.getenv("LOG_LEVEL", "").upper()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }

    if level_str in level_map:
        return level_map[level_str]

    # Fall back to DEBUG env var
    if os.getenv("DEBUG", "").lower() in ("true", "1", "yes"):
        return logging.DEBUG

    return logging.INFO


def is_github_actions() -> bool:
    """Check if running in GitHub Actions environment."""
    return os.getenv("GITHUB_ACTIONS") == "true"


def get_log_file_path() -> Path:
    """
    Get the path to today's log file, creating the log directory if needed.
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    today = datetime.now().strftime("%Y-%m-%d")
    return LOG_DIR / f"netsuite-rest-{today}.log"


def cleanup_old_logs() -> None:
    """Remove log files older than LOG_RETENTION_DAYS."""
    if not LOG_DIR.exists():
        return

    cutoff = time.time() - (LOG_RETENTION_DAYS * 24 * 60 * 60)

    try:
        for log_file in LOG_DIR.glob("netsuite-rest-*.log*"):
            if log_file.stat().st_mtime < cutoff:
                log_file.unlink()
                logging.getLogger(__name__).info(f"Removed old log file: {log_file}")
    except OSError as e:
        logging.getLogger(__name__).warning(f"Failed to cleanup old logs: {e}")


# -------------------- Formatter Classes --------------------


class GitHubActionsFormatter(logging.Formatter):
    """
    Formatter that turns warnings and errors into GitHub Actions annotations.
    """

    def __init__(self) -> None:
        super().__init__(fmt=GITHUB_FORMAT, datefmt=DATE_FORMAT)

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)

        if record.levelno >= logging.ERROR:
            formatted = f"::error::{formatted}"
        elif record.levelno >= logging.WARNING:
            formatted = f"::warning::{formatted}"

        return formatted


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    if is_github_actions():
        handler.setFormatter(GitHubActionsFormatter())
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return handler


def _file_handler(level: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        get_log_file_path(),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=5,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, DATE_FORMAT))
    return handler


# -------------------- Performance Monitoring --------------------


class PerformanceMonitor:
    """
    Context manager for monitoring operation performance.

    Logs execution time and optional metadata.

    Example:
        >>> with PerformanceMonitor(logger, "POST query/v1/suiteql"):
        ...     response = await client.post(...)
    """

    def __init__(
        self,
        logger: logging.Logger,
        operation_name: str,
        log_level: int = logging.DEBUG,
        **metadata: Any,
    ) -> None:
        self.logger = logger
        self.operation_name = operation_name
        self.log_level = log_level
        self.metadata = metadata
        self.start_time: float | None = None
        self.elapsed: float | None = None

    def __enter__(self) -> "PerformanceMonitor":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is None:
            return

        self.elapsed = time.perf_counter() - self.start_time
        status = "failed" if exc_type is not None else "completed"
        msg = f"{self.operation_name} {status} in {self.elapsed:.2f}s"

        if self.metadata:
            metadata_str = ", ".join(f"{k}={v}" for k, v in self.metadata.items())
            msg = f"{msg} ({metadata_str})"

        self.logger.log(self.log_level, msg)


# -------------------- Initialization --------------------


def initialize_logging(level: int | None = None, file: bool = False) -> None:
    """
    Initialize logging for command-line use.

    Sets up the root logger and prunes old log files.
    Should be called once at application startup.
    """
    level = level or get_log_level()

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(level))

    if file:
        root_logger.addHandler(_file_handler(level))

    cleanup_old_logs()

    logging.getLogger(__name__).debug(
        f"Logging initialized. Level: {logging.getLevelName(level)}"
    )
