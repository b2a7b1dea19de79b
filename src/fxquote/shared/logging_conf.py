"""
Logging Configuration - Handlers for the fxquote Command

Library modules only obtain loggers with logging.getLogger(__name__). The
command line entry point calls setup_logging once; build_handlers decides
where records go: stderr (kept apart from the rates and quotes printed on
stdout), a rotating fxquote.log file, both, or nowhere.

Files that USE this module:
- fxquote.app (setup_logging function for logging initialization)
- tests.test_logging_conf (unit tests for build_handlers)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "fxquote.log"

PathLike = Union[str, Path]


def resolve_log_path(log_file: Optional[PathLike], log_dir: Optional[PathLike]) -> Optional[Path]:
    """Return the log file path, creating its directory; log_dir takes precedence."""
    if log_dir:
        path = Path(log_dir) / LOG_FILE_NAME
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def console_enabled(log_to_stdout: Optional[bool]) -> bool:
    if log_to_stdout is not None:
        return log_to_stdout
    return os.environ.get("FXQUOTE_LOG_STDOUT", "true").lower() == "true"


def build_handlers(
    log_file: Optional[PathLike] = None,
    log_dir: Optional[PathLike] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    log_to_stdout: Optional[bool] = None,
) -> list[logging.Handler]:
    """
    Create the handlers for the configured outputs.

    Returns:
        Formatted handlers; a single NullHandler when every output is off,
        so records never reach logging's last-resort stderr handler
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: list[logging.Handler] = []

    if console_enabled(log_to_stdout):
        handlers.append(logging.StreamHandler(sys.stderr))

    path = resolve_log_path(log_file, log_dir)
    if path is not None:
        handlers.append(
            RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )

    if not handlers:
        return [logging.NullHandler()]

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    level=logging.INFO,
    log_file: Optional[PathLike] = None,
    log_dir: Optional[PathLike] = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    log_to_stdout: Optional[bool] = None,
) -> None:
    """
    Configure the root logger.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path to log file (enables file logging)
        log_dir: Optional directory for log files; the file is named fxquote.log
        max_bytes: Maximum size per log file before rotation (default: 10MB)
        backup_count: Number of backup log files to keep (default: 5)
        log_to_stdout: Log to stderr; defaults to the FXQUOTE_LOG_STDOUT
            environment variable ("true" unless set otherwise)
    """
    handlers = build_handlers(log_file, log_dir, max_bytes, backup_count, log_to_stdout)
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, handlers=handlers)
    logging.getLogger(__name__).debug(
        "Logging configured: %s, level=%s",
        ", ".join(type(h).__name__ for h in handlers),
        level,
    )
