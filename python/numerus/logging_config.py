"""
Logging configuration for Numerus.

The MCP server speaks JSON-RPC over stdout in stdio mode, so NOTHING may be
logged to stdout. Logs go to a daily file under .numerus/logs (or
NUMERUS_LOG_DIR); stderr console logging is opt-in for HTTP mode.

Library code only calls get_logger(); handlers are installed by
setup_logging(), which the server calls on startup.
"""

import logging
import logging.handlers
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "numerus"
DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"


class FlushingHandler(logging.handlers.TimedRotatingFileHandler):
    """Daily rotating file handler that flushes after every record."""

    def emit(self, record):
        super().emit(record)
        self.flush()


def _resolve_level(level: Optional[Union[int, str]]) -> int:
    if level is None:
        level = os.environ.get("NUMERUS_LOG_LEVEL", "INFO")
    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    # getLevelName returns "Level X" for unknown names
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Optional[Union[int, str]] = None,
    backup_count: int = 30,
    console: bool = False,
) -> logging.Logger:
    """
    Set up file-based logging with daily rotation.

    Safe to call repeatedly: handlers are only added once.

    Args:
        log_dir: Directory for log files (default: NUMERUS_LOG_DIR or .numerus/logs)
        level: Level number or name (default: NUMERUS_LOG_LEVEL or INFO)
        backup_count: Number of daily files to keep (default: 30)
        console: Also log to stderr (HTTP mode only)

    Returns:
        The configured "numerus" logger
    """
    if log_dir is None:
        env_dir = os.environ.get("NUMERUS_LOG_DIR")
        log_dir = Path(env_dir) if env_dir else Path.cwd() / ".numerus" / "logs"

    log_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_resolve_level(level))

    has_file_handler = any(isinstance(h, FlushingHandler) for h in logger.handlers)
    has_console_handler = any(
        isinstance(h, logging.StreamHandler) and h.stream == sys.stderr
        for h in logger.handlers
    )

    if has_file_handler and (not console or has_console_handler):
        return logger

    formatter = logging.Formatter(DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    if not has_file_handler:
        log_file = log_dir / f"numerus-{datetime.now().strftime('%Y-%m-%d')}.log"
        file_handler = FlushingHandler(
            log_file,
            when="midnight",
            interval=1,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        logger.info(f"Numerus logging initialized: {log_file}")
        logger.info(f"Log level: {logging.getLevelName(logger.level)}")

    if console and not has_console_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)
        logger.info("Console logging enabled (HTTP mode)")

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Get a Numerus logger.

    Args:
        name: Logger name, usually __name__ of the calling module

    Returns:
        Logger instance (a child of "numerus" for package modules)
    """
    return logging.getLogger(name)
