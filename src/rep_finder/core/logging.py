"""Loguru logging configuration for the API server and CLI.

One stderr sink, either human-readable or serialized JSON for log shippers,
plus an optional rotating log file.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_FILE_NAME = "rep-finder.log"
_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def setup_logging(log_level: str = "INFO", log_dir: str | None = None, json_logs: bool = False) -> None:
    """Replace Loguru's default sink with the service's sinks.

    Args:
        log_level: Minimum log level to emit (any case).
        log_dir: When set, also write ``rep-finder.log`` there, rotated daily and kept 7 days.
        json_logs: Emit stderr records as JSON lines instead of formatted text.
    """
    level = log_level.upper()
    logger.remove()
    if json_logs:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=_LOG_FORMAT)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        logger.add(log_path / LOG_FILE_NAME, level=level, format=_LOG_FORMAT, rotation="24h", retention="7 days")
