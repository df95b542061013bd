"""
Logging configuration for netscape_bookmarks.

The library itself only creates module loggers; applications embedding it
call setup_logging() once to route those records somewhere useful.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[int, str] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    console_output: bool = True,
) -> None:
    """
    Set up logging configuration.

    Args:
        level: Log level name or number
        log_file: Optional log file path; parent directories are created
        console_output: Whether to log to stdout as well
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    logger = logging.getLogger(__name__)
    logger.info(f"Log level: {logging.getLevelName(level)}")
    if log_file is not None:
        logger.info(f"Log file: {log_file}")

    # Reduce noise from markup engines
    logging.getLogger("bs4").setLevel(logging.WARNING)
    logging.getLogger("html5lib").setLevel(logging.WARNING)
