"""Logging configuration."""

import sys

from loguru import logger

from termcount.settings import LOG_DIR, LOG_FILE_LEVEL, LOG_LEVEL


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True, file_level: str = LOG_FILE_LEVEL):
    """Configure logging with console and optional file output.

    The file sink records cache hits, recounts and meta writes at ``file_level``
    so count drift can be traced per term after the fact.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "termcount_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level=file_level,
            rotation="00:00",
            retention="7 days",
        )
        logger.info("Logging to {} (file level {})", LOG_DIR, file_level)

    return logger
