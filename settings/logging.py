"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR

# Set per request by the API middleware; "-" for CLI runs and startup
NO_REQUEST = "-"


def setup_logging(level: str = "INFO", to_file: bool = True):
    """Configure logging with console and optional file output.

    Every record carries ``extra[request]`` ("GET /api/schools/1/stats"), so
    cache and query lines can be traced back to the request that caused them.
    """
    logger.remove()
    logger.configure(extra={"request": NO_REQUEST})

    logger.add(
        sys.stderr,
        format=(
            "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | "
            "<cyan>{extra[request]}</cyan> | <level>{message}</level>"
        ),
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        logger.add(
            LOG_DIR / "ges_stats_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {extra[request]} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="14 days",
            compression="gz",
        )
        # Failed requests also go to their own file for triage
        logger.add(
            LOG_DIR / "ges_stats_errors.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {extra[request]} | {name}:{function}:{line} | {message}",
            level="ERROR",
            rotation="10 MB",
            retention=5,
            backtrace=False,
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
