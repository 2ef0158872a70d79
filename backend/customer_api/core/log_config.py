"""Logging setup.

structlog is used throughout the API; stdlib logging is configured too so
uvicorn and SQLAlchemy output honours the same LOG_LEVEL.
"""

import logging

import structlog


def configure_logging(log_level: str) -> None:
    """Configure stdlib logging and structlog at the given level.

    Unknown level names fall back to INFO.

    Args:
        log_level: Level name such as "DEBUG" or "INFO".
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
