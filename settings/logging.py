"""Logging configuration."""

import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL


def _is_audit(record) -> bool:
    return record["extra"].get("audit", False)


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True):
    """Configure console logging, plus rotating ledger and audit files."""
    logger.remove()

    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>",
        level=level,
        colorize=True,
    )

    if to_file:
        LOG_DIR.mkdir(exist_ok=True)
        logger.add(
            LOG_DIR / "ballot_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}",
            level="DEBUG",
            rotation="00:00",
            retention="7 days",
            compression="gz",
        )
        # Events bound with audit=True also go to their own file
        logger.add(
            LOG_DIR / "audit_{time:YYYY-MM-DD}.log",
            format="{time:YYYY-MM-DD HH:mm:ss} | {extra[kind]} | {message}",
            level="INFO",
            filter=_is_audit,
            rotation="00:00",
            retention="30 days",
        )
        logger.info("Logging to {}", LOG_DIR)

    return logger
