import logging
from typing import Optional


def prepare_logger(logger_name: str, level: Optional[str] = None):
    logger = logging.getLogger(logger_name)
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(_resolve_level(level))
    return logger


def _resolve_level(level: Optional[str]) -> int:
    # Unknown level names fall back to INFO
    if not level:
        return logging.DEBUG
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO
