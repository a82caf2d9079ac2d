import logging

from utils.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> None:
    """Configure the root logger once for the whole application."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
