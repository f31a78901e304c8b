import os
from logging import Logger, getLogger, StreamHandler, Formatter

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_handler = StreamHandler()
_handler.setFormatter(Formatter(LOG_FORMAT))


def get_logger(name: str) -> Logger:
    """
    Returns a named logger writing to the console.
    Level comes from LOG_LEVEL (default INFO).
    """
    logger = getLogger(name)
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    logger.propagate = False
    return logger
