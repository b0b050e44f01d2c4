import logging

from digital_twin.settings import settings

_FORMAT = "%(asctime)s %(levelname)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Named logger with a single stream handler, level from settings.LOG_LEVEL."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(h)
    logger.setLevel(settings.LOG_LEVEL.upper())
    return logger
