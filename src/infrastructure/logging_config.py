import logging
import sys
from pythonjsonlogger.json import JsonFormatter
from .config import settings

LOGGER_NAME = "mindfulinsights"


def get_logger(name: str = LOGGER_NAME, log_level: str = settings.LOG_LEVEL):
    """
    Returns a non-propagating logger that writes JSON lines to stdout.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)
    logger.propagate = False

    formatter = JsonFormatter(
        '%(asctime)s %(name)s %(levelname)s %(module)s %(funcName)s %(message)s'
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)

    return logger


def setup_logging():
    """Re-apply LOG_LEVEL to the application logger at process start."""
    logger.setLevel(settings.LOG_LEVEL)
    return logger


# Shared by the app and the repository
logger = get_logger()
