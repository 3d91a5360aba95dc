import sys
from typing import Optional
from loguru import logger as loguru_logger

from parking_tracker.config.settings_env import settings


def initialize_logger(dev_mode: Optional[bool] = None):
    """Initialize the logger based on DEV_MODE setting."""
    if dev_mode is None:
        dev_mode = settings.DEV_MODE

    loguru_logger.remove()

    if dev_mode:
        loguru_logger.add(sys.stderr, level="TRACE")
    else:
        loguru_logger.add(sys.stderr, level="INFO")

    return loguru_logger


# Initialize logger
logger = initialize_logger()
