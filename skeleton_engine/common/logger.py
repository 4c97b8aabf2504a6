# skeleton_engine/common/logger.py
import logging
from typing import Union
from .enums import LogLevel

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger(name: str = 'skeleton_engine',
                 level: Union[LogLevel, str] = LogLevel.INFO) -> logging.Logger:
    """
    Configures the package logger with a single console handler.
    Calling it again only updates the level.
    """
    level_name = LogLevel(level).value

    logger = logging.getLogger(name)
    logger.setLevel(level_name)

    # Don't stack handlers on repeated setup
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    logger.addHandler(handler)
    return logger
