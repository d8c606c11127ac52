"""
Logging setup module

[Usage]
    from nordic_ids.utils.logger import get_logger
    log = get_logger(__name__)

[Application]
    from nordic_ids.utils.logger import setup_logger
    setup_logger('NordicIds')   # console, plus NORDIC_IDS_LOG_FILE when set
"""
import logging
from typing import Optional

from .config import Config


def setup_logger(name: str = __name__, log_file: Optional[str] = None,
                 level: Optional[str] = None) -> logging.Logger:
    """Configure and return a logger (idempotent)"""
    
    logger = logging.getLogger(name)
    
    if any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        return logger
    
    level = getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO)
    logger.setLevel(level)
    
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    
    # file handler, only when a log file is configured
    log_file = log_file or Config.LOG_FILE
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    
    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Return a logger below the package logger.
    
    Child loggers carry no handlers of their own; records propagate to
    the package logger configured by setup_logger.
    """
    if name is None:
        return logger
    if name == logger.name or name.startswith(logger.name + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f"{logger.name}.{name}")


# package logger, silent until the application calls setup_logger('NordicIds')
logger = logging.getLogger('NordicIds')
logger.addHandler(logging.NullHandler())
