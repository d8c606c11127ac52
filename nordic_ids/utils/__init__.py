"""
Utils package
"""
from .config import Config
from .logger import logger, setup_logger, get_logger
from .constants import *

__all__ = ['Config', 'logger', 'setup_logger', 'get_logger']
