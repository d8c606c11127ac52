"""
Environment-driven settings

[Variables]
- NORDIC_IDS_LOG_LEVEL: logging level name (default INFO)
- NORDIC_IDS_LOG_FILE: also log to this file (default: console only)
- NORDIC_IDS_NODE_NAME: derive the default identifier node from this name
"""
import os


class Config:
    """Package settings, read once at import"""
    
    LOG_LEVEL = os.environ.get('NORDIC_IDS_LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('NORDIC_IDS_LOG_FILE') or None
    NODE_NAME = os.environ.get('NORDIC_IDS_NODE_NAME') or None
    
    @classmethod
    def reload(cls):
        """Re-read the environment (tests, long-running hosts)"""
        cls.LOG_LEVEL = os.environ.get('NORDIC_IDS_LOG_LEVEL', 'INFO')
        cls.LOG_FILE = os.environ.get('NORDIC_IDS_LOG_FILE') or None
        cls.NODE_NAME = os.environ.get('NORDIC_IDS_NODE_NAME') or None
