"""
Configuration module for textps.
"""
from .constants import *
from .logging_config import setup_logger, get_logger
from .settings import Settings

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    # Settings
    'Settings',
    # Constants (all exported via *)
]
