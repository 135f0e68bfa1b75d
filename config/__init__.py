"""
Configuration module for the LIPIcs pandoc filter.
"""
from .constants import *
from .logging_config import setup_logger, get_logger
from .settings import FilterSettings, settings

__all__ = [
    # Logging
    'setup_logger',
    'get_logger',
    # Settings
    'FilterSettings',
    'settings',
    # Constants (all exported via *)
]
