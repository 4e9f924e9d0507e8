"""
Configuration and logging utilities.
"""

from .config_loader import Config, load_config, save_config
from .logging_setup import configure_logging

__all__ = [
    'Config',
    'load_config',
    'save_config',
    'configure_logging',
]
