"""
Core functionality for fuzz-wordlist
"""

from .config import Config, WordlistFilterConfig, load_config
from .exceptions import FuzzWordlistError, WordlistReadError, WordlistSourceError
from .logger import get_component_logger, configure_logging

__all__ = [
    "Config",
    "WordlistFilterConfig",
    "load_config",
    "FuzzWordlistError",
    "WordlistReadError",
    "WordlistSourceError",
    "get_component_logger",
    "configure_logging",
]
