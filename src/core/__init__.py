"""Core modules for the Discord bot."""
from .config import BotConfig, load_config
from .exceptions import ConfigError, DataFormatError, PlatformError

__all__ = [
    'BotConfig',
    'load_config',
    'ConfigError',
    'DataFormatError',
    'PlatformError',
]
