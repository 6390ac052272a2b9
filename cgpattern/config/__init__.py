"""Config package for codec and logging configuration.

Provides type-safe access to configuration sections with validation and defaults.
"""

from .loader import ConfigLoader, ConfigLoadError, PatternConfig
from .loader import CodecSettings, LoggingSettings

__all__ = [
    "ConfigLoader",
    "ConfigLoadError",
    "PatternConfig",
    "CodecSettings",
    "LoggingSettings",
]
