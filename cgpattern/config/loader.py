"""Config loader for codec and logging settings.

Provides type-safe access to configuration with validation, default
fallbacks, and Windows-friendly path handling.
"""
import logging
from pathlib import Path
from typing import Any, Optional
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoadError(Exception):
    """Raised when configuration loading or validation fails."""
    pass


class CodecSettings(BaseModel):
    """Pattern codec settings."""

    strict_levels: bool = True
    extension: str = ".cgp"
    encoding: str = "utf-8"

    @field_validator("extension")
    @classmethod
    def validate_extension(cls, v: str) -> str:
        """Validate extension is a dotted suffix."""
        if not v.startswith(".") or len(v) < 2 or "/" in v or "\\" in v:
            raise ValueError(f"extension must look like '.cgp', got {v!r}")
        return v

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Validate encoding is known to Python."""
        import codecs
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"unknown encoding {v!r}") from e
        return v


class LoggingSettings(BaseModel):
    """Logging settings."""

    level: str = Field(default="WARNING")
    log_dir: Optional[str] = None
    enable_json: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalize the level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}, got {v!r}")
        return level


class PatternConfig(BaseModel):
    """Top-level configuration."""

    codec: CodecSettings = Field(default_factory=CodecSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


class ConfigLoader:
    """Config loader with validation and default fallbacks."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config loader.

        Args:
            config_path: Path to config file. Defaults to config/cgpattern.yaml
        """
        if config_path is None:
            self.config_path = Path("config") / "cgpattern.yaml"
        else:
            self.config_path = config_path

        # Normalize path separators for Windows compatibility
        self.config_path = Path(str(self.config_path).replace("\\", "/"))

        logger.debug("Config loader initialized with path: %s", self.config_path)

    def load_config(self) -> PatternConfig:
        """Load and validate configuration from file.

        Returns:
            Validated PatternConfig instance

        Raises:
            ConfigLoadError: If loading or validation fails
        """
        if not self.config_path.exists():
            logger.debug("Config file not found: %s, using defaults", self.config_path)
            return PatternConfig()

        logger.info("Loading config from: %s", self.config_path)

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            error_msg = f"Invalid YAML in config file: {e}"
            logger.error(error_msg)
            raise ConfigLoadError(error_msg) from e
        except OSError as e:
            error_msg = f"Could not read config file {self.config_path}: {e}"
            logger.error(error_msg)
            raise ConfigLoadError(error_msg) from e

        if data is None:
            logger.warning("Config file is empty, using defaults")
            return PatternConfig()
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config root must be a mapping, got {type(data).__name__}")

        try:
            config = PatternConfig(**data)
        except ValidationError as e:
            error_msg = f"Config validation failed: {e}"
            logger.error(error_msg)
            raise ConfigLoadError(error_msg) from e

        logger.info("Config loaded and validated successfully")
        return config

    def get_section(self, section_name: str) -> Any:
        """Get a specific config section by name.

        Raises:
            ConfigLoadError: If section doesn't exist
        """
        config = self.load_config()

        section_map = {
            "codec": config.codec,
            "logging": config.logging,
        }

        if section_name not in section_map:
            available = ", ".join(section_map.keys())
            raise ConfigLoadError(f"Unknown config section '{section_name}'. Available: {available}")

        return section_map[section_name]

    def reload_config(self) -> PatternConfig:
        """Reload configuration from file."""
        logger.info("Reloading configuration")
        return self.load_config()
