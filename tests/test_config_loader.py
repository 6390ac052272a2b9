"""Test config loader utility."""
import pytest
from pathlib import Path
from unittest.mock import patch, mock_open

from cgpattern.config.loader import (
    CodecSettings,
    ConfigLoader,
    ConfigLoadError,
    LoggingSettings,
    PatternConfig,
)


def test_config_loader_initialization():
    """Test ConfigLoader initializes correctly."""
    loader = ConfigLoader()
    assert loader.config_path == Path("config") / "cgpattern.yaml"
    assert isinstance(loader.config_path, Path)


def test_windows_separators_normalized():
    loader = ConfigLoader(Path("config\\custom.yaml"))
    assert loader.config_path == Path("config/custom.yaml")


def test_load_valid_config(tmp_path):
    """Test loading valid config file."""
    config_path = tmp_path / "cgpattern.yaml"
    config_path.write_text("""
codec:
  strict_levels: false
  extension: ".map"
  encoding: "latin-1"

logging:
  level: debug
  log_dir: "logs"
  enable_json: true
""", encoding="utf-8")

    config = ConfigLoader(config_path).load_config()

    assert isinstance(config.codec, CodecSettings)
    assert isinstance(config.logging, LoggingSettings)
    assert config.codec.strict_levels is False
    assert config.codec.extension == ".map"
    assert config.codec.encoding == "latin-1"
    assert config.logging.level == "DEBUG"
    assert config.logging.log_dir == "logs"
    assert config.logging.enable_json is True


def test_config_loader_defaults():
    """Test default fallback values when config sections are missing."""
    config_yaml = """
codec:
  strict_levels: false
"""

    with patch("builtins.open", mock_open(read_data=config_yaml)):
        with patch("pathlib.Path.exists", return_value=True):
            config = ConfigLoader().load_config()

    assert config.codec.strict_levels is False
    assert config.codec.extension == ".cgp"
    assert config.logging == LoggingSettings()


def test_missing_file_uses_defaults(tmp_path):
    config = ConfigLoader(tmp_path / "absent.yaml").load_config()
    assert config == PatternConfig()


def test_empty_file_uses_defaults(tmp_path):
    config_path = tmp_path / "empty.yaml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader(config_path).load_config() == PatternConfig()


def test_invalid_yaml(tmp_path):
    config_path = tmp_path / "broken.yaml"
    config_path.write_text("codec: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="Invalid YAML"):
        ConfigLoader(config_path).load_config()


def test_non_mapping_root(tmp_path):
    config_path = tmp_path / "list.yaml"
    config_path.write_text("- codec\n- logging\n", encoding="utf-8")

    with pytest.raises(ConfigLoadError):
        ConfigLoader(config_path).load_config()


@pytest.mark.parametrize("section", [
    "codec:\n  extension: cgp\n",
    "codec:\n  extension: \".\"\n",
    "codec:\n  encoding: no-such-codec\n",
    "logging:\n  level: LOUD\n",
    "codec:\n  strict_levels: maybe\n",
])
def test_validation_errors(tmp_path, section):
    config_path = tmp_path / "bad.yaml"
    config_path.write_text(section, encoding="utf-8")

    with pytest.raises(ConfigLoadError, match="validation failed"):
        ConfigLoader(config_path).load_config()


def test_get_section(tmp_path):
    config_path = tmp_path / "cgpattern.yaml"
    config_path.write_text("logging:\n  level: info\n", encoding="utf-8")
    loader = ConfigLoader(config_path)

    assert loader.get_section("logging").level == "INFO"
    assert loader.get_section("codec") == CodecSettings()

    with pytest.raises(ConfigLoadError, match="Unknown config section"):
        loader.get_section("rendering")


def test_reload_config_picks_up_changes(tmp_path):
    config_path = tmp_path / "cgpattern.yaml"
    config_path.write_text("codec:\n  strict_levels: true\n", encoding="utf-8")
    loader = ConfigLoader(config_path)
    assert loader.load_config().codec.strict_levels is True

    config_path.write_text("codec:\n  strict_levels: false\n", encoding="utf-8")
    assert loader.reload_config().codec.strict_levels is False
