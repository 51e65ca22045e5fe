"""Tests for Config model validation, computed paths and config.toml loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from kak_json_ui.config import Config

DATA_DIR = Path("/fake/data-dir")


class TestConfigPaths:
    """Computed path properties derive from data_dir."""

    def test_config_path(self):
        """Config file is data_dir / config.toml."""
        cfg = Config(data_dir=DATA_DIR)
        assert cfg.config_path == DATA_DIR / "config.toml"

    def test_log_path(self):
        """Log file is data_dir / kak-json-ui.log."""
        cfg = Config(data_dir=DATA_DIR)
        assert cfg.log_path == DATA_DIR / "kak-json-ui.log"


class TestConfigValidation:
    """Pydantic field constraints."""

    def test_defaults(self):
        """Default values for optional fields."""
        cfg = Config(data_dir=DATA_DIR)
        assert cfg.skip_malformed is False
        assert cfg.log_level == "INFO"

    def test_unknown_log_level(self):
        """log_level outside the allowed set is rejected."""
        with pytest.raises(ValidationError):
            Config(data_dir=DATA_DIR, log_level="TRACE")


class TestConfigBuild:
    """Config.build reads the optional config.toml."""

    def test_without_file(self, tmp_path: Path):
        """Missing config.toml gives defaults."""
        cfg = Config.build(tmp_path)
        assert cfg.data_dir == tmp_path
        assert cfg.skip_malformed is False

    def test_reads_file(self, tmp_path: Path):
        """Known keys of the right type are applied."""
        (tmp_path / "config.toml").write_text('skip_malformed = true\nlog_level = "DEBUG"\n')
        cfg = Config.build(tmp_path)
        assert cfg.skip_malformed is True
        assert cfg.log_level == "DEBUG"

    def test_ignores_wrong_types(self, tmp_path: Path):
        """Values of the wrong type or unknown levels fall back to defaults."""
        (tmp_path / "config.toml").write_text('skip_malformed = "yes"\nlog_level = "LOUD"\n')
        cfg = Config.build(tmp_path)
        assert cfg.skip_malformed is False
        assert cfg.log_level == "INFO"
