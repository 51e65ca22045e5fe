"""Centralized application configuration."""

import tomllib
from pathlib import Path
from typing import Any, Literal, get_args

from pydantic import BaseModel, ConfigDict, Field, computed_field

DEFAULT_DATA_DIR = Path.home() / ".local" / "kak-json-ui"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Config(BaseModel):
    """Application-wide configuration."""

    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(description="Base directory for all application data")
    skip_malformed: bool = Field(default=False, description="Keep decoding after a malformed message instead of aborting")
    log_level: LogLevel = Field(default="INFO", description="Minimum level written to the log file")

    @computed_field(description="Optional TOML configuration file")
    @property
    def config_path(self) -> Path:
        """Optional TOML configuration file."""
        return self.data_dir / "config.toml"

    @computed_field(description="Log file")
    @property
    def log_path(self) -> Path:
        """Log file."""
        return self.data_dir / "kak-json-ui.log"

    @staticmethod
    def build(data_dir: Path | None = None) -> "Config":
        """Build a Config from defaults and optional config.toml."""
        resolved_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        config_path = resolved_dir / "config.toml"

        kwargs: dict[str, Any] = {"data_dir": resolved_dir}
        if config_path.is_file():
            with config_path.open("rb") as f:
                toml_data = tomllib.load(f)
            if isinstance(toml_data.get("skip_malformed"), bool):
                kwargs["skip_malformed"] = toml_data["skip_malformed"]
            if toml_data.get("log_level") in LOG_LEVELS:
                kwargs["log_level"] = toml_data["log_level"]

        return Config(**kwargs)
