"""Top-level qmpo configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .LogConfig import LogConfig
from .OpenerConfig import OpenerConfig


class QmpoConfig(BaseModel):
    """Top-level configuration for qmpo."""

    model_config = ConfigDict(extra="forbid")

    log: LogConfig = Field(default_factory=LogConfig)
    opener: OpenerConfig = Field(default_factory=OpenerConfig)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get qmpo home directory based on QMPO_HOME or default to ~/.qmpo."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file."""
        return get_config_path()

    @classmethod
    def get_logfile_path(cls) -> Path:
        """Get path to the logfile."""
        return get_home_dir("logfile")

    @classmethod
    def load(cls) -> "QmpoConfig":
        """Load and validate config from file.

        A missing config file yields the defaults.

        Raises:
            ValueError: If the config file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Configuration validation error: config file {path} must hold a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
