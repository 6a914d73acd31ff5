"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_MAX_LOG_SIZE


class LogConfig(BaseModel):
    """Logfile configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Lowest level written to the logfile")
    max_size_bytes: int = Field(
        DEFAULT_MAX_LOG_SIZE, gt=0, description="Logfile is started over once it grows past this size"
    )
