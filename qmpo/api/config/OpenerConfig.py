"""File manager opener configuration."""

from pydantic import BaseModel, ConfigDict, Field


class OpenerConfig(BaseModel):
    """How the open command presents a path in the file manager."""

    model_config = ConfigDict(extra="forbid")

    reveal_files: bool = Field(
        True, description="Open the parent directory with the file selected when the URI points to a file"
    )
