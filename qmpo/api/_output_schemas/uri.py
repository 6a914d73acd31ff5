"""Output schemas for URI commands (open, parse)."""

from pydantic import Field

from ._base import BaseOutputSchema


class ParseOutput(BaseOutputSchema):
    """Output schema for the parse command."""

    uri: str = Field(..., description="URI as given on the command line")
    native_path: str = Field(..., description="Native path, empty string if parsing failed")
    shape: str = Field(..., description="unix, windows_local or unc; empty string if parsing failed")


class OpenOutput(BaseOutputSchema):
    """Output schema for the open command."""

    uri: str = Field(..., description="URI as given on the command line")
    native_path: str = Field(..., description="Native path parsed from the URI, empty string if parsing failed")
    resolved_path: str = Field(..., description="Path after symlink resolution, empty string if not resolved")
    is_file: bool = Field(..., description="True if the path is a file (opened with the file selected)")
    opened: bool = Field(..., description="True if the file manager was launched")
