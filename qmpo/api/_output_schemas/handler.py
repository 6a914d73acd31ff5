"""Output schemas for handler registration commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class HandlerRegisterOutput(BaseOutputSchema):
    """Output schema for handler register command."""

    platform: str = Field(..., description="Platform backend used (linux, darwin, windows)")
    executable: str = Field(..., description="Executable the scheme is bound to, empty string if not found")
    registered: bool = Field(..., description="True if registration completed")
    details: dict[str, Any] = Field(..., description="Backend-specific details (files written, registry keys)")


class HandlerUnregisterOutput(BaseOutputSchema):
    """Output schema for handler unregister command."""

    platform: str = Field(..., description="Platform backend used")
    unregistered: bool = Field(..., description="True if unregistration completed")
    details: dict[str, Any] = Field(..., description="Backend-specific details (files removed)")


class HandlerStatusOutput(BaseOutputSchema):
    """Output schema for handler status command."""

    platform: str = Field(..., description="Platform backend used")
    registered: bool = Field(..., description="True if qmpo is the active directory:// handler")
    details: dict[str, Any] = Field(..., description="Backend-specific status details")
