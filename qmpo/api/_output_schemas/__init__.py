"""Pydantic output schemas for API commands."""

from ._base import BaseOutputSchema
from .handler import HandlerRegisterOutput, HandlerStatusOutput, HandlerUnregisterOutput
from .uri import OpenOutput, ParseOutput

__all__ = [
    "BaseOutputSchema",
    "HandlerRegisterOutput",
    "HandlerStatusOutput",
    "HandlerUnregisterOutput",
    "OpenOutput",
    "ParseOutput",
]
