"""Utility helpers shared by API and CLI."""

from .get_package_version import get_package_version
from .render_template import render_template

__all__ = ["get_package_version", "render_template"]
