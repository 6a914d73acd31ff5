"""Installed package version."""

from importlib.metadata import PackageNotFoundError, version


def get_package_version() -> str:
    """Return the installed qmpo version, or "unknown" when running from a source tree."""
    try:
        return version("qmpo")
    except PackageNotFoundError:
        return "unknown"
