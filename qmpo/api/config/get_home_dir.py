"""Get qmpo home directory path or path under it."""

import os
from pathlib import Path

from ...constants import QMPO_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get qmpo home directory path or path under it.

    Checks QMPO_HOME environment variable first, then HOME, defaults to ~/.qmpo.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "logfile")

    Returns:
        Absolute path to qmpo home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.qmpo")
        >>> get_home_dir("config.json")
        Path("/Users/user/.qmpo/config.json")
    """
    qmpo_home_env = os.environ.get("QMPO_HOME")
    if qmpo_home_env:
        qmpo_home = Path(qmpo_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            qmpo_home = Path(home_env) / QMPO_HOME_EXT
        else:
            qmpo_home = Path.home() / QMPO_HOME_EXT

    return qmpo_home / Path(*parts) if parts else qmpo_home
