"""Locate the qmpo executable to bind the scheme to."""

import shutil
import sys
from pathlib import Path

from ...constants import EXECUTABLE_NAME


def find_qmpo_executable(explicit: Path | None = None) -> Path:
    """Find the qmpo console script.

    Search order: explicit path, ``qmpo`` on PATH, ``qmpo`` beside the running interpreter.

    Raises:
        FileNotFoundError: If the explicit path does not exist or nothing was found
    """
    if explicit is not None:
        explicit = Path(explicit).expanduser().absolute()
        if not explicit.exists():
            raise FileNotFoundError(f"qmpo executable not found at: {explicit}")
        return explicit

    on_path = shutil.which(EXECUTABLE_NAME)
    if on_path:
        return Path(on_path).absolute()

    interpreter_dir = Path(sys.executable).parent
    for name in (EXECUTABLE_NAME, f"{EXECUTABLE_NAME}.exe"):
        candidate = interpreter_dir / name
        if candidate.exists():
            return candidate

    raise FileNotFoundError("could not find qmpo executable; please specify --path")
