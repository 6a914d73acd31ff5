"""Open a path in the platform file manager.

If the path is a file, the parent directory is opened with the file selected
where the platform supports it.
"""

import logging
import platform
import subprocess
from pathlib import Path

from .UnsupportedPlatformError import UnsupportedPlatformError

logger = logging.getLogger(__name__)

FILE_MANAGER1_DEST = "org.freedesktop.FileManager1"
FILE_MANAGER1_PATH = "/org/freedesktop/FileManager1"


def _spawn(command: list[str]) -> list[str]:
    logger.debug("Spawning %s", command)
    subprocess.Popen(command, stdin=subprocess.DEVNULL, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    return command


def _open_windows(path: Path, select: bool) -> list[str]:
    if select:
        return _spawn(["explorer.exe", f"/select,{path}"])
    return _spawn(["explorer.exe", str(path)])


def _open_darwin(path: Path, select: bool) -> list[str]:
    if select:
        return _spawn(["open", "-R", str(path)])
    return _spawn(["open", str(path)])


def _open_linux(path: Path, select: bool) -> list[str]:
    if not select:
        return _spawn(["xdg-open", str(path)])
    # ShowItems selects the file in Nautilus, Dolphin, Nemo and friends
    try:
        return _spawn(
            [
                "dbus-send",
                "--session",
                f"--dest={FILE_MANAGER1_DEST}",
                "--type=method_call",
                FILE_MANAGER1_PATH,
                f"{FILE_MANAGER1_DEST}.ShowItems",
                f"array:string:{path.as_uri()}",
                "string:",
            ]
        )
    except OSError as e:
        logger.debug("dbus-send unavailable (%s), opening parent directory", e)
        return _spawn(["xdg-open", str(path.parent)])


_OPENERS = {
    "windows": _open_windows,
    "darwin": _open_darwin,
    "linux": _open_linux,
}


def open_in_file_manager(path: Path, reveal_files: bool = True) -> list[str]:
    """Launch the platform file manager on path without waiting for it.

    Args:
        path: Existing, resolved path to show
        reveal_files: Select a file inside its parent directory instead of opening the parent plainly

    Returns:
        The command that was spawned

    Raises:
        UnsupportedPlatformError: No opener for this operating system
        OSError: The file manager command could not be started
    """
    system = platform.system().lower()
    opener = _OPENERS.get(system)
    if opener is None:
        raise UnsupportedPlatformError(system)

    if path.is_file():
        if reveal_files:
            return opener(path, True)
        return opener(path.parent, False)
    return opener(path, False)
