"""Linux handler implementation - desktop entry plus xdg-mime default."""

import os
import subprocess
from contextlib import suppress
from pathlib import Path
from typing import Any

from ....constants import DESKTOP_FILE_NAME, MIME_TYPE
from ....utils.render_template import render_template
from .._AbstractImpl import _AbstractImpl

DESKTOP_ENTRY_TEMPLATE = """[Desktop Entry]
Type=Application
Name=qmpo
Comment=Directory URI Handler
Exec="{{ executable }}" open %u
Terminal=false
NoDisplay=true
MimeType={{ mime_type }};
"""


class _Impl(_AbstractImpl):
    """Linux-specific registration through a desktop entry and xdg-mime."""

    @staticmethod
    def _get_applications_dir() -> Path:
        """Get the per-user applications directory (XDG_DATA_HOME aware)."""
        data_home = os.environ.get("XDG_DATA_HOME")
        base = Path(data_home) if data_home else Path.home() / ".local" / "share"
        return base / "applications"

    @staticmethod
    def _get_desktop_file_path() -> Path:
        return _Impl._get_applications_dir() / DESKTOP_FILE_NAME

    @staticmethod
    def _create_desktop_entry(executable: Path) -> str:
        return render_template(DESKTOP_ENTRY_TEMPLATE, {"executable": executable, "mime_type": MIME_TYPE})

    @staticmethod
    def _update_desktop_database(applications_dir: Path) -> None:
        with suppress(OSError):
            subprocess.run(
                ["update-desktop-database", str(applications_dir)],
                check=False,
                capture_output=True,
                text=True,
            )

    def register(self, executable: Path) -> dict[str, Any]:
        """Write the desktop entry and make it the default directory:// handler."""
        desktop_file = self._get_desktop_file_path()
        desktop_file.parent.mkdir(parents=True, exist_ok=True)
        desktop_file.write_text(self._create_desktop_entry(executable), encoding="utf-8")

        self._update_desktop_database(desktop_file.parent)

        try:
            result = subprocess.run(
                ["xdg-mime", "default", DESKTOP_FILE_NAME, MIME_TYPE],
                check=False,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise RuntimeError("xdg-mime not found. Install xdg-utils to register URI handlers.") from e
        if result.returncode != 0:
            raise RuntimeError(f"Failed to set default MIME handler: {result.stderr.strip()}")

        return {
            "success": True,
            "type": "linux",
            "desktop_file": str(desktop_file),
            "mime_type": MIME_TYPE,
        }

    def unregister(self) -> dict[str, Any]:
        """Remove the desktop entry."""
        desktop_file = self._get_desktop_file_path()
        removed = False
        if desktop_file.exists():
            desktop_file.unlink()
            removed = True

        self._update_desktop_database(desktop_file.parent)

        return {
            "success": True,
            "type": "linux",
            "desktop_file": str(desktop_file),
            "removed": removed,
        }

    def status(self) -> dict[str, Any]:
        """Report the desktop entry and the current default handler."""
        desktop_file = self._get_desktop_file_path()

        handler = ""
        with suppress(OSError):
            result = subprocess.run(
                ["xdg-mime", "query", "default", MIME_TYPE],
                check=False,
                capture_output=True,
                text=True,
            )
            handler = result.stdout.strip()

        return {
            "registered": desktop_file.exists() and handler == DESKTOP_FILE_NAME,
            "type": "linux",
            "desktop_file": str(desktop_file),
            "desktop_file_exists": desktop_file.exists(),
            "default_handler": handler,
        }
