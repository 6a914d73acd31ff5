"""macOS handler implementation - application bundle registered with Launch Services."""

import plistlib
import shutil
import subprocess
from contextlib import suppress
from pathlib import Path
from typing import Any

from ....constants import APP_BUNDLE_NAME, BUNDLE_ID, EXECUTABLE_NAME, SCHEME
from ....utils.get_package_version import get_package_version
from ....utils.render_template import render_template
from .._AbstractImpl import _AbstractImpl

LSREGISTER_PATH = (
    "/System/Library/Frameworks/CoreServices.framework/Frameworks/LaunchServices.framework/Support/lsregister"
)

LAUNCHER_TEMPLATE = """#!/bin/sh
exec "{{ executable }}" open "$@"
"""


class _Impl(_AbstractImpl):
    """macOS-specific registration through ~/Applications/qmpo.app."""

    @staticmethod
    def _get_app_bundle() -> Path:
        return Path.home() / "Applications" / APP_BUNDLE_NAME

    @staticmethod
    def _create_info_plist() -> dict[str, Any]:
        version = get_package_version()
        if version == "unknown":
            version = "0.0.0"
        return {
            "CFBundleIdentifier": BUNDLE_ID,
            "CFBundleName": "qmpo",
            "CFBundleDisplayName": "qmpo",
            "CFBundleExecutable": EXECUTABLE_NAME,
            "CFBundlePackageType": "APPL",
            "CFBundleVersion": version,
            "CFBundleShortVersionString": version,
            "LSUIElement": True,
            "CFBundleURLTypes": [
                {
                    "CFBundleURLName": "Directory URL",
                    "CFBundleURLSchemes": [SCHEME],
                }
            ],
        }

    def register(self, executable: Path) -> dict[str, Any]:
        """Build the application bundle and register it with Launch Services."""
        app_bundle = self._get_app_bundle()
        contents_dir = app_bundle / "Contents"
        macos_dir = contents_dir / "MacOS"
        macos_dir.mkdir(parents=True, exist_ok=True)

        launcher = macos_dir / EXECUTABLE_NAME
        launcher.write_text(render_template(LAUNCHER_TEMPLATE, {"executable": executable}), encoding="utf-8")
        launcher.chmod(0o755)

        info_plist = contents_dir / "Info.plist"
        with info_plist.open("wb") as fh:
            plistlib.dump(self._create_info_plist(), fh)

        try:
            result = subprocess.run(
                [LSREGISTER_PATH, "-register", str(app_bundle)],
                check=False,
                capture_output=True,
                text=True,
            )
        except FileNotFoundError as e:
            raise RuntimeError(f"lsregister not found at {LSREGISTER_PATH}") from e
        if result.returncode != 0:
            raise RuntimeError(f"Failed to register with Launch Services: {result.stderr.strip()}")

        return {
            "success": True,
            "type": "darwin",
            "app_bundle": str(app_bundle),
            "info_plist": str(info_plist),
            "launcher": str(launcher),
        }

    def unregister(self) -> dict[str, Any]:
        """Unregister from Launch Services and remove the bundle."""
        app_bundle = self._get_app_bundle()
        removed = False
        if app_bundle.exists():
            with suppress(OSError):
                subprocess.run(
                    [LSREGISTER_PATH, "-unregister", str(app_bundle)],
                    check=False,
                    capture_output=True,
                    text=True,
                )
            shutil.rmtree(app_bundle)
            removed = True

        return {
            "success": True,
            "type": "darwin",
            "app_bundle": str(app_bundle),
            "removed": removed,
        }

    def status(self) -> dict[str, Any]:
        """Report the bundle and whether Launch Services knows the bundle id."""
        app_bundle = self._get_app_bundle()
        installed = (app_bundle / "Contents" / "MacOS" / EXECUTABLE_NAME).exists()

        launch_services = False
        with suppress(OSError):
            result = subprocess.run(
                [LSREGISTER_PATH, "-dump"],
                check=False,
                capture_output=True,
                text=True,
            )
            launch_services = BUNDLE_ID in result.stdout

        return {
            "registered": installed and launch_services,
            "type": "darwin",
            "app_bundle": str(app_bundle),
            "app_bundle_installed": installed,
            "launch_services_registered": launch_services,
        }
