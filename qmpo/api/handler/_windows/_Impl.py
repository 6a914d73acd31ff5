"""Windows handler implementation - HKCU\\Software\\Classes protocol keys."""

from pathlib import Path
from types import ModuleType
from typing import Any

from ....constants import SCHEME
from .._AbstractImpl import _AbstractImpl

CLASSES_KEY = "Software\\Classes"
PROTOCOL_KEY = f"{CLASSES_KEY}\\{SCHEME}"
COMMAND_KEY = f"{PROTOCOL_KEY}\\shell\\open\\command"


class _Impl(_AbstractImpl):
    """Windows-specific registration through per-user registry keys."""

    def __init__(self, registry: ModuleType | None = None):
        if registry is None:
            import winreg as registry
        self._reg = registry

    @staticmethod
    def _create_command(executable: Path) -> str:
        path_str = str(executable)
        if '"' in path_str:
            raise ValueError(f"path contains invalid characters: double quote in {path_str}")
        return f'"{path_str}" open "%1"'

    def _delete_tree(self, root: Any, sub_key: str) -> None:
        """Delete a key and all of its subkeys (DeleteKey refuses non-empty keys)."""
        with self._reg.OpenKey(root, sub_key, 0, self._reg.KEY_ALL_ACCESS) as key:
            while True:
                try:
                    child = self._reg.EnumKey(key, 0)
                except OSError:
                    break
                self._delete_tree(root, f"{sub_key}\\{child}")
        self._reg.DeleteKey(root, sub_key)

    def register(self, executable: Path) -> dict[str, Any]:
        """Create the directory protocol key and its open command."""
        command = self._create_command(executable)
        root = self._reg.HKEY_CURRENT_USER

        with self._reg.CreateKey(root, PROTOCOL_KEY) as protocol_key:
            self._reg.SetValueEx(protocol_key, "", 0, self._reg.REG_SZ, "URL:Directory Protocol")
            self._reg.SetValueEx(protocol_key, "URL Protocol", 0, self._reg.REG_SZ, "")
        with self._reg.CreateKey(root, COMMAND_KEY) as command_key:
            self._reg.SetValueEx(command_key, "", 0, self._reg.REG_SZ, command)

        return {
            "success": True,
            "type": "windows",
            "registry_key": f"HKCU\\{PROTOCOL_KEY}",
            "command": command,
        }

    def unregister(self) -> dict[str, Any]:
        """Delete the directory protocol key tree."""
        removed = False
        try:
            self._delete_tree(self._reg.HKEY_CURRENT_USER, PROTOCOL_KEY)
            removed = True
        except FileNotFoundError:
            pass

        return {
            "success": True,
            "type": "windows",
            "registry_key": f"HKCU\\{PROTOCOL_KEY}",
            "removed": removed,
        }

    def status(self) -> dict[str, Any]:
        """Read the registered open command."""
        command = ""
        try:
            with self._reg.OpenKey(self._reg.HKEY_CURRENT_USER, COMMAND_KEY) as key:
                command, _ = self._reg.QueryValueEx(key, "")
        except FileNotFoundError:
            pass

        return {
            "registered": bool(command),
            "type": "windows",
            "registry_key": f"HKCU\\{PROTOCOL_KEY}",
            "command": command,
        }
