"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for isolating subprocesses and registries.
"""

import subprocess

import pytest

from tests.conftest import run_cmd

__all__ = [
    "FakeRegistry",
    "RecordingRun",
    "run_cmd",
]


class RecordingRun:
    """Stand-in for subprocess.run that records commands and returns canned output."""

    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = ""):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.calls: list[list[str]] = []

    def __call__(self, args, **kwargs):
        self.calls.append(list(args))
        return subprocess.CompletedProcess(args, self.returncode, stdout=self.stdout, stderr=self.stderr)

    def commands(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def recording_run(monkeypatch) -> RecordingRun:
    """Patch subprocess.run with a RecordingRun that succeeds."""
    recorder = RecordingRun()
    monkeypatch.setattr(subprocess, "run", recorder)
    return recorder


class _FakeKey:
    def __init__(self, path: str):
        self.path = path

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeRegistry:
    """In-memory replacement for the parts of winreg used by the Windows backend."""

    HKEY_CURRENT_USER = "HKCU"
    KEY_ALL_ACCESS = 0xF003F
    REG_SZ = 1

    def __init__(self):
        self.keys: dict[str, dict[str, tuple[object, int]]] = {}

    @staticmethod
    def _join(root, sub_key: str) -> str:
        base = root.path if isinstance(root, _FakeKey) else root
        return f"{base}\\{sub_key}" if sub_key else base

    def CreateKey(self, root, sub_key: str) -> _FakeKey:
        path = self._join(root, sub_key)
        parts = path.split("\\")
        for i in range(1, len(parts) + 1):
            self.keys.setdefault("\\".join(parts[:i]), {})
        return _FakeKey(path)

    def OpenKey(self, root, sub_key: str, reserved: int = 0, access: int = 0) -> _FakeKey:
        path = self._join(root, sub_key)
        if path not in self.keys:
            raise FileNotFoundError(f"[WinError 2] The system cannot find the file specified: {path}")
        return _FakeKey(path)

    def _children(self, path: str) -> list[str]:
        prefix = path + "\\"
        return sorted(k[len(prefix) :] for k in self.keys if k.startswith(prefix) and "\\" not in k[len(prefix) :])

    def EnumKey(self, key: _FakeKey, index: int) -> str:
        children = self._children(key.path)
        if index >= len(children):
            raise OSError("[WinError 259] No more data is available")
        return children[index]

    def DeleteKey(self, root, sub_key: str) -> None:
        path = self._join(root, sub_key)
        if path not in self.keys:
            raise FileNotFoundError(path)
        if self._children(path):
            raise OSError(f"[WinError 5] Access is denied: {path} has subkeys")
        del self.keys[path]

    def SetValueEx(self, key: _FakeKey, name: str, reserved: int, value_type: int, value) -> None:
        self.keys[key.path][name] = (value, value_type)

    def QueryValueEx(self, key: _FakeKey, name: str):
        values = self.keys[key.path]
        if name not in values:
            raise FileNotFoundError(name)
        return values[name]
