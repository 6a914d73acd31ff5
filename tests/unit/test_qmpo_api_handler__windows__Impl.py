"""Unit tests for the Windows handler backend, run against an in-memory registry."""

from pathlib import PureWindowsPath

import pytest

from qmpo.api.handler._windows._Impl import COMMAND_KEY, PROTOCOL_KEY, _Impl
from tests.unit.conftest import FakeRegistry

pytestmark = pytest.mark.handler

EXECUTABLE = PureWindowsPath("C:/Program Files/qmpo/qmpo.exe")


@pytest.fixture
def registry() -> FakeRegistry:
    return FakeRegistry()


def test_register_writes_protocol_keys(registry):
    details = _Impl(registry).register(EXECUTABLE)

    protocol = registry.keys[f"HKCU\\{PROTOCOL_KEY}"]
    assert protocol[""][0] == "URL:Directory Protocol"
    assert protocol["URL Protocol"][0] == ""
    command = registry.keys[f"HKCU\\{COMMAND_KEY}"][""][0]
    assert command == '"C:\\Program Files\\qmpo\\qmpo.exe" open "%1"'
    assert details["command"] == command
    assert details["registry_key"] == "HKCU\\Software\\Classes\\directory"


def test_register_rejects_double_quote(registry):
    with pytest.raises(ValueError, match="double quote"):
        _Impl(registry).register(PureWindowsPath('C:/bad"name/qmpo.exe'))
    assert f"HKCU\\{PROTOCOL_KEY}" not in registry.keys


def test_status(registry):
    impl = _Impl(registry)
    assert impl.status()["registered"] is False

    impl.register(EXECUTABLE)
    status = impl.status()

    assert status["registered"] is True
    assert status["command"].startswith('"C:\\Program Files')


def test_unregister_deletes_key_tree(registry):
    impl = _Impl(registry)
    impl.register(EXECUTABLE)

    details = impl.unregister()

    assert details["removed"] is True
    assert not any(key.startswith(f"HKCU\\{PROTOCOL_KEY}") for key in registry.keys)
    assert "HKCU\\Software\\Classes" in registry.keys
    assert impl.status()["registered"] is False


def test_unregister_when_absent(registry):
    assert _Impl(registry).unregister()["removed"] is False
