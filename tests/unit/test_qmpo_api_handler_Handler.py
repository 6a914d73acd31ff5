"""Unit tests for qmpo.api.handler.Handler."""

import pytest

from qmpo.api.handler import Handler
from qmpo.api.handler._linux._Impl import _Impl as LinuxImpl

pytestmark = pytest.mark.handler


def test_detect_os_is_lowercase():
    assert Handler.detect_os() == Handler.detect_os().lower()


def test_defaults_to_detected_os(monkeypatch):
    monkeypatch.setattr(Handler, "detect_os", staticmethod(lambda: "linux"))
    assert Handler().backend_type == "linux"


def test_unsupported_platform():
    with pytest.raises(RuntimeError, match="Unsupported operating system: plan9"), Handler("plan9"):
        pass


def test_loads_backend_implementation():
    with Handler("linux") as handler:
        assert isinstance(handler._impl, LinuxImpl)


def test_requires_context_manager(tmp_path):
    with pytest.raises(RuntimeError, match="context manager"):
        Handler("linux").status()


def test_delegates_to_backend(tmp_path, monkeypatch, recording_run):
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    with Handler("linux") as handler:
        details = handler.register(tmp_path / "qmpo")
        assert details["type"] == "linux"
        assert handler.unregister()["removed"] is True
