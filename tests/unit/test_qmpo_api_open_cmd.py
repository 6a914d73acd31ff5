"""Unit tests for qmpo.api.open.cmd module."""

import sys

import pytest

from qmpo.api.open import cmd as open_cmd
from qmpo.api.open.UnsupportedPlatformError import UnsupportedPlatformError
from tests.unit.conftest import run_cmd

pytestmark = [
    pytest.mark.open,
    pytest.mark.skipif(sys.platform == "win32", reason="builds directory:/// URIs from POSIX paths"),
]


@pytest.fixture
def opened(monkeypatch) -> list[tuple]:
    """Replace the file manager launch and record its arguments."""
    calls: list[tuple] = []

    def _open(path, reveal_files=True):
        calls.append((path, reveal_files))
        return ["xdg-open", str(path)]

    monkeypatch.setattr(open_cmd, "open_in_file_manager", _open)
    return calls


def test_cmd_open_directory(qmpo_home, tmp_path, opened):
    target = tmp_path / "project"
    target.mkdir()

    result = run_cmd(open_cmd.cmd, f"directory://{target}")

    assert result.success is True
    assert result.output["opened"] is True
    assert result.output["is_file"] is False
    assert result.output["native_path"] == str(target)
    assert result.output["resolved_path"] == str(target.resolve())
    assert opened == [(target.resolve(), True)]
    assert result.result == f"Opened {target.resolve()}"


def test_cmd_open_file_passes_reveal_setting(qmpo_home, write_config, tmp_path, opened):
    write_config({"opener": {"reveal_files": False}})
    target = tmp_path / "notes.txt"
    target.write_text("hi", encoding="utf-8")

    result = run_cmd(open_cmd.cmd, f"directory://{target}")

    assert result.success is True
    assert result.output["is_file"] is True
    assert opened == [(target.resolve(), False)]


def test_cmd_open_resolves_dot_dot(qmpo_home, tmp_path, opened):
    (tmp_path / "a").mkdir()
    (tmp_path / "b").mkdir()

    result = run_cmd(open_cmd.cmd, f"directory://{tmp_path}/a/../b")

    assert result.success is True
    assert result.output["native_path"] == f"{tmp_path}/a/../b"
    assert result.output["resolved_path"] == str((tmp_path / "b").resolve())


def test_cmd_open_percent_encoded(qmpo_home, tmp_path, opened):
    target = tmp_path / "with space"
    target.mkdir()

    result = run_cmd(open_cmd.cmd, f"directory://{tmp_path}/with%20space")

    assert result.success is True
    assert opened[0][0] == target.resolve()


def test_cmd_open_invalid_uri(qmpo_home, opened):
    result = run_cmd(open_cmd.cmd, "http://example.com")

    assert result.success is False
    assert result.result.startswith("Invalid URI:")
    assert result.output["opened"] is False
    assert opened == []


def test_cmd_open_missing_path(qmpo_home, tmp_path, opened):
    missing = tmp_path / "does-not-exist"

    result = run_cmd(open_cmd.cmd, f"directory://{missing}")

    assert result.success is False
    assert result.result == f"Path does not exist: {missing}"
    assert result.output["native_path"] == str(missing)
    assert opened == []


def test_cmd_open_file_manager_failure(qmpo_home, tmp_path, monkeypatch):
    def _fail(path, reveal_files=True):
        raise UnsupportedPlatformError("plan9")

    monkeypatch.setattr(open_cmd, "open_in_file_manager", _fail)

    result = run_cmd(open_cmd.cmd, f"directory://{tmp_path}")

    assert result.success is False
    assert result.result.startswith("Failed to open file manager:")
    assert result.output["resolved_path"] == str(tmp_path.resolve())


def test_cmd_open_invalid_config(write_config, tmp_path, opened):
    write_config({"opener": {"reveal_files": "sometimes"}})

    result = run_cmd(open_cmd.cmd, f"directory://{tmp_path}")

    assert result.success is False
    assert "Configuration validation error" in result.result
    assert opened == []


def test_cmd_open_writes_logfile(qmpo_home, tmp_path, opened):
    run_cmd(open_cmd.cmd, f"directory://{tmp_path}")
    run_cmd(open_cmd.cmd, "directory://")

    content = (qmpo_home / "logfile").read_text(encoding="utf-8")
    assert f"[open] INFO: Received URI: directory://{tmp_path}" in content
    assert f"[open] INFO: Opened {tmp_path.resolve()}" in content
    assert "[open] ERROR: empty path in URI" in content


def test_cmd_open_announce():
    assert open_cmd.cmd("directory:///tmp").announce == "Opening directory:///tmp..."
