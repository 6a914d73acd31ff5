"""Unit tests for qmpo.api.config.QmpoConfig."""

import pytest
from pydantic import ValidationError

from qmpo.api.config import LogConfig, QmpoConfig

pytestmark = pytest.mark.config


def test_defaults():
    config = QmpoConfig()
    assert config.log.level == "INFO"
    assert config.log.max_size_bytes == 1024 * 1024
    assert config.opener.reveal_files is True


def test_load_missing_file_returns_defaults(qmpo_home):
    assert not (qmpo_home / "config.json").exists()
    assert QmpoConfig.load() == QmpoConfig()
    assert not (qmpo_home / "config.json").exists()


def test_load_values(write_config):
    write_config({"log": {"level": "DEBUG", "max_size_bytes": 2048}, "opener": {"reveal_files": False}})

    config = QmpoConfig.load()

    assert config.log.level == "DEBUG"
    assert config.log.max_size_bytes == 2048
    assert config.opener.reveal_files is False


def test_load_partial_sections(write_config):
    write_config({"opener": {"reveal_files": False}})

    config = QmpoConfig.load()

    assert config.log == LogConfig()
    assert config.opener.reveal_files is False


def test_load_invalid_json(qmpo_home):
    qmpo_home.mkdir(parents=True)
    (qmpo_home / "config.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid JSON in config file"):
        QmpoConfig.load()


def test_load_non_object(write_config):
    write_config([1, 2, 3])

    with pytest.raises(ValueError, match="must hold a JSON object"):
        QmpoConfig.load()


def test_load_invalid_level_names_field(write_config):
    write_config({"log": {"level": "VERBOSE"}})

    with pytest.raises(ValueError, match="Configuration validation error: log.level"):
        QmpoConfig.load()


def test_load_unknown_section(write_config):
    write_config({"database": {}})

    with pytest.raises(ValueError, match="Configuration validation error: database"):
        QmpoConfig.load()


def test_max_size_must_be_positive():
    with pytest.raises(ValidationError):
        LogConfig(max_size_bytes=0)


def test_get_logfile_path(qmpo_home):
    assert QmpoConfig.get_logfile_path() == qmpo_home.resolve() / "logfile"
