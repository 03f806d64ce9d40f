from __future__ import annotations

import logging

from safe_fileutils.common import logging_config
from safe_fileutils.common.config import FileUtilsSettings, env_int, get_buffer_size


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("SAFE_FILEUTILS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SAFE_FILEUTILS_BUFFER_SIZE", raising=False)

    settings = FileUtilsSettings.from_env()
    assert settings.log_level == "INFO"
    assert settings.buffer_size == 4096


def test_settings_from_mapping():
    settings = FileUtilsSettings.from_env({
        "SAFE_FILEUTILS_LOG_LEVEL": "debug",
        "SAFE_FILEUTILS_BUFFER_SIZE": "65536",
    })
    assert settings.log_level == "DEBUG"
    assert settings.buffer_size == 65536


def test_buffer_size_rejects_bad_values(monkeypatch):
    for value in ("0", "-5", "lots"):
        monkeypatch.setenv("SAFE_FILEUTILS_BUFFER_SIZE", value)
        assert get_buffer_size() == 4096


def test_env_int(monkeypatch):
    monkeypatch.setenv("NUMBER", "12")
    monkeypatch.setenv("BROKEN", "twelve")
    assert env_int("NUMBER", 1) == 12
    assert env_int("BROKEN", 1) == 1


def test_configure_logging_level_precedence(monkeypatch):
    calls = []
    monkeypatch.setattr(logging_config.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    monkeypatch.setenv("SAFE_FILEUTILS_LOG_LEVEL", "ERROR")
    logging_config.configure_logging()
    logging_config.configure_logging("debug")
    logging_config.configure_logging("nonsense")

    assert [call["level"] for call in calls] == [logging.ERROR, logging.DEBUG, logging.INFO]


def test_get_logger_names():
    assert logging_config.get_logger().name == "safe_fileutils"
    assert logging_config.get_logger("safe_fileutils.core").name == "safe_fileutils.core"


def test_empty_mapping_does_not_fall_back_to_process_env(monkeypatch):
    monkeypatch.setenv("SAFE_FILEUTILS_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("SAFE_FILEUTILS_BUFFER_SIZE", "99")

    settings = FileUtilsSettings.from_env({})
    assert settings.log_level == "INFO"
    assert settings.buffer_size == 4096
    assert env_int("SAFE_FILEUTILS_BUFFER_SIZE", 1, {}) == 1
