import logging
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath("src"))

from stash_labels.logging import PACKAGE_LOGGER, configure_logging, get_logger, parse_level


@pytest.fixture
def clean_log_env(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    yield
    configure_logging("INFO", "")


def _file_handlers():
    return [h for h in logging.getLogger(PACKAGE_LOGGER).handlers if isinstance(h, logging.FileHandler)]


def test_module_loggers_hang_off_the_package_logger():
    assert get_logger("stash_labels.labels.model").name == "stash_labels.labels.model"
    assert get_logger("export").name == "stash_labels.export"
    assert get_logger("export").parent is logging.getLogger(PACKAGE_LOGGER)


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" WARN ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR
    assert parse_level("loud") == logging.INFO
    assert parse_level(None) == logging.INFO


def test_log_level_env_applies_to_every_stage(clean_log_env, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    configure_logging()
    assert get_logger("stash_labels.labels.parser").getEffectiveLevel() == logging.DEBUG
    assert get_logger("stash_labels.cli.main").getEffectiveLevel() == logging.DEBUG

    configure_logging("ERROR")
    assert get_logger("stash_labels.labels.parser").getEffectiveLevel() == logging.ERROR


def test_reconfigure_replaces_handlers(clean_log_env):
    configure_logging("INFO")
    configure_logging("INFO")
    pkg = logging.getLogger(PACKAGE_LOGGER)
    streams = [h for h in pkg.handlers if type(h) is logging.StreamHandler]
    assert len(streams) == 1
    assert pkg.propagate is False


def test_log_file_receives_stage_messages(clean_log_env, tmp_path):
    log_path = tmp_path / "labels.log"
    configure_logging("DEBUG", str(log_path))
    get_logger("stash_labels.labels.brand").debug("brand lookup message")
    configure_logging("INFO", "")

    content = log_path.read_text(encoding="utf-8")
    assert "[stash_labels.labels.brand] DEBUG: brand lookup message" in content
    assert _file_handlers() == []


def test_unopenable_log_file_falls_back_to_stderr(clean_log_env, tmp_path):
    configure_logging("INFO", str(tmp_path / "missing" / "labels.log"))
    assert _file_handlers() == []
