import logging

import pytest

from haiku_detector.utils import logging_config


@pytest.fixture
def captured_basic_config(monkeypatch):
    calls = []

    def fake_basic_config(**kwargs):
        calls.append(kwargs)

    monkeypatch.setattr(logging_config, "_CONFIGURED", False)
    monkeypatch.setattr(logging_config.logging, "basicConfig", fake_basic_config)
    monkeypatch.delenv("HAIKU_LOG_LEVEL", raising=False)
    package_logger = logging.getLogger("haiku_detector")
    original_level = package_logger.level
    yield calls
    package_logger.setLevel(original_level)


def test_defaults_to_info(captured_basic_config):
    logging_config.configure_logging()

    assert captured_basic_config[0]["level"] == logging.INFO
    assert captured_basic_config[0]["format"] == "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def test_reads_level_from_environment(captured_basic_config, monkeypatch):
    monkeypatch.setenv("HAIKU_LOG_LEVEL", "debug")

    logging_config.configure_logging()

    assert captured_basic_config[0]["level"] == logging.DEBUG
    assert logging.getLogger("haiku_detector").level == logging.DEBUG


def test_explicit_level_wins_over_environment(captured_basic_config, monkeypatch):
    monkeypatch.setenv("HAIKU_LOG_LEVEL", "DEBUG")

    logging_config.configure_logging("30")

    assert captured_basic_config[0]["level"] == logging.WARNING


def test_unknown_level_falls_back_to_info(captured_basic_config):
    logging_config.configure_logging("chatty")

    assert captured_basic_config[0]["level"] == logging.INFO


def test_configuration_runs_once_unless_forced(captured_basic_config):
    logging_config.configure_logging()
    logging_config.configure_logging()
    assert len(captured_basic_config) == 1

    logging_config.configure_logging(logging.ERROR, force=True)
    assert len(captured_basic_config) == 2
    assert captured_basic_config[1]["force"] is True
