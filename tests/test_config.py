import logging

import pytest

from plantcare.config import AppConfig, load_config, setup_logging
from plantcare.domain.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "PLANTCARE_ENV",
        "PLANTCARE_DEBUG",
        "PLANTCARE_LOG_LEVEL",
        "PLANTCARE_LOG_FILE",
        "PLANTCARE_EVENTBUS_QUEUE_SIZE",
        "PLANTCARE_EVENTBUS_WORKER_COUNT",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    config = load_config()
    assert config.environment == "development"
    assert config.DEBUG is False
    assert config.log_level == "INFO"
    assert config.log_file == "logs/plantcare.log"
    assert config.eventbus_queue_size == 256
    assert config.eventbus_worker_count == 1


def test_reads_environment(clean_env):
    clean_env.setenv("PLANTCARE_ENV", "production")
    clean_env.setenv("PLANTCARE_DEBUG", "yes")
    clean_env.setenv("PLANTCARE_EVENTBUS_QUEUE_SIZE", "32")
    config = AppConfig()
    assert config.environment == "production"
    assert config.DEBUG is True
    assert config.eventbus_queue_size == 32


def test_invalid_integer_names_variable(clean_env):
    clean_env.setenv("PLANTCARE_EVENTBUS_WORKER_COUNT", "many")
    with pytest.raises(ValueError, match="PLANTCARE_EVENTBUS_WORKER_COUNT"):
        AppConfig()


def test_non_positive_queue_size(clean_env):
    clean_env.setenv("PLANTCARE_EVENTBUS_QUEUE_SIZE", "0")
    with pytest.raises(ConfigurationError):
        AppConfig()


def test_setup_logging_does_not_duplicate_handlers(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    log_file = tmp_path / "logs" / "plantcare.log"
    try:
        setup_logging(debug=True, log_file=str(log_file))
        setup_logging(debug=True, log_file=str(log_file))
        names = [h.name for h in root.handlers]
        assert names.count("plantcare_console") == 1
        assert names.count("plantcare_file") == 1
        assert root.level == logging.DEBUG
        assert log_file.exists()
    finally:
        for handler in list(root.handlers):
            if handler not in saved_handlers:
                root.removeHandler(handler)
                handler.close()
        root.setLevel(saved_level)
