"""
Configuration for plantcare
===========================
Runtime settings loaded from environment variables.
Sets up the logging configuration as well.
"""

import os
from contextlib import suppress
from dataclasses import dataclass, field

from plantcare.domain.exceptions import ConfigurationError


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable {name} must be an integer.") from None


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("PLANTCARE_ENV", "development"))
    DEBUG: bool = field(default_factory=lambda: _env_bool("PLANTCARE_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("PLANTCARE_LOG_LEVEL", "INFO"))
    # Empty string disables the rotating file handler.
    log_file: str = field(default_factory=lambda: os.getenv("PLANTCARE_LOG_FILE", "logs/plantcare.log"))

    eventbus_queue_size: int = field(default_factory=lambda: _env_int("PLANTCARE_EVENTBUS_QUEUE_SIZE", 256))
    eventbus_worker_count: int = field(default_factory=lambda: _env_int("PLANTCARE_EVENTBUS_WORKER_COUNT", 1))

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.eventbus_queue_size < 1:
            raise ConfigurationError("PLANTCARE_EVENTBUS_QUEUE_SIZE must be at least 1.")
        if self.eventbus_worker_count < 1:
            raise ConfigurationError("PLANTCARE_EVENTBUS_WORKER_COUNT must be at least 1.")


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Setup logging configuration."""
    import logging
    import sys
    from logging.handlers import RotatingFileHandler

    log_level = logging.DEBUG if debug else logging.INFO

    root = logging.getLogger()
    root.setLevel(log_level)

    # Avoid adding duplicate handlers when called more than once
    has_console = any(getattr(h, "name", "") == "plantcare_console" for h in root.handlers)
    has_file = any(getattr(h, "name", "") == "plantcare_file" for h in root.handlers)
    added_handler = False

    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = "plantcare_console"
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    if log_file and not has_file:
        directory = os.path.dirname(log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = "plantcare_file"
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    for handler in root.handlers:
        if getattr(handler, "name", "") in {"plantcare_console", "plantcare_file"}:
            handler.setLevel(log_level)

    if added_handler:
        root.info("Logging initialized at level: %s", logging.getLevelName(log_level))


def load_config() -> AppConfig:
    """Helper for callers to load and validate configuration."""
    return AppConfig()
