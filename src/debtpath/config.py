"""Engine configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Read a positive integer from the environment."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {parsed}")
    return parsed


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "debtpath"
    DEFAULT_MAX_MONTHS = 600
    LOG_FILENAME = "debtpath.log"

    def __init__(self) -> None:
        self.MAX_MONTHS = _env_int("DEBTPATH_MAX_MONTHS", self.DEFAULT_MAX_MONTHS)
        self.CURRENCY_SYMBOL = os.getenv("DEBTPATH_CURRENCY_SYMBOL", "$")
        self.DEV_MODE = _env_bool("DEBTPATH_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("DEBTPATH_DATA_DIR", "instance")
        return Path(data_root).expanduser().resolve()


class DevConfig(BaseConfig):
    """Development configuration with verbose console output."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration for the test suite."""

    __test__ = False  # keep pytest from collecting this class

    DEBUG = False
    TESTING = True

    def __init__(self, data_dir: Path | None = None) -> None:
        super().__init__()
        if data_dir is not None:
            self.DATA_DIR = Path(data_dir)


def get_config() -> BaseConfig:
    """Return the active configuration for the current environment."""

    if _env_bool("DEBTPATH_TESTING", default=False):
        return TestConfig()
    return DevConfig()
