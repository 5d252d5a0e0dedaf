"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .money import CENT

load_dotenv()

DEFAULT_MAX_MONTHS = 600


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value.strip())
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}.") from exc


@dataclass(frozen=True, slots=True)
class SimulationSettings:
    """Numeric limits shared by the snowball simulator and the baseline.

    ``max_months`` is the safety ceiling (50 years by default). ``cent`` is the
    quantum used when booking ledger amounts and ``epsilon`` is the balance
    below which the minimum-only baseline treats a debt as settled.
    """

    max_months: int = DEFAULT_MAX_MONTHS
    cent: str = CENT
    epsilon: float = 0.01

    def __post_init__(self) -> None:
        if self.max_months <= 0:
            raise ValueError("max_months must be positive.")
        if self.epsilon < 0:
            raise ValueError("epsilon must not be negative.")


DEFAULT_SETTINGS = SimulationSettings()


class BaseConfig:
    """Base configuration shared across environments."""

    LOG_FILENAME = "debtsnowball.log"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("SNOWBALL_DEV_MODE", default=True)
        self.LOG_LEVEL = os.getenv("SNOWBALL_LOG_LEVEL", "INFO").strip().upper()
        self.MAX_MONTHS = _env_int("SNOWBALL_MAX_MONTHS", DEFAULT_MAX_MONTHS)
        if self.MAX_MONTHS <= 0:
            raise ValueError("SNOWBALL_MAX_MONTHS must be a positive number of months.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("SNOWBALL_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def simulation_settings(self) -> SimulationSettings:
        """Expose the simulation limits derived from the environment."""

        return SimulationSettings(max_months=self.MAX_MONTHS)


class TestingConfig(BaseConfig):
    """Configuration for the test-suite; keeps logs inside a throwaway dir."""

    DEBUG = True
    TESTING = True

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir_override = data_dir
        super().__init__()
        self.DEV_MODE = True

    def _resolve_data_dir(self) -> Path:
        if self._data_dir_override is None:
            return super()._resolve_data_dir()
        path = Path(self._data_dir_override).resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path
