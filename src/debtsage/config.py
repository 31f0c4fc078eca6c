"""Runtime configuration objects and helpers."""

from __future__ import annotations

import os
from decimal import Decimal, InvalidOperation
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MAX_PERIODS = 600
DEFAULT_RECOMMENDATION_THRESHOLD = Decimal(1000)


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
        parsed = int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    if parsed <= 0:
        raise ValueError(f"{name} must be positive, got {parsed}")
    return parsed


def _env_decimal(name: str, default: Decimal) -> Decimal:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return Decimal(value.strip())
    except InvalidOperation as exc:
        raise ValueError(f"{name} must be a number, got {value!r}") from exc


class BaseConfig:
    """Configuration shared by the CLI and embedding applications."""

    APP_NAME = "DebtSage"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("DEBTSAGE_DEV_MODE", default=True)
        self.MAX_PERIODS = _env_int("DEBTSAGE_MAX_PERIODS", DEFAULT_MAX_PERIODS)
        self.RECOMMENDATION_THRESHOLD = _env_decimal(
            "DEBTSAGE_RECOMMENDATION_THRESHOLD", DEFAULT_RECOMMENDATION_THRESHOLD
        )

    def _resolve_data_dir(self) -> Path:
        """Return the directory where logs and exports are written."""

        data_root = os.getenv("DEBTSAGE_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path


__all__ = ["BaseConfig", "DEFAULT_MAX_PERIODS", "DEFAULT_RECOMMENDATION_THRESHOLD"]
