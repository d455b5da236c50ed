# src/salary_ticker/data/settings_store.py
"""
Local key-value persistence for the single settings blob.

The file holds one JSON object; the blob lives under STORAGE_KEY. Anything
that cannot be read back falls back to the defaults.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from salary_ticker.domain.models import UserSettings
from salary_ticker.utils.config import config
from salary_ticker.utils.logger import get_logger

logger = get_logger(__name__)

STORAGE_KEY = "mm_settings"


def _resolve(path: Optional[Path]) -> Path:
    return Path(path if path is not None else config.settings_path).expanduser()


def _read_store(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read settings store %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Settings store %s is not a JSON object, ignoring", path)
        return {}
    return data


def load_settings(path: Optional[Path] = None) -> UserSettings:
    """
    Load the settings blob, merged over the defaults.
    Missing or malformed data -> defaults.
    """
    path = _resolve(path)
    raw = _read_store(path).get(STORAGE_KEY)
    if raw is None:
        logger.debug("No stored settings at %s, using defaults", path)
        return UserSettings()

    try:
        settings = UserSettings.from_dict(raw)
        schedule = settings.schedule
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        logger.warning("Stored settings are malformed (%s), using defaults", e)
        return UserSettings()

    if not schedule.has_valid_window:
        logger.warning(
            "Work end %s is not after start %s; today will accrue nothing",
            schedule.work_end_hour,
            schedule.work_start_hour,
        )
    return settings


def save_settings(settings: UserSettings, path: Optional[Path] = None) -> Path:
    path = _resolve(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = _read_store(path)
    data[STORAGE_KEY] = settings.to_dict()

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    logger.info("Saved settings to %s", path)
    return path


def reset_settings(path: Optional[Path] = None) -> UserSettings:
    """Drop the stored blob and hand back the defaults."""
    path = _resolve(path)
    data = _read_store(path)
    if data.pop(STORAGE_KEY, None) is not None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
        logger.info("Cleared stored settings in %s", path)
    return UserSettings()
