# -*- coding: utf-8 -*-

"""Application settings loaded from environment variables.

Timer durations are user settings stored in the database; this module
only covers where things live and how the app behaves at start-up.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from domain.models import CueProfile

ENV_PREFIX = "POMODORO"

logger = logging.getLogger(__name__)


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_log_level(name: str, default: int) -> int:
    raw = _env(name)
    if not raw:
        return default
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


def _env_cue(name: str, default: CueProfile) -> CueProfile:
    raw = _env(name).lower()
    if not raw:
        return default
    try:
        return CueProfile(raw)
    except ValueError:
        logger.warning("Unknown %s=%r, using %s", name, raw, default.value)
        return default


@dataclass(frozen=True)
class AppConfig:
    db_path: Path = Path("pomodoro.db")
    log_dir: Path = Path(".local/pomodoro")
    log_level: int = logging.INFO
    cue_profile: CueProfile = CueProfile.SINGLE


def load_config() -> AppConfig:
    defaults = AppConfig()
    return AppConfig(
        db_path=_env_path(_k("DB_PATH"), defaults.db_path),
        log_dir=_env_path(_k("LOG_DIR"), defaults.log_dir),
        log_level=_env_log_level(_k("LOG_LEVEL"), defaults.log_level),
        cue_profile=_env_cue(_k("CUE"), defaults.cue_profile),
    )
