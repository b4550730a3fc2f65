# storage/repos.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import json
import logging
from dataclasses import fields
from typing import Any, Dict, Optional

from domain.models import Settings
from storage.db import Database

logger = logging.getLogger(__name__)

SETTINGS_KEY = "pomodoroSettings"

# persisted record key -> Settings field
_RECORD_FIELDS = {
    "pomodoro": "pomodoro",
    "shortBreak": "short_break",
    "longBreak": "long_break",
    "autoStart": "auto_start",
    "soundEnabled": "sound_enabled",
}


class AppStateRepo:
    def __init__(self, db: Database):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        row = self.db.conn.execute(
            "SELECT value FROM app_state WHERE key=?",
            (key,),
        ).fetchone()
        return row["value"] if row else None

    def set(self, key: str, value: str) -> None:
        self.db.conn.execute(
            """
            INSERT INTO app_state(key, value) VALUES(?, ?)
            ON CONFLICT(key) DO UPDATE SET value=excluded.value
            """,
            (key, value),
        )
        self.db.conn.commit()

    def delete(self, key: str) -> None:
        self.db.conn.execute("DELETE FROM app_state WHERE key=?", (key,))
        self.db.conn.commit()


def settings_to_record(settings: Settings) -> Dict[str, Any]:
    return {key: getattr(settings, attr) for key, attr in _RECORD_FIELDS.items()}


def settings_from_record(record: Dict[str, Any]) -> Settings:
    """
    Merge a stored record over the defaults.
    Unknown keys are ignored; missing or invalid values keep their default.
    """
    defaults = Settings()
    values = {f.name: getattr(defaults, f.name) for f in fields(Settings)}

    for key, attr in _RECORD_FIELDS.items():
        if key not in record:
            continue
        raw = record[key]
        if attr in ("auto_start", "sound_enabled"):
            if isinstance(raw, bool):
                values[attr] = raw
            else:
                logger.warning("Ignoring stored %s=%r (not a bool)", key, raw)
            continue
        if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
            logger.warning("Ignoring stored %s=%r (not a positive int)", key, raw)
            continue
        values[attr] = raw

    return Settings(**values)


class SettingsRepo:
    def __init__(self, db: Database, key: str = SETTINGS_KEY):
        self.state = AppStateRepo(db)
        self.key = key

    def load(self) -> Settings:
        raw = self.state.get(self.key)
        if raw is None:
            return Settings()
        try:
            record = json.loads(raw)
        except ValueError:
            logger.warning("Stored settings are not valid JSON; using defaults")
            return Settings()
        if not isinstance(record, dict):
            logger.warning("Stored settings are not an object; using defaults")
            return Settings()
        return settings_from_record(record)

    def save(self, settings: Settings) -> None:
        self.state.set(self.key, json.dumps(settings_to_record(settings)))
