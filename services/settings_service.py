# -*- coding: utf-8 -*-

from domain.models import Settings

_FIELD_LABELS = (
    ("pomodoro", "Focus"),
    ("short_break", "Short break"),
    ("long_break", "Long break"),
)


def _parse_minutes(raw: str, label: str) -> int:
    raw = (raw or "").strip()
    if not raw:
        raise ValueError(f"{label} duration is required.")
    try:
        minutes = int(raw)
    except ValueError:
        raise ValueError(f"{label} duration must be a whole number of minutes.") from None
    if minutes <= 0:
        raise ValueError(f"{label} duration must be greater than zero.")
    return minutes


def parse_settings_form(
    pomodoro: str,
    short_break: str,
    long_break: str,
    auto_start: bool,
    sound_enabled: bool,
) -> Settings:
    """
    Validate raw settings-form input.
    Raises ValueError with a user-facing message on bad durations.
    """
    raw = {"pomodoro": pomodoro, "short_break": short_break, "long_break": long_break}
    minutes = {name: _parse_minutes(raw[name], label) for name, label in _FIELD_LABELS}
    return Settings(
        auto_start=bool(auto_start),
        sound_enabled=bool(sound_enabled),
        **minutes,
    )
