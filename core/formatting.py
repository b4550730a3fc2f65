# -*- coding: utf-8 -*-


def format_time(seconds: int) -> str:
    m = max(0, seconds) // 60
    s = max(0, seconds) % 60
    return f"{m:02d}:{s:02d}"


def format_hours_minutes(minutes: int) -> str:
    minutes = max(0, int(minutes))
    return f"{minutes // 60}h {minutes % 60}m"


def window_title(remaining_sec: int, user_name: str = "") -> str:
    name = (user_name or "").strip() or "User"
    return f"{format_time(remaining_sec)} - {name}'s Pomodoro"
