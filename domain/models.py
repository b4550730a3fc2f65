# -*- coding: utf-8 -*-

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Mode(Enum):
    FOCUS = "pomodoro"
    SHORT_BREAK = "shortBreak"
    LONG_BREAK = "longBreak"

    @property
    def label(self) -> str:
        return _MODE_LABELS[self]

    @property
    def color(self) -> str:
        return _MODE_COLORS[self]

    @classmethod
    def parse(cls, value) -> "Mode":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Unknown mode: {value!r}") from None


_MODE_LABELS = {
    Mode.FOCUS: "Focus",
    Mode.SHORT_BREAK: "Short Break",
    Mode.LONG_BREAK: "Long Break",
}

_MODE_COLORS = {
    Mode.FOCUS: "#ff6b6b",
    Mode.SHORT_BREAK: "#4ecdc4",
    Mode.LONG_BREAK: "#45b7d1",
}


@dataclass
class Task:
    id: int
    text: str
    completed: bool = False
    selected: bool = False


@dataclass(frozen=True)
class Settings:
    pomodoro: int = 25
    short_break: int = 5
    long_break: int = 15
    auto_start: bool = False
    sound_enabled: bool = True

    def __post_init__(self):
        for name in ("pomodoro", "short_break", "long_break"):
            value = getattr(self, name)
            # bool is an int subclass; reject it explicitly
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be a whole number of minutes.")
            if value <= 0:
                raise ValueError(f"{name} must be greater than zero.")

    def duration_for(self, mode: Mode) -> int:
        if mode is Mode.FOCUS:
            return self.pomodoro
        if mode is Mode.SHORT_BREAK:
            return self.short_break
        return self.long_break


@dataclass(frozen=True)
class Tone:
    frequency_hz: int
    duration_ms: int
    gap_ms: int = 0


class CueProfile(Enum):
    """
    Sound played when a session completes.

    Tone pitch describes the intended sound only; the Tk player can ring
    the bell but not tune it, so it follows the timing alone.
    """

    SINGLE = "single"
    TRIPLE = "triple"

    @property
    def tones(self) -> Tuple[Tone, ...]:
        return _CUE_TONES[self]

    def offsets_ms(self) -> Tuple[int, ...]:
        """Start time of each tone relative to the first one."""
        out = []
        at = 0
        for tone in self.tones:
            out.append(at)
            at += tone.duration_ms + tone.gap_ms
        return tuple(out)


_CUE_TONES = {
    CueProfile.SINGLE: (Tone(800, 500),),
    CueProfile.TRIPLE: (
        Tone(800, 200, gap_ms=100),
        Tone(1000, 200, gap_ms=100),
        Tone(1200, 300),
    ),
}
