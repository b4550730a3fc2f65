# -*- coding: utf-8 -*-

from dataclasses import dataclass
from typing import Optional

from domain.models import Mode, Settings

LONG_BREAK_EVERY = 4


@dataclass(frozen=True)
class EngineSnapshot:
    mode: Mode
    remaining_sec: int
    total_sec: int
    is_running: bool
    session_count: int
    completed_focus_sessions: int
    total_focus_minutes: int
    completed_tasks: int
    current_task_id: Optional[int]

    @property
    def progress(self) -> float:
        """Elapsed fraction of the current phase, 0.0 .. 1.0."""
        if self.total_sec <= 0:
            return 0.0
        return (self.total_sec - self.remaining_sec) / self.total_sec


@dataclass(frozen=True)
class SessionOutcome:
    finished: Mode
    next_mode: Mode
    # task that was current when a focus phase finished
    task_id: Optional[int] = None


class TimerEngine:
    """
    Pure session state machine (no Tkinter, no scheduling).
    The service owns the tick source and calls tick() each second.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings()

        self.mode = Mode.FOCUS
        self.remaining_sec = self.total_sec
        self.is_running = False

        self.session_count = 1
        self.completed_focus_sessions = 0
        self.total_focus_minutes = 0
        self.completed_tasks = 0
        self.current_task_id: Optional[int] = None

    @property
    def total_sec(self) -> int:
        return self.settings.duration_for(self.mode) * 60

    def snapshot(self) -> EngineSnapshot:
        return EngineSnapshot(
            mode=self.mode,
            remaining_sec=self.remaining_sec,
            total_sec=self.total_sec,
            is_running=self.is_running,
            session_count=self.session_count,
            completed_focus_sessions=self.completed_focus_sessions,
            total_focus_minutes=self.total_focus_minutes,
            completed_tasks=self.completed_tasks,
            current_task_id=self.current_task_id,
        )

    def start(self) -> bool:
        """Returns True if the engine was paused and is now running."""
        if self.is_running:
            return False
        self.is_running = True
        return True

    def pause(self) -> bool:
        if not self.is_running:
            return False
        self.is_running = False
        return True

    def reset(self) -> None:
        self.pause()
        self.remaining_sec = self.total_sec

    def switch_mode(self, mode: Mode) -> None:
        self.pause()
        self.mode = mode
        self.remaining_sec = self.total_sec

    def tick(self) -> bool:
        """
        Returns True when the countdown reached zero on this tick.
        The caller is expected to finish the session.
        """
        if not self.is_running:
            return False

        self.remaining_sec -= 1
        if self.remaining_sec <= 0:
            self.remaining_sec = 0
            return True
        return False

    def finish_session(self) -> SessionOutcome:
        self.pause()

        finished = self.mode
        task_id = None
        if finished is Mode.FOCUS:
            self.completed_focus_sessions += 1
            self.total_focus_minutes += self.settings.pomodoro
            task_id = self.current_task_id
            if self.completed_focus_sessions % LONG_BREAK_EVERY == 0:
                next_mode = Mode.LONG_BREAK
            else:
                next_mode = Mode.SHORT_BREAK
        else:
            next_mode = Mode.FOCUS
            self.session_count += 1

        self.switch_mode(next_mode)
        return SessionOutcome(finished=finished, next_mode=next_mode, task_id=task_id)

    def apply_settings(self, settings: Settings) -> bool:
        """
        Replace configuration. Returns True if the active phase restarted
        because its duration changed.
        """
        old_minutes = self.settings.duration_for(self.mode)
        self.settings = settings
        if settings.duration_for(self.mode) != old_minutes:
            self.remaining_sec = self.total_sec
            return True
        return False

    # ----- current task reference -----
    def set_current_task(self, task_id: Optional[int]) -> None:
        self.current_task_id = task_id

    def clear_current_task(self) -> None:
        self.current_task_id = None

    def record_task_completed(self) -> None:
        self.completed_tasks += 1
