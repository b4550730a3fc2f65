# -*- coding: utf-8 -*-

import logging
from typing import Any, Callable, List, Optional, Union

from core.scheduler import Scheduler
from core.timer_engine import EngineSnapshot, TimerEngine
from domain.models import CueProfile, Mode, Settings
from services.task_service import TaskService
from storage.repos import SettingsRepo

logger = logging.getLogger(__name__)

TICK_MS = 1000
AUTO_START_DELAY_MS = 3000


class TimerService:
    """
    Orchestrates:
    - TimerEngine state
    - the one-second tick source and the auto-start cooldown
    - current task completion when a focus phase ends
    - settings persistence
    - callbacks for UI
    """

    def __init__(
        self,
        engine: TimerEngine,
        task_service: TaskService,
        scheduler: Scheduler,
        settings_repo: Optional[SettingsRepo] = None,
        cue_profile: CueProfile = CueProfile.SINGLE,
    ):
        self.engine = engine
        self.task_service = task_service
        self.scheduler = scheduler
        self.settings_repo = settings_repo
        self.cue_profile = cue_profile

        self._tick_job: Any = None
        self._auto_start_job: Any = None

        self._on_change: List[Callable[[EngineSnapshot], None]] = []
        self._on_notify: List[Callable[[str], None]] = []
        self._on_cue: List[Callable[[CueProfile], None]] = []

    # ----- Callbacks -----
    def add_change_listener(self, fn: Callable[[EngineSnapshot], None]) -> None:
        self._on_change.append(fn)

    def add_notify_listener(self, fn: Callable[[str], None]) -> None:
        self._on_notify.append(fn)

    def add_cue_listener(self, fn: Callable[[CueProfile], None]) -> None:
        self._on_cue.append(fn)

    def _emit_change(self) -> None:
        snap = self.engine.snapshot()
        for fn in list(self._on_change):
            fn(snap)

    def _emit_notify(self, message: str) -> None:
        for fn in list(self._on_notify):
            fn(message)

    def _emit_cue(self) -> None:
        for fn in list(self._on_cue):
            fn(self.cue_profile)

    # ----- Public API -----
    def get_snapshot(self) -> EngineSnapshot:
        return self.engine.snapshot()

    @property
    def auto_start_pending(self) -> bool:
        return self._auto_start_job is not None

    def start(self) -> None:
        self._cancel_auto_start()
        self._start()

    def pause(self) -> None:
        self._cancel_auto_start()
        if self.engine.pause():
            self._stop_tick_loop()
            logger.debug("Paused %s at %ss", self.engine.mode.value, self.engine.remaining_sec)
            self._emit_change()

    def reset(self) -> None:
        self._cancel_auto_start()
        self._stop_tick_loop()
        self.engine.reset()
        self._emit_change()

    def switch_mode(self, mode: Union[Mode, str]) -> None:
        mode = Mode.parse(mode)
        self._cancel_auto_start()
        self._stop_tick_loop()
        self.engine.switch_mode(mode)
        logger.debug("Switched mode to %s", mode.value)
        self._emit_change()

    def tick(self) -> None:
        """
        Should be called once per second while running.
        Finishes the session when the countdown reaches zero.
        """
        if not self.engine.is_running:
            return

        if self.engine.tick():
            self.complete_session()
        else:
            self._emit_change()

    def complete_session(self) -> None:
        self._cancel_auto_start()
        self._stop_tick_loop()
        outcome = self.engine.finish_session()

        if outcome.task_id is not None:
            self.task_service.toggle_complete(outcome.task_id)

        logger.info(
            "%s completed, next %s (focus sessions: %d)",
            outcome.finished.label,
            outcome.next_mode.label,
            self.engine.completed_focus_sessions,
        )
        self._emit_change()
        self._emit_notify(f"{outcome.next_mode.label} completed!")
        if self.engine.settings.sound_enabled:
            self._emit_cue()

        if self.engine.settings.auto_start:
            self._auto_start_job = self.scheduler.call_later(
                AUTO_START_DELAY_MS, self._auto_start
            )

    def apply_settings(self, settings: Settings) -> None:
        restarted = self.engine.apply_settings(settings)
        if self.settings_repo is not None:
            self.settings_repo.save(settings)
        if restarted:
            logger.info("Active phase restarted with new duration")
        self._emit_change()
        self._emit_notify("Settings saved!")

    # ----- Tick loop -----
    def _start(self) -> None:
        if self.engine.start():
            self._ensure_tick_loop()
            logger.debug("Started %s with %ss left", self.engine.mode.value, self.engine.remaining_sec)
            self._emit_change()

    def _ensure_tick_loop(self) -> None:
        if self._tick_job is None:
            self._tick_job = self.scheduler.call_later(TICK_MS, self._tick_once)

    def _stop_tick_loop(self) -> None:
        if self._tick_job is not None:
            self.scheduler.cancel(self._tick_job)
            self._tick_job = None

    def _tick_once(self) -> None:
        self._tick_job = None
        if not self.engine.is_running:
            return
        self.tick()
        if self.engine.is_running:
            self._ensure_tick_loop()

    # ----- Auto start -----
    def _auto_start(self) -> None:
        self._auto_start_job = None
        logger.debug("Auto-starting %s", self.engine.mode.value)
        self._start()

    def _cancel_auto_start(self) -> None:
        if self._auto_start_job is not None:
            self.scheduler.cancel(self._auto_start_job)
            self._auto_start_job = None
            logger.debug("Cancelled pending auto-start")
