# tests/test_timer_service.py

from __future__ import annotations

import pytest

from core.timer_engine import TimerEngine
from domain.models import CueProfile, Mode, Settings
from services.task_service import TaskService
from services.timer_service import AUTO_START_DELAY_MS, TICK_MS, TimerService
from storage.repos import SettingsRepo

from conftest import FakeScheduler


class Recorder:
    def __init__(self, timer: TimerService) -> None:
        self.snaps = []
        self.messages = []
        self.cues = []
        timer.add_change_listener(self.snaps.append)
        timer.add_notify_listener(self.messages.append)
        timer.add_cue_listener(self.cues.append)


def _run_phase(timer: TimerService, scheduler: FakeScheduler) -> None:
    timer.start()
    scheduler.advance(timer.engine.remaining_sec * TICK_MS)


def test_scenario_focus_completes_after_1500_ticks(
    timer: TimerService, scheduler: FakeScheduler
) -> None:
    rec = Recorder(timer)
    timer.start()
    scheduler.advance(1499 * TICK_MS)
    assert timer.engine.remaining_sec == 1
    assert rec.messages == []

    scheduler.advance(TICK_MS)

    snap = timer.get_snapshot()
    assert rec.messages == ["Short Break completed!"]
    assert snap.completed_focus_sessions == 1
    assert snap.total_focus_minutes == 25
    assert snap.mode is Mode.SHORT_BREAK
    assert snap.remaining_sec == 300
    assert not snap.is_running
    # tick source is stopped
    assert scheduler.pending == 0


def test_manual_ticks_complete_exactly_once(timer: TimerService) -> None:
    rec = Recorder(timer)
    timer.engine.apply_settings(Settings(pomodoro=1))
    timer.engine.start()
    for _ in range(60):
        timer.tick()
    # further ticks while paused do nothing
    for _ in range(10):
        timer.tick()
    assert rec.messages == ["Short Break completed!"]
    assert timer.engine.remaining_sec == 300


def test_scenario_fourth_focus_goes_to_long_break(
    timer: TimerService, scheduler: FakeScheduler
) -> None:
    timer.apply_settings(Settings(pomodoro=1, short_break=1, long_break=2))
    next_modes = []
    for _ in range(4):
        assert timer.engine.mode is Mode.FOCUS
        _run_phase(timer, scheduler)
        next_modes.append(timer.engine.mode)
        _run_phase(timer, scheduler)

    assert next_modes == [Mode.SHORT_BREAK] * 3 + [Mode.LONG_BREAK]
    assert timer.engine.session_count == 5
    assert timer.engine.completed_focus_sessions == 4


def test_break_completion_increments_session_count(
    timer: TimerService, scheduler: FakeScheduler
) -> None:
    timer.switch_mode(Mode.SHORT_BREAK)
    _run_phase(timer, scheduler)
    assert timer.engine.mode is Mode.FOCUS
    assert timer.engine.session_count == 2


def test_focus_completion_completes_current_task(
    timer: TimerService, tasks: TaskService, scheduler: FakeScheduler
) -> None:
    task = tasks.add_task("write report")
    tasks.select_task(task.id)

    _run_phase(timer, scheduler)

    assert task.completed
    assert not task.selected
    assert timer.engine.current_task_id is None
    assert timer.engine.completed_tasks == 1


def test_pause_stops_the_tick_source(timer: TimerService, scheduler: FakeScheduler) -> None:
    timer.start()
    scheduler.advance(10 * TICK_MS)
    timer.pause()
    scheduler.advance(60 * TICK_MS)
    assert timer.engine.remaining_sec == 25 * 60 - 10
    assert scheduler.pending == 0


def test_double_start_keeps_a_single_tick_source(
    timer: TimerService, scheduler: FakeScheduler
) -> None:
    timer.start()
    timer.start()
    scheduler.advance(5 * TICK_MS)
    assert timer.engine.remaining_sec == 25 * 60 - 5


def test_reset_pauses_and_refills(timer: TimerService, scheduler: FakeScheduler) -> None:
    timer.start()
    scheduler.advance(30 * TICK_MS)
    timer.reset()
    assert not timer.engine.is_running
    assert timer.engine.remaining_sec == 25 * 60


def test_switch_mode_accepts_string_values(timer: TimerService) -> None:
    timer.switch_mode("longBreak")
    assert timer.engine.mode is Mode.LONG_BREAK
    with pytest.raises(ValueError):
        timer.switch_mode("nap")


def test_auto_start_fires_after_cooldown(timer: TimerService, scheduler: FakeScheduler) -> None:
    timer.apply_settings(Settings(pomodoro=1, auto_start=True))
    _run_phase(timer, scheduler)
    assert timer.auto_start_pending
    assert not timer.engine.is_running

    scheduler.advance(AUTO_START_DELAY_MS - 1)
    assert not timer.engine.is_running
    scheduler.advance(1)
    assert timer.engine.is_running
    assert timer.engine.mode is Mode.SHORT_BREAK
    assert not timer.auto_start_pending


@pytest.mark.parametrize("action", ["pause", "reset", "switch", "start"])
def test_manual_intervention_cancels_auto_start(
    timer: TimerService, scheduler: FakeScheduler, action: str
) -> None:
    timer.apply_settings(Settings(pomodoro=1, auto_start=True))
    _run_phase(timer, scheduler)
    assert timer.auto_start_pending

    if action == "pause":
        timer.pause()
    elif action == "reset":
        timer.reset()
    elif action == "switch":
        timer.switch_mode(Mode.FOCUS)
    else:
        timer.start()
        timer.pause()

    scheduler.advance(AUTO_START_DELAY_MS)
    assert not timer.auto_start_pending
    assert not timer.engine.is_running


def test_cue_follows_sound_setting(timer: TimerService, scheduler: FakeScheduler) -> None:
    rec = Recorder(timer)
    timer.cue_profile = CueProfile.TRIPLE
    timer.engine.apply_settings(Settings(pomodoro=1, short_break=1))
    _run_phase(timer, scheduler)
    assert rec.cues == [CueProfile.TRIPLE]

    timer.engine.apply_settings(Settings(pomodoro=1, short_break=1, sound_enabled=False))
    _run_phase(timer, scheduler)
    assert rec.cues == [CueProfile.TRIPLE]
    assert rec.messages[-1] == "Focus completed!"


def test_apply_settings_persists_and_restarts_phase(
    timer: TimerService, scheduler: FakeScheduler, settings_repo: SettingsRepo
) -> None:
    rec = Recorder(timer)
    timer.start()
    scheduler.advance(10 * TICK_MS)

    new = Settings(pomodoro=30, short_break=6, long_break=20, auto_start=True, sound_enabled=False)
    timer.apply_settings(new)

    assert timer.engine.remaining_sec == 30 * 60
    assert timer.engine.is_running
    assert settings_repo.load() == new
    assert rec.messages == ["Settings saved!"]


def test_change_listeners_see_every_tick(
    engine: TimerEngine, tasks: TaskService, scheduler: FakeScheduler
) -> None:
    timer = TimerService(engine, tasks, scheduler=scheduler)
    rec = Recorder(timer)
    timer.start()
    scheduler.advance(3 * TICK_MS)
    assert [s.remaining_sec for s in rec.snaps] == [1500, 1499, 1498, 1497]
    assert rec.snaps[0].is_running


def test_completion_notice_names_the_mode_switched_to(
    timer: TimerService, scheduler: FakeScheduler
) -> None:
    rec = Recorder(timer)
    timer.engine.apply_settings(Settings(pomodoro=1, short_break=1))
    _run_phase(timer, scheduler)
    assert timer.engine.mode is Mode.SHORT_BREAK
    assert rec.messages == ["Short Break completed!"]

    _run_phase(timer, scheduler)
    assert rec.messages == ["Short Break completed!", "Focus completed!"]


def test_repeated_completion_leaves_one_cancellable_auto_start(
    timer: TimerService, scheduler: FakeScheduler
) -> None:
    timer.apply_settings(Settings(pomodoro=1, auto_start=True))
    timer.complete_session()
    timer.complete_session()
    assert scheduler.pending == 1

    timer.pause()
    scheduler.advance(AUTO_START_DELAY_MS)

    assert not timer.auto_start_pending
    assert not timer.engine.is_running
    assert scheduler.pending == 0
