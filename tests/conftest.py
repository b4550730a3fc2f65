# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Tuple

import pytest

from core.timer_engine import TimerEngine
from domain.models import Settings
from services.task_service import TaskService
from services.timer_service import TimerService
from storage.db import Database
from storage.repos import SettingsRepo


class FakeScheduler:
    """
    Manual clock standing in for Tk's after().

    Callbacks fire only when a test calls advance().
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self._seq = 0
        self._jobs: List[Tuple[int, int, Callable[[], None]]] = []

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> int:
        self._seq += 1
        self._jobs.append((self.now_ms + delay_ms, self._seq, fn))
        return self._seq

    def cancel(self, handle: int) -> None:
        self._jobs = [j for j in self._jobs if j[1] != handle]

    @property
    def pending(self) -> int:
        return len(self._jobs)

    def advance(self, ms: int) -> None:
        target = self.now_ms + ms
        while True:
            due = [j for j in self._jobs if j[0] <= target]
            if not due:
                break
            job = min(due)
            self._jobs.remove(job)
            self.now_ms = job[0]
            job[2]()
        self.now_ms = target


@pytest.fixture()
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture()
def engine() -> TimerEngine:
    return TimerEngine(Settings(pomodoro=25, short_break=5, long_break=15))


@pytest.fixture()
def tasks(engine: TimerEngine) -> TaskService:
    return TaskService(engine)


@pytest.fixture()
def db(tmp_path: Path):
    database = Database(db_path=str(tmp_path / "pomodoro.db"))
    database.init_schema()
    yield database
    database.close()


@pytest.fixture()
def settings_repo(db: Database) -> SettingsRepo:
    return SettingsRepo(db)


@pytest.fixture()
def timer(engine, tasks, scheduler, settings_repo) -> TimerService:
    return TimerService(engine, tasks, scheduler=scheduler, settings_repo=settings_repo)
