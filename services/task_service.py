# services/task_service.py
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from core.timer_engine import TimerEngine
from domain.models import Task

logger = logging.getLogger(__name__)


class TaskService:
    """
    In-memory ordered task list.

    Owns every Task record; the engine only keeps the id of the
    current task plus the completed-task counter.
    """

    def __init__(self, engine: TimerEngine):
        self.engine = engine
        self._tasks: List[Task] = []
        self._next_id = 0
        self._listeners: List[Callable[[], None]] = []

    # ---- listeners ----
    def add_change_listener(self, fn: Callable[[], None]) -> None:
        self._listeners.append(fn)

    def _emit_change(self) -> None:
        for fn in list(self._listeners):
            fn()

    # ---- queries ----
    def list_tasks(self) -> List[Task]:
        return list(self._tasks)

    def get_task(self, task_id: int) -> Optional[Task]:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    def current_task(self) -> Optional[Task]:
        tid = self.engine.current_task_id
        if tid is None:
            return None
        return self.get_task(tid)

    # ---- tasks ----
    def add_task(self, text: str) -> Optional[Task]:
        text = (text or "").strip()
        if not text:
            return None

        task = Task(id=self._next_id, text=text)
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("Added task %d: %s", task.id, text)
        self._emit_change()
        return task

    def select_task(self, task_id: int) -> None:
        for t in self._tasks:
            t.selected = False
        self.engine.clear_current_task()

        task = self.get_task(task_id)
        if task is not None and not task.completed:
            task.selected = True
            self.engine.set_current_task(task.id)
            logger.debug("Selected task %d", task.id)

        self._emit_change()

    def toggle_complete(self, task_id: int) -> None:
        task = self.get_task(task_id)
        if task is None:
            return

        task.completed = not task.completed
        if task.completed:
            task.selected = False
            if self.engine.current_task_id == task_id:
                self.engine.clear_current_task()
                self.engine.record_task_completed()
            logger.info("Task %d completed", task_id)

        self._emit_change()

    def delete_task(self, task_id: int) -> None:
        task = self.get_task(task_id)
        if task is None:
            return

        self._tasks = [t for t in self._tasks if t.id != task_id]
        if self.engine.current_task_id == task_id:
            self.engine.clear_current_task()
        logger.debug("Deleted task %d", task_id)
        self._emit_change()
