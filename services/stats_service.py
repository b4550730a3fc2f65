# -*- coding: utf-8 -*-

from typing import Dict

from core.formatting import format_hours_minutes
from services.timer_service import TimerService


class StatsService:
    def __init__(self, timer_service: TimerService):
        self.timer_service = timer_service

    def summary(self) -> Dict[str, str]:
        snap = self.timer_service.get_snapshot()
        return {
            "completed_sessions": str(snap.completed_focus_sessions),
            "total_time": format_hours_minutes(snap.total_focus_minutes),
            "completed_tasks": str(snap.completed_tasks),
        }

    def summary_text(self) -> str:
        s = self.summary()
        return (
            f"Sessions: {s['completed_sessions']}\n"
            f"Focus time: {s['total_time']}\n"
            f"Tasks done: {s['completed_tasks']}"
        )
