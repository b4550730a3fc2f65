# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Callable, Dict

from core.formatting import format_time
from core.timer_engine import EngineSnapshot
from domain.models import Mode
from services.task_service import TaskService
from services.timer_service import TimerService


class PomodoroWidget(ttk.Frame):
    def __init__(
        self,
        master,
        timer_service: TimerService,
        task_service: TaskService,
        on_open_settings: Callable[[], None],
    ):
        super().__init__(master)

        self.timer_service = timer_service
        self.task_service = task_service
        self.on_open_settings = on_open_settings

        self._mode_btns: Dict[Mode, ttk.Button] = {}

        self._build_ui()

        # wire callbacks from services -> widget UI
        self.timer_service.add_change_listener(self._render)
        self.task_service.add_change_listener(self.refresh)

        # initial render
        self.refresh()

    def _build_ui(self):
        self.columnconfigure(0, weight=1)

        style = ttk.Style(self)
        style.configure("Active.TButton", font=("Sans", 10, "bold"))

        self.phase_var = tk.StringVar(value=Mode.FOCUS.label)
        self.time_var = tk.StringVar(value="25:00")
        self.session_var = tk.StringVar(value="Session 1")
        self.task_var = tk.StringVar(value="Select a task")

        modes = ttk.Frame(self)
        modes.grid(row=0, column=0, sticky="w", pady=(0, 8))
        for i, mode in enumerate(Mode):
            btn = ttk.Button(
                modes,
                text=mode.label,
                command=lambda m=mode: self.timer_service.switch_mode(m),
            )
            btn.grid(row=0, column=i, padx=(0, 6))
            self._mode_btns[mode] = btn

        self.phase_label = ttk.Label(
            self, textvariable=self.phase_var, font=("Sans", 12, "bold")
        )
        self.phase_label.grid(row=1, column=0, sticky="w")

        self.time_label = tk.Label(
            self, textvariable=self.time_var, font=("Sans", 32, "bold")
        )
        self.time_label.grid(row=2, column=0, sticky="w", pady=(8, 4))

        self.progress = ttk.Progressbar(self, maximum=1.0, mode="determinate")
        self.progress.grid(row=3, column=0, sticky="ew", pady=(0, 8))

        ttk.Label(self, textvariable=self.session_var).grid(
            row=4, column=0, sticky="w"
        )
        ttk.Label(self, textvariable=self.task_var).grid(
            row=5, column=0, sticky="w", pady=(0, 10)
        )

        btns = ttk.Frame(self)
        btns.grid(row=6, column=0, sticky="w")

        # start and pause share a slot; only one is shown at a time
        self.start_btn = ttk.Button(btns, text="Start", command=self.timer_service.start)
        self.pause_btn = ttk.Button(btns, text="Pause", command=self.timer_service.pause)
        self.reset_btn = ttk.Button(btns, text="Reset", command=self.timer_service.reset)
        self.settings_btn = ttk.Button(btns, text="Settings", command=self.on_open_settings)

        self.start_btn.grid(row=0, column=0, padx=(0, 6))
        self.reset_btn.grid(row=0, column=1, padx=(0, 6))
        self.settings_btn.grid(row=0, column=2)

    def refresh(self):
        self._render(self.timer_service.get_snapshot())

    def _update_buttons(self, snap: EngineSnapshot):
        if snap.is_running:
            self.start_btn.grid_remove()
            self.pause_btn.grid(row=0, column=0, padx=(0, 6))
        else:
            self.pause_btn.grid_remove()
            self.start_btn.grid(row=0, column=0, padx=(0, 6))

        for mode, btn in self._mode_btns.items():
            btn.configure(style="Active.TButton" if mode is snap.mode else "TButton")

    def _render(self, snap: EngineSnapshot):
        self.time_var.set(format_time(snap.remaining_sec))
        self.phase_var.set(snap.mode.label)
        self.time_label.config(fg=snap.mode.color)
        self.progress["value"] = snap.progress
        self.session_var.set(f"Session {snap.session_count}")

        task = self.task_service.current_task()
        self.task_var.set(task.text if task else "Select a task")

        self._update_buttons(snap)
