# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk
from typing import Dict, Optional

from core.formatting import window_title
from core.timer_engine import EngineSnapshot
from domain.models import Task
from services.stats_service import StatsService
from services.task_service import TaskService
from services.timer_service import TimerService
from ui.pomodoro_widget import PomodoroWidget
from ui.settings_dialog import SettingsDialog
from ui.sound import CuePlayer
from ui.toast import Toast


def _format_task_line(t: Task) -> str:
    if t.completed:
        mark = "[x]"
    elif t.selected:
        mark = "[>]"
    else:
        mark = "[ ]"
    return f"{mark} {t.text}"


class MainWindow:
    def __init__(
        self,
        root: tk.Tk,
        task_service: TaskService,
        timer_service: TimerService,
        stats_service: StatsService,
    ):
        self.task_service = task_service
        self.timer_service = timer_service
        self.stats_service = stats_service

        self.root = root
        self.root.title("Pomodoro")
        self.root.geometry("860x440")

        self._list_index_to_task_id: Dict[int, int] = {}

        self._build_ui()

        self.toast = Toast(self.root)
        self.cue_player = CuePlayer(self.root)

        self.timer_service.add_change_listener(self._on_timer_change)
        self.timer_service.add_notify_listener(self.toast.show)
        self.timer_service.add_cue_listener(self.cue_player.play)
        self.task_service.add_change_listener(self._refresh_all)

        self._refresh_all()

    def _build_ui(self):
        root = self.root

        outer = ttk.Frame(root, padding=10)
        outer.pack(fill="both", expand=True)

        outer.columnconfigure(0, weight=1)
        outer.columnconfigure(1, weight=2)
        outer.rowconfigure(1, weight=1)

        # greeting row
        name_row = ttk.Frame(outer)
        name_row.grid(row=0, column=0, columnspan=2, sticky="ew", pady=(0, 8))
        ttk.Label(name_row, text="Your name:").pack(side="left")
        self.name_var = tk.StringVar()
        self.name_var.trace_add("write", lambda *_: self._refresh_title())
        ttk.Entry(name_row, textvariable=self.name_var, width=20).pack(
            side="left", padx=(6, 0)
        )

        # LEFT: Tasks panel
        left = ttk.Labelframe(outer, text="Tasks", padding=10)
        left.grid(row=1, column=0, sticky="nsew", padx=(0, 10))
        left.columnconfigure(0, weight=1)
        left.rowconfigure(2, weight=1)

        add_row = ttk.Frame(left)
        add_row.grid(row=0, column=0, sticky="ew")
        add_row.columnconfigure(0, weight=1)

        self.new_task_var = tk.StringVar()
        self.new_task_entry = ttk.Entry(add_row, textvariable=self.new_task_var)
        self.new_task_entry.grid(row=0, column=0, sticky="ew")
        self.new_task_entry.bind("<Return>", lambda e: self._add_task())
        ttk.Button(add_row, text="Add", command=self._add_task).grid(
            row=0, column=1, padx=(6, 0)
        )

        self.err_var = tk.StringVar(value="")
        ttk.Label(left, textvariable=self.err_var, foreground="red").grid(
            row=1, column=0, sticky="w", pady=(6, 6)
        )

        self.task_list = tk.Listbox(left, height=12, exportselection=False)
        self.task_list.grid(row=2, column=0, sticky="nsew")
        self.task_list.bind("<Double-Button-1>", lambda e: self._select_task())

        actions = ttk.Frame(left)
        actions.grid(row=3, column=0, sticky="ew", pady=(8, 0))

        ttk.Button(actions, text="Select", command=self._select_task).pack(side="left")
        ttk.Button(actions, text="Complete / Undo", command=self._toggle_task).pack(
            side="left", padx=(6, 0)
        )
        ttk.Button(actions, text="Delete", command=self._delete_task).pack(side="right")

        # RIGHT: Pomodoro + Stats
        right = ttk.Frame(outer)
        right.grid(row=1, column=1, sticky="nsew")
        right.columnconfigure(0, weight=1)
        right.rowconfigure(1, weight=1)

        self.pomodoro = PomodoroWidget(
            right,
            timer_service=self.timer_service,
            task_service=self.task_service,
            on_open_settings=self._open_settings,
        )
        self.pomodoro.grid(row=0, column=0, sticky="ew")

        stats = ttk.Labelframe(right, text="Stats", padding=10)
        stats.grid(row=1, column=0, sticky="nsew", pady=(10, 0))
        stats.columnconfigure(0, weight=1)

        self.stats_var = tk.StringVar(value="")
        ttk.Label(stats, textvariable=self.stats_var, font=("Sans", 11)).grid(
            row=0, column=0, sticky="w"
        )

    def run(self):
        self.root.mainloop()

    # ----- Task helpers -----
    def _highlighted_task_id(self) -> Optional[int]:
        sel = self.task_list.curselection()
        if not sel:
            self.err_var.set("Pick a task first.")
            return None
        self.err_var.set("")
        return self._list_index_to_task_id.get(int(sel[0]))

    # ----- UI actions -----
    def _add_task(self):
        task = self.task_service.add_task(self.new_task_var.get())
        if task is not None:
            self.new_task_var.set("")

    def _select_task(self):
        tid = self._highlighted_task_id()
        if tid is not None:
            self.task_service.select_task(tid)

    def _toggle_task(self):
        tid = self._highlighted_task_id()
        if tid is not None:
            self.task_service.toggle_complete(tid)

    def _delete_task(self):
        tid = self._highlighted_task_id()
        if tid is not None:
            self.task_service.delete_task(tid)

    def _open_settings(self):
        SettingsDialog(self.root, self.timer_service)

    # ----- Refresh -----
    def _on_timer_change(self, snap: EngineSnapshot):
        self._refresh_title(snap)
        self._refresh_stats_only()

    def _refresh_all(self):
        self._refresh_tasks_only()
        self._refresh_stats_only()
        self._refresh_title()

    def _refresh_tasks_only(self):
        self.task_list.delete(0, tk.END)
        self._list_index_to_task_id.clear()

        for i, t in enumerate(self.task_service.list_tasks()):
            self.task_list.insert(tk.END, _format_task_line(t))
            self._list_index_to_task_id[i] = t.id
            if t.selected:
                self.task_list.itemconfig(i, foreground="#ff6b6b")
            elif t.completed:
                self.task_list.itemconfig(i, foreground="#9CA3AF")

    def _refresh_stats_only(self):
        self.stats_var.set(self.stats_service.summary_text())

    def _refresh_title(self, snap: Optional[EngineSnapshot] = None):
        snap = snap or self.timer_service.get_snapshot()
        self.root.title(window_title(snap.remaining_sec, self.name_var.get()))
