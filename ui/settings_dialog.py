# -*- coding: utf-8 -*-

import tkinter as tk
from tkinter import ttk

from services.settings_service import parse_settings_form
from services.timer_service import TimerService


class SettingsDialog(tk.Toplevel):
    def __init__(self, master, timer_service: TimerService):
        super().__init__(master)
        self.timer_service = timer_service

        self.title("Settings")
        self.resizable(False, False)
        self.transient(master)

        current = timer_service.engine.settings
        self.pomodoro_var = tk.StringVar(value=str(current.pomodoro))
        self.short_var = tk.StringVar(value=str(current.short_break))
        self.long_var = tk.StringVar(value=str(current.long_break))
        self.auto_var = tk.BooleanVar(value=current.auto_start)
        self.sound_var = tk.BooleanVar(value=current.sound_enabled)
        self.err_var = tk.StringVar(value="")

        self._build_ui()
        self.bind("<Escape>", lambda e: self.destroy())
        self.bind("<Return>", lambda e: self._save())
        self.grab_set()

    def _build_ui(self):
        outer = ttk.Frame(self, padding=12)
        outer.pack(fill="both", expand=True)

        rows = (
            ("Focus (minutes)", self.pomodoro_var),
            ("Short break (minutes)", self.short_var),
            ("Long break (minutes)", self.long_var),
        )
        for i, (text, var) in enumerate(rows):
            ttk.Label(outer, text=text).grid(row=i, column=0, sticky="w", pady=2)
            ttk.Entry(outer, textvariable=var, width=6).grid(
                row=i, column=1, sticky="e", padx=(8, 0), pady=2
            )

        ttk.Checkbutton(
            outer, text="Auto-start next session", variable=self.auto_var
        ).grid(row=3, column=0, columnspan=2, sticky="w", pady=(8, 0))
        ttk.Checkbutton(
            outer, text="Sound notifications", variable=self.sound_var
        ).grid(row=4, column=0, columnspan=2, sticky="w")

        ttk.Label(outer, textvariable=self.err_var, foreground="red").grid(
            row=5, column=0, columnspan=2, sticky="w", pady=(6, 0)
        )

        btns = ttk.Frame(outer)
        btns.grid(row=6, column=0, columnspan=2, sticky="e", pady=(8, 0))
        ttk.Button(btns, text="Cancel", command=self.destroy).pack(side="right")
        ttk.Button(btns, text="Save", command=self._save).pack(
            side="right", padx=(0, 6)
        )

    def _save(self):
        try:
            settings = parse_settings_form(
                self.pomodoro_var.get(),
                self.short_var.get(),
                self.long_var.get(),
                self.auto_var.get(),
                self.sound_var.get(),
            )
        except ValueError as e:
            self.err_var.set(str(e))
            return

        self.timer_service.apply_settings(settings)
        self.destroy()
