# -*- coding: utf-8 -*-

import tkinter as tk

TOAST_MS = 3000


class Toast:
    """Transient notice shown at the bottom of the window."""

    def __init__(self, root: tk.Misc, bg: str = "#111827", fg: str = "white"):
        self.root = root
        self._job = None
        self.label = tk.Label(
            root,
            text="",
            bg=bg,
            fg=fg,
            font=("Montserrat", 10, "bold"),
            padx=14,
            pady=8,
        )

    def show(self, message: str) -> None:
        self.label.config(text=message)
        self.label.place(relx=0.5, rely=1.0, anchor="s", y=-12)
        self.label.lift()
        if self._job is not None:
            self.root.after_cancel(self._job)
        self._job = self.root.after(TOAST_MS, self._hide)

    def _hide(self) -> None:
        self._job = None
        self.label.place_forget()
