# -*- coding: utf-8 -*-

import tkinter as tk
from typing import Callable


class TkScheduler:
    """Runs callbacks on the Tk event loop via after()."""

    def __init__(self, root: tk.Misc):
        self.root = root

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> str:
        return self.root.after(delay_ms, fn)

    def cancel(self, handle: str) -> None:
        try:
            self.root.after_cancel(handle)
        except tk.TclError:
            # already fired or the window is gone
            pass
