# -*- coding: utf-8 -*-

import tkinter as tk

from domain.models import CueProfile


class CuePlayer:
    """Plays a cue profile with the Tk bell, one ring per tone."""

    def __init__(self, root: tk.Misc):
        self.root = root

    def play(self, profile: CueProfile) -> None:
        for delay in profile.offsets_ms():
            self.root.after(delay, self.root.bell)
