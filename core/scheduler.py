# -*- coding: utf-8 -*-

from typing import Any, Callable, Protocol


class Scheduler(Protocol):
    """
    One-shot callback scheduling on the UI event loop.
    Tk's after()/after_cancel() satisfy this shape.
    """

    def call_later(self, delay_ms: int, fn: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...
