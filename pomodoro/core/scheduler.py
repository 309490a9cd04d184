from __future__ import annotations

import logging
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000

TickCallback = Callable[[], bool]


class Scheduler(Protocol):
    def schedule(self, callback: TickCallback) -> int:
        """Invoke `callback` once per period while it returns True."""

    def cancel(self, handle: int) -> None:
        """Stop `handle`; no further invocation may happen after this returns."""


class QtScheduler(QObject):
    """Recurring callbacks on the Qt event loop, one QTimer per handle."""

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._interval_ms = interval_ms
        self._timers: dict[int, QTimer] = {}
        self._next_handle = 1

    @property
    def active_count(self) -> int:
        return len(self._timers)

    def is_active(self, handle: int) -> bool:
        return handle in self._timers

    def schedule(self, callback: TickCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1

        timer = QTimer(self)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(lambda: self._fire(handle, callback))
        self._timers[handle] = timer
        timer.start()
        logger.debug("Scheduled handle %d every %d ms", handle, self._interval_ms)
        return handle

    def cancel(self, handle: int) -> None:
        timer = self._timers.pop(handle, None)
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()
        logger.debug("Canceled handle %d", handle)

    def _fire(self, handle: int, callback: TickCallback) -> None:
        # a timeout already queued before cancel() must not reach the callback
        if handle not in self._timers:
            return
        if not callback():
            self.cancel(handle)
