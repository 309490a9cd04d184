from __future__ import annotations

from typing import Callable

import pytest
from PyQt6.QtCore import QCoreApplication

from pomodoro.core.errors import StorageError
from pomodoro.core.settings import Settings


class FakeScheduler:
    """Scheduler driven by hand: `fire(handle)` runs one tick."""

    def __init__(self) -> None:
        self._callbacks: dict[int, Callable[[], bool]] = {}
        self._next_handle = 1
        self.scheduled: list[int] = []
        self.canceled: list[int] = []

    def schedule(self, callback: Callable[[], bool]) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        self.scheduled.append(handle)
        return handle

    def cancel(self, handle: int) -> None:
        self.canceled.append(handle)
        self._callbacks.pop(handle, None)

    def fire(self, handle: int) -> bool:
        callback = self._callbacks.get(handle)
        if callback is None:
            return False
        keep_going = callback()
        if not keep_going:
            self._callbacks.pop(handle, None)
        return keep_going

    def fire_active(self, times: int = 1) -> None:
        for _ in range(times):
            for handle in list(self._callbacks):
                self.fire(handle)

    def is_active(self, handle: int) -> bool:
        return handle in self._callbacks

    @property
    def active_count(self) -> int:
        return len(self._callbacks)

    @property
    def last_handle(self) -> int:
        return self.scheduled[-1]


class MemorySettingsStore:
    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings
        self.saved: list[Settings] = []
        self.fail_load = False
        self.fail_save = False

    def load(self) -> Settings:
        if self.fail_load:
            raise StorageError("load unavailable")
        return self.settings if self.settings is not None else Settings.default()

    def save(self, settings: Settings) -> None:
        if self.fail_save:
            raise StorageError("save unavailable")
        self.settings = settings
        self.saved.append(settings)


@pytest.fixture(scope="session")
def qapp() -> QCoreApplication:
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def store() -> MemorySettingsStore:
    return MemorySettingsStore(Settings.make(25, 5))
