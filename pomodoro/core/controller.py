from __future__ import annotations

import logging
from dataclasses import replace

from PyQt6.QtCore import QObject, pyqtSignal

from pomodoro.core import timer
from pomodoro.core.errors import StorageError
from pomodoro.core.scheduler import Scheduler
from pomodoro.core.settings import Settings
from pomodoro.core.timer import Mode, RunState, TimerState
from pomodoro.data.storage import SettingsStore


logger = logging.getLogger(__name__)


class TimerController(QObject):
    """Holds the current TimerState and drives it from a Scheduler.

    Every command replaces the state with the result of a pure transition
    from `pomodoro.core.timer` and then publishes the properties that
    changed. A tick that reaches zero is published only after the mode
    transition, so observers never see a running timer at 00:00.
    """

    # fired after the per-property signals whenever the timer state changed
    state_changed = pyqtSignal()
    mode_changed = pyqtSignal(object)
    mode_label_changed = pyqtSignal(str)
    mode_icon_changed = pyqtSignal(str)
    run_state_changed = pyqtSignal(object)
    start_stop_label_changed = pyqtSignal(str)
    remaining_seconds_changed = pyqtSignal(int)
    display_time_changed = pyqtSignal(str)
    settings_changed = pyqtSignal(object)
    storage_failed = pyqtSignal(str)

    def __init__(self, scheduler: Scheduler, store: SettingsStore, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._scheduler = scheduler
        self._store = store
        self._settings = self._load_settings()
        self._state = timer.initial(self._settings)
        self._handle: int | None = None

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def mode(self) -> Mode:
        return self._state.mode

    @property
    def run_state(self) -> RunState:
        return self._state.run

    @property
    def is_running(self) -> bool:
        return self._state.run == RunState.RUNNING

    @property
    def remaining_seconds(self) -> int:
        return self._state.remaining_seconds

    @property
    def total_seconds(self) -> int:
        return timer.total_seconds(self._state, self._settings)

    @property
    def display_time(self) -> str:
        return timer.format_time(self._state.remaining_seconds)

    @property
    def mode_label(self) -> str:
        return timer.mode_label(self._state.mode)

    @property
    def mode_icon(self) -> str:
        return timer.mode_icon(self._state.mode)

    @property
    def start_stop_label(self) -> str:
        return timer.start_stop_label(self._state.run)

    def start(self) -> None:
        state, changed = timer.start(self._state)
        if not changed:
            return
        self._handle = self._scheduler.schedule(self._on_tick)
        logger.info("Timer started: %s, %s left", self.mode_label, self.display_time)
        self._publish(state)

    def stop(self) -> None:
        state, changed = timer.stop(self._state)
        if not changed:
            return
        self._cancel_handle()
        logger.info("Timer stopped: %s, %s left", self.mode_label, self.display_time)
        self._publish(state)

    def toggle(self) -> None:
        if self.is_running:
            self.stop()
        else:
            self.start()

    def skip(self) -> None:
        self._cancel_handle()
        state = timer.transition_to_next_mode(self._state, self._settings)
        logger.info("Skipped to %s", timer.mode_label(state.mode))
        self._publish(state)

    def reset(self) -> None:
        self._cancel_handle()
        state = timer.reset_to_current_mode(self._state, self._settings)
        logger.info("Reset %s to %s", timer.mode_label(state.mode), timer.format_time(state.remaining_seconds))
        self._publish(state)

    def update_settings(self, settings: Settings) -> None:
        """Persist and apply new durations.

        A stopped timer shows the new duration of its current mode at once.
        A running countdown keeps going and picks the new durations up at the
        next mode transition or reset. A failed save is reported through
        `storage_failed` and does not undo the change.
        """
        try:
            self._store.save(settings)
        except StorageError as exc:
            logger.warning("Could not save settings: %s", exc)
            self.storage_failed.emit(str(exc))

        changed = settings != self._settings
        self._settings = settings
        logger.info("Settings updated: work=%d min, rest=%d min", settings.work_minutes, settings.rest_minutes)
        if changed:
            self.settings_changed.emit(settings)

        if self._state.run == RunState.STOPPED:
            remaining = timer.duration_seconds(self._state.mode, settings)
            self._publish(replace(self._state, remaining_seconds=remaining))

    def dispose(self) -> None:
        if self._handle is not None:
            logger.debug("Disposing controller with live handle %d", self._handle)
        self._cancel_handle()

    def _on_tick(self) -> bool:
        if self._state.run != RunState.RUNNING:
            return False

        state = timer.tick(self._state)
        logger.debug("Tick: %s", timer.format_time(state.remaining_seconds))
        if state.remaining_seconds == 0:
            self._cancel_handle()
            state = timer.transition_to_next_mode(state, self._settings)
            logger.info("%s session finished, switching to %s", self.mode_label, timer.mode_label(state.mode))
            self._publish(state)
            return False

        self._publish(state)
        return True

    def _cancel_handle(self) -> None:
        if self._handle is None:
            return
        self._scheduler.cancel(self._handle)
        self._handle = None

    def _load_settings(self) -> Settings:
        try:
            return self._store.load()
        except StorageError as exc:
            logger.warning("Could not load settings, using defaults: %s", exc)
            return Settings.default()

    def _publish(self, state: TimerState) -> None:
        previous = self._state
        self._state = state
        if previous == state:
            return

        if previous.mode != state.mode:
            self.mode_changed.emit(state.mode)
            self.mode_label_changed.emit(self.mode_label)
            self.mode_icon_changed.emit(self.mode_icon)
        if previous.run != state.run:
            self.run_state_changed.emit(state.run)
            self.start_stop_label_changed.emit(self.start_stop_label)
        if previous.remaining_seconds != state.remaining_seconds:
            self.remaining_seconds_changed.emit(state.remaining_seconds)
            self.display_time_changed.emit(self.display_time)
        self.state_changed.emit()
