from __future__ import annotations

from typing import Any

from PyQt6.QtCore import QObject, pyqtSignal

from pomodoro.core.settings import Settings, is_valid_minutes


class SettingsEditor(QObject):
    """Draft copy of Settings for the settings dialog, with dirty tracking."""

    work_minutes_changed = pyqtSignal(int)
    rest_minutes_changed = pyqtSignal(int)
    has_changes_changed = pyqtSignal(bool)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._work_minutes = 0
        self._rest_minutes = 0
        self._baseline: Settings | None = None

    @property
    def work_minutes(self) -> int:
        return self._work_minutes

    @property
    def rest_minutes(self) -> int:
        return self._rest_minutes

    @property
    def baseline(self) -> Settings | None:
        return self._baseline

    @property
    def has_changes(self) -> bool:
        if self._baseline is None:
            return False
        return (
            self._work_minutes != self._baseline.work_minutes
            or self._rest_minutes != self._baseline.rest_minutes
        )

    def load(self, settings: Settings) -> None:
        self._baseline = settings
        self._set_draft(settings.work_minutes, settings.rest_minutes)
        self.has_changes_changed.emit(self.has_changes)

    def set_work_minutes(self, value: int) -> None:
        if value == self._work_minutes:
            return
        self._work_minutes = value
        self.work_minutes_changed.emit(value)
        self.has_changes_changed.emit(self.has_changes)

    def set_rest_minutes(self, value: int) -> None:
        if value == self._rest_minutes:
            return
        self._rest_minutes = value
        self.rest_minutes_changed.emit(value)
        self.has_changes_changed.emit(self.has_changes)

    def save(self) -> Settings:
        """Validate the draft and make it the new baseline.

        Raises ValidationError and leaves the draft and baseline as they
        were when a value is out of range.
        """
        settings = Settings.make(self._work_minutes, self._rest_minutes)
        self._baseline = settings
        self.has_changes_changed.emit(self.has_changes)
        return settings

    def cancel(self) -> None:
        if self._baseline is None:
            return
        self._set_draft(self._baseline.work_minutes, self._baseline.rest_minutes)
        self.has_changes_changed.emit(self.has_changes)

    def validate_work_minutes(self, value: Any) -> bool:
        return is_valid_minutes(value)

    def validate_rest_minutes(self, value: Any) -> bool:
        return is_valid_minutes(value)

    def _set_draft(self, work_minutes: int, rest_minutes: int) -> None:
        self._work_minutes = work_minutes
        self._rest_minutes = rest_minutes
        self.work_minutes_changed.emit(work_minutes)
        self.rest_minutes_changed.emit(rest_minutes)
