from __future__ import annotations

from PyQt6.QtWidgets import (
    QDialog,
    QDialogButtonBox,
    QFormLayout,
    QMessageBox,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from pomodoro.core.errors import ValidationError
from pomodoro.core.settings import Settings
from pomodoro.core.settings_editor import SettingsEditor
from pomodoro.ui.styles import repolish


MAX_WORK_MINUTES = 120
MAX_REST_MINUTES = 60


class SettingsDialog(QDialog):
    def __init__(self, settings: Settings, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.editor = SettingsEditor(self)
        self.saved_settings: Settings | None = None

        self._build_ui()
        self._connect_signals()
        self.editor.load(settings)

    def _build_ui(self) -> None:
        self.work_spin = QSpinBox()
        self.work_spin.setRange(1, MAX_WORK_MINUTES)
        self.work_spin.setSuffix(" min")
        self.rest_spin = QSpinBox()
        self.rest_spin.setRange(1, MAX_REST_MINUTES)
        self.rest_spin.setSuffix(" min")

        form = QFormLayout()
        form.addRow("Work duration:", self.work_spin)
        form.addRow("Rest duration:", self.rest_spin)

        self.buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Save | QDialogButtonBox.StandardButton.Cancel
        )

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(self.buttons)

    def _connect_signals(self) -> None:
        self.editor.work_minutes_changed.connect(lambda v: self._sync_spin(self.work_spin, v))
        self.editor.rest_minutes_changed.connect(lambda v: self._sync_spin(self.rest_spin, v))
        self.editor.has_changes_changed.connect(self._on_has_changes)
        self.work_spin.valueChanged.connect(self._on_work_edited)
        self.rest_spin.valueChanged.connect(self._on_rest_edited)
        self.buttons.accepted.connect(self._save)
        self.buttons.rejected.connect(self._cancel)

    def _sync_spin(self, spin: QSpinBox, value: int) -> None:
        if spin.value() != value:
            spin.setValue(value)

    def _on_work_edited(self, value: int) -> None:
        self._mark_valid(self.work_spin, self.editor.validate_work_minutes(value))
        self.editor.set_work_minutes(value)

    def _on_rest_edited(self, value: int) -> None:
        self._mark_valid(self.rest_spin, self.editor.validate_rest_minutes(value))
        self.editor.set_rest_minutes(value)

    def _mark_valid(self, spin: QSpinBox, valid: bool) -> None:
        spin.setProperty("invalid", not valid)
        repolish(spin)

    def _on_has_changes(self, has_changes: bool) -> None:
        self.buttons.button(QDialogButtonBox.StandardButton.Save).setEnabled(has_changes)

    def _save(self) -> None:
        try:
            self.saved_settings = self.editor.save()
        except ValidationError as exc:
            QMessageBox.warning(self, "Invalid settings", str(exc))
            return
        self.accept()

    def _cancel(self) -> None:
        self.editor.cancel()
        self.reject()
