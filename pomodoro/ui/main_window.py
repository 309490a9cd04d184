from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QIcon, QKeySequence
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from pomodoro.core.controller import TimerController
from pomodoro.core.timer import Mode
from pomodoro.ui.settings_dialog import SettingsDialog
from pomodoro.ui.styles import repolish


class MainWindow(QMainWindow):
    def __init__(self, controller: TimerController) -> None:
        super().__init__()
        self.setWindowTitle("Pomodoro")
        self.resize(360, 260)

        self.controller = controller

        self._build_ui()
        self._connect_signals()
        self._render_all()

    def _build_ui(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self.mode_label = QLabel()
        self.mode_label.setObjectName("ModeLabel")
        self.mode_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.time_label = QLabel()
        self.time_label.setObjectName("TimerLabel")
        self.time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.mode_label)
        layout.addWidget(self.time_label, 1)

        controls = QHBoxLayout()
        self.start_stop_btn = QPushButton()
        self.start_stop_btn.setObjectName("PrimaryButton")
        self.skip_btn = QPushButton("Skip")
        self.reset_btn = QPushButton("Reset")
        self.settings_btn = QPushButton("Settings")
        controls.addWidget(self.start_stop_btn)
        controls.addWidget(self.skip_btn)
        controls.addWidget(self.reset_btn)
        controls.addStretch()
        controls.addWidget(self.settings_btn)
        layout.addLayout(controls)

        space_action = QAction(self)
        space_action.setShortcut(QKeySequence(Qt.Key.Key_Space))
        space_action.triggered.connect(self.controller.toggle)
        self.addAction(space_action)

    def _connect_signals(self) -> None:
        self.start_stop_btn.clicked.connect(self.controller.toggle)
        self.skip_btn.clicked.connect(self.controller.skip)
        self.reset_btn.clicked.connect(self.controller.reset)
        self.settings_btn.clicked.connect(self.open_settings)

        self.controller.display_time_changed.connect(self.time_label.setText)
        self.controller.start_stop_label_changed.connect(self.start_stop_btn.setText)
        self.controller.mode_changed.connect(self._render_mode)
        self.controller.storage_failed.connect(self._on_storage_failed)

    def _render_all(self) -> None:
        self.time_label.setText(self.controller.display_time)
        self.start_stop_btn.setText(self.controller.start_stop_label)
        self._render_mode(self.controller.mode)

    def _render_mode(self, mode: Mode) -> None:
        self.mode_label.setText(self.controller.mode_label)
        self.mode_label.setProperty("mode", mode.value)
        repolish(self.mode_label)
        self.setWindowIcon(QIcon.fromTheme(self.controller.mode_icon))
        self.setWindowTitle(f"Pomodoro · {self.controller.mode_label}")

    def open_settings(self) -> None:
        dialog = SettingsDialog(self.controller.settings, self)
        if dialog.exec() and dialog.saved_settings is not None:
            self.controller.update_settings(dialog.saved_settings)

    def _on_storage_failed(self, message: str) -> None:
        QMessageBox.warning(
            self,
            "Settings not saved",
            f"New durations are active but could not be stored:\n{message}",
        )

    def closeEvent(self, event) -> None:  # noqa: N802
        self.controller.dispose()
        event.accept()
