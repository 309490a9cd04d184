from __future__ import annotations

"""Pomodoro application entry point.

Configures logging, opens the settings database, wires the scheduler and
controller together and starts the main window.
"""

import logging
import os
import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pomodoro.core.controller import TimerController
from pomodoro.core.errors import StorageError
from pomodoro.core.scheduler import QtScheduler
from pomodoro.data.storage import SqliteSettingsStore
from pomodoro.ui.main_window import MainWindow
from pomodoro.ui.styles import apply_theme


DB_PATH_ENV = "POMODORO_DB_PATH"
LOG_LEVEL_ENV = "POMODORO_LOG_LEVEL"


def default_db_path() -> Path:
    """SQLite file from POMODORO_DB_PATH, or `pomodoro.db` in the working directory."""
    configured = os.environ.get(DB_PATH_ENV)
    if configured:
        return Path(configured).expanduser()
    return Path.cwd() / "pomodoro.db"


def configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main() -> int:
    configure_logging()
    logger = logging.getLogger(__name__)

    app = QApplication(sys.argv)
    apply_theme(app)

    store = SqliteSettingsStore(default_db_path())
    try:
        store.init_db()
    except StorageError as exc:
        logger.warning("Could not initialise settings database at %s: %s", store.db_path, exc)

    scheduler = QtScheduler(parent=app)
    controller = TimerController(scheduler, store, parent=app)
    app.aboutToQuit.connect(controller.dispose)

    window = MainWindow(controller)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
