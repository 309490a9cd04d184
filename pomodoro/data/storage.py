from __future__ import annotations

"""SQLite-backed settings store: a key/value `settings` table with JSON values."""

import json
import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Protocol

from pomodoro.core.errors import StorageError, ValidationError
from pomodoro.core.settings import Settings


logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
TIMER_SETTINGS_KEY = "timer_settings"


class SettingsStore(Protocol):
    def load(self) -> Settings:
        ...

    def save(self, settings: Settings) -> None:
        ...


class SqliteSettingsStore:
    """Wraps the SQLite connection; every failure surfaces as StorageError."""
    def __init__(self, db_path: str | Path) -> None:
        self.db_path = Path(db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            conn.execute("PRAGMA journal_mode = WAL;")
        except sqlite3.DatabaseError:
            pass
        return conn

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = self._connect()
        except sqlite3.Error as exc:
            raise StorageError(f"Cannot open {self.db_path}: {exc}") from exc
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"Database error in {self.db_path}: {exc}") from exc
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def init_db(self) -> None:
        """Creates the tables on first run."""
        with self._transaction() as conn:
            conn.execute("CREATE TABLE IF NOT EXISTS schema_version (version INTEGER NOT NULL)")
            row = conn.execute("SELECT version FROM schema_version LIMIT 1").fetchone()
            if not row:
                conn.execute("INSERT INTO schema_version(version) VALUES (?)", (SCHEMA_VERSION,))
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS settings(
                    key TEXT PRIMARY KEY,
                    value TEXT
                )
                """
            )

    def get_setting(self, key: str, default: Any = None) -> Any:
        with self._transaction() as conn:
            row = conn.execute("SELECT value FROM settings WHERE key = ?", (key,)).fetchone()
        if not row:
            return default
        raw = row["value"]
        try:
            return json.loads(raw)
        except (TypeError, json.JSONDecodeError):
            return raw

    def set_setting(self, key: str, value: Any) -> None:
        payload = json.dumps(value)
        with self._transaction() as conn:
            conn.execute(
                "INSERT INTO settings(key, value) VALUES(?, ?) ON CONFLICT(key) DO UPDATE SET value=excluded.value",
                (key, payload),
            )

    def load(self) -> Settings:
        """Returns stored timer settings, or the defaults if none were saved yet."""
        raw = self.get_setting(TIMER_SETTINGS_KEY)
        if raw is None:
            return Settings.default()
        try:
            return Settings.from_dict(raw)
        except ValidationError as exc:
            raise StorageError(f"Stored settings are invalid: {exc}") from exc

    def save(self, settings: Settings) -> None:
        self.set_setting(TIMER_SETTINGS_KEY, settings.to_dict())
        logger.debug("Saved settings to %s", self.db_path)
