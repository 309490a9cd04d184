from __future__ import annotations


class PomodoroError(Exception):
    pass


class ValidationError(PomodoroError, ValueError):
    """Raised when settings values are not positive integers."""


class StorageError(PomodoroError):
    """Raised by a settings store when it cannot read or write."""
