from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from pomodoro.core.errors import ValidationError


DEFAULT_WORK_MINUTES = 25
DEFAULT_REST_MINUTES = 5


def is_valid_minutes(value: Any) -> bool:
    """Duration rule shared by settings and the editor: an int >= 1."""
    return isinstance(value, int) and not isinstance(value, bool) and value >= 1


@dataclass(frozen=True)
class Settings:
    work_minutes: int
    rest_minutes: int

    def __post_init__(self) -> None:
        for name in ("work_minutes", "rest_minutes"):
            value = getattr(self, name)
            if not is_valid_minutes(value):
                raise ValidationError(f"{name} must be a positive integer, got {value!r}")

    @classmethod
    def make(cls, work_minutes: int, rest_minutes: int) -> Settings:
        return cls(work_minutes=work_minutes, rest_minutes=rest_minutes)

    @classmethod
    def default(cls) -> Settings:
        return cls(work_minutes=DEFAULT_WORK_MINUTES, rest_minutes=DEFAULT_REST_MINUTES)

    def with_updates(self, **updates: Any) -> Settings:
        """Return settings with `updates` merged in.

        The merged record is validated as a whole. Calling with no updates
        re-validates and returns this same instance.
        """
        known = {f.name for f in fields(self)}
        unknown = sorted(set(updates) - known)
        if unknown:
            raise ValidationError(f"Unknown settings fields: {', '.join(unknown)}")
        if not updates:
            Settings.make(self.work_minutes, self.rest_minutes)
            return self
        return Settings.make(
            updates.get("work_minutes", self.work_minutes),
            updates.get("rest_minutes", self.rest_minutes),
        )

    def to_dict(self) -> dict[str, int]:
        return {"work_minutes": self.work_minutes, "rest_minutes": self.rest_minutes}

    @classmethod
    def from_dict(cls, data: Any) -> Settings:
        if not isinstance(data, dict):
            raise ValidationError(f"Settings must be a mapping, got {type(data).__name__}")
        try:
            return cls.make(data["work_minutes"], data["rest_minutes"])
        except KeyError as exc:
            raise ValidationError(f"Missing settings field: {exc.args[0]}") from exc
