import pytest

from pomodoro.core.errors import ValidationError
from pomodoro.core.settings import Settings, is_valid_minutes


def test_make_accepts_positive_integers() -> None:
    settings = Settings.make(25, 5)

    assert settings.work_minutes == 25
    assert settings.rest_minutes == 5


@pytest.mark.parametrize("work, rest", [(0, 5), (25, 0), (-5, 5), (25, -1), (25.5, 5), (True, 5), ("25", 5)])
def test_make_rejects_invalid_values(work, rest) -> None:
    with pytest.raises(ValidationError):
        Settings.make(work, rest)


def test_validation_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Settings.make(0, 5)


def test_default_is_25_and_5() -> None:
    assert Settings.default() == Settings.make(25, 5)


def test_with_updates_merges_and_keeps_other_field() -> None:
    settings = Settings.make(25, 5)

    updated = settings.with_updates(work_minutes=50)

    assert updated == Settings.make(50, 5)
    assert settings == Settings.make(25, 5)


def test_with_updates_without_fields_returns_same_instance() -> None:
    settings = Settings.make(25, 5)

    assert settings.with_updates() is settings


def test_with_updates_revalidates_merged_record() -> None:
    settings = Settings.make(25, 5)

    with pytest.raises(ValidationError):
        settings.with_updates(rest_minutes=0)
    with pytest.raises(ValidationError):
        settings.with_updates(long_break_minutes=15)


def test_settings_are_immutable() -> None:
    settings = Settings.make(25, 5)

    with pytest.raises(AttributeError):
        settings.work_minutes = 10  # type: ignore[misc]


def test_dict_mapping() -> None:
    settings = Settings.from_dict({"work_minutes": 40, "rest_minutes": 10})

    assert settings.to_dict() == {"work_minutes": 40, "rest_minutes": 10}
    with pytest.raises(ValidationError):
        Settings.from_dict({"work_minutes": 40})
    with pytest.raises(ValidationError):
        Settings.from_dict([40, 10])


def test_is_valid_minutes() -> None:
    assert is_valid_minutes(1)
    assert not is_valid_minutes(0)
    assert not is_valid_minutes(2.0)
    assert not is_valid_minutes(None)
