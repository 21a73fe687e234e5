import pytest

from focus_cycles.core.phase import Phase
from focus_cycles.core.settings import (
    BREAK_MINUTES_RANGE,
    CYCLE_COUNT_RANGE,
    WORK_MINUTES_RANGE,
    InvalidConfiguration,
    TimerSettings,
)


def test_default_settings() -> None:
    settings = TimerSettings()
    assert (settings.work_minutes, settings.break_minutes, settings.cycle_count) == (25, 5, 4)


def test_phase_seconds_uses_phase_duration() -> None:
    settings = TimerSettings(work_minutes=50, break_minutes=10, cycle_count=2)
    assert settings.phase_seconds(Phase.WORK) == 3000
    assert settings.phase_seconds(Phase.BREAK) == 600


def test_invalid_configuration_is_value_error_naming_field() -> None:
    with pytest.raises(ValueError, match="break_minutes"):
        TimerSettings(work_minutes=25, break_minutes=-3, cycle_count=4)

    with pytest.raises(InvalidConfiguration, match="cycle_count"):
        TimerSettings(cycle_count=None)


def test_settings_are_immutable() -> None:
    settings = TimerSettings()
    with pytest.raises(AttributeError):
        settings.work_minutes = 10  # type: ignore[misc]


def test_ui_ranges_start_at_one() -> None:
    assert WORK_MINUTES_RANGE == (1, 60)
    assert BREAK_MINUTES_RANGE == (1, 30)
    assert CYCLE_COUNT_RANGE == (1, 10)


def test_phase_toggle_and_labels() -> None:
    assert Phase.WORK.toggled() is Phase.BREAK
    assert Phase.BREAK.toggled() is Phase.WORK
    assert Phase.WORK.label == "FOCUS"
    assert Phase.BREAK.label == "BREAK"
