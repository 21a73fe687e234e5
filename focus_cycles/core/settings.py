from __future__ import annotations

from dataclasses import dataclass

from focus_cycles.core.phase import Phase


DEFAULT_WORK_MINUTES = 25
DEFAULT_BREAK_MINUTES = 5
DEFAULT_CYCLE_COUNT = 4

# Ranges offered by the settings form. The controller itself only rejects non-positive values.
WORK_MINUTES_RANGE = (1, 60)
BREAK_MINUTES_RANGE = (1, 30)
CYCLE_COUNT_RANGE = (1, 10)


class InvalidConfiguration(ValueError):
    """Raised when a timer configuration holds a non-positive or non-integer value."""


@dataclass(frozen=True)
class TimerSettings:
    work_minutes: int = DEFAULT_WORK_MINUTES
    break_minutes: int = DEFAULT_BREAK_MINUTES
    cycle_count: int = DEFAULT_CYCLE_COUNT

    def __post_init__(self) -> None:
        for name in ("work_minutes", "break_minutes", "cycle_count"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
            if value < 1:
                raise InvalidConfiguration(f"{name} must be positive, got {value}")

    def phase_seconds(self, phase: Phase) -> int:
        minutes = self.work_minutes if phase == Phase.WORK else self.break_minutes
        return minutes * 60
