from __future__ import annotations

from enum import Enum


class Phase(str, Enum):
    WORK = "work"
    BREAK = "break"

    @property
    def label(self) -> str:
        return "FOCUS" if self is Phase.WORK else "BREAK"

    def toggled(self) -> Phase:
        return Phase.BREAK if self is Phase.WORK else Phase.WORK
