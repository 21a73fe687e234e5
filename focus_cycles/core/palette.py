from __future__ import annotations

"""Background palettes for focus and break phases."""

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from focus_cycles.core.timer import SessionSnapshot


END_OPACITY = 0.8


@dataclass(frozen=True)
class Rgba:
    red: int
    green: int
    blue: int
    alpha: float = 1.0

    @property
    def hex_name(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def with_alpha(self, alpha: float) -> Rgba:
        return replace(self, alpha=max(0.0, min(1.0, alpha)))


def parse_hex(text: str) -> Rgba:
    """Parse `RGB`, `RRGGBB` or `AARRGGBB` hex notation, with or without `#`."""
    digits = text.strip().lstrip("#")
    try:
        value = int(digits, 16)
    except ValueError:
        raise ValueError(f"Invalid hex colour: {text!r}") from None

    if len(digits) == 3:
        return Rgba((value >> 8) * 17, (value >> 4 & 0xF) * 17, (value & 0xF) * 17)
    if len(digits) == 6:
        return Rgba(value >> 16, value >> 8 & 0xFF, value & 0xFF)
    if len(digits) == 8:
        return Rgba(value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF, (value >> 24) / 255)
    raise ValueError(f"Invalid hex colour: {text!r}")


def _pairs(*hex_codes: str) -> tuple[tuple[Rgba, Rgba], ...]:
    colors = [parse_hex(code) for code in hex_codes]
    return tuple((color, color.with_alpha(END_OPACITY)) for color in colors)


FOCUS_COLORS = _pairs("cdb4db", "a8dadc", "1d3557", "457b9d")
BREAK_COLORS = _pairs("e63946", "bde0fe", "a2d2ff", "ffc8dd")
PALETTE_SIZE = len(FOCUS_COLORS)


def gradient_for(snapshot: SessionSnapshot) -> tuple[Rgba, Rgba]:
    """Top and bottom gradient stops; the bottom fades out as the phase runs down."""
    palette = FOCUS_COLORS if snapshot.is_work else BREAK_COLORS
    top, bottom = palette[snapshot.color_index % PALETTE_SIZE]
    progress = snapshot.progress if snapshot.running else 1.0
    return top, bottom.with_alpha(bottom.alpha * progress)
