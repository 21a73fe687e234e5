import pytest

from focus_cycles.core.palette import (
    BREAK_COLORS,
    END_OPACITY,
    FOCUS_COLORS,
    PALETTE_SIZE,
    Rgba,
    gradient_for,
    parse_hex,
)
from focus_cycles.core.settings import TimerSettings
from focus_cycles.core.timer import SessionController


def test_parse_hex_formats() -> None:
    assert parse_hex("#1d3557") == Rgba(0x1D, 0x35, 0x57)
    assert parse_hex("fff") == Rgba(255, 255, 255)
    argb = parse_hex("80e63946")
    assert (argb.red, argb.green, argb.blue) == (0xE6, 0x39, 0x46)
    assert argb.alpha == pytest.approx(128 / 255)


@pytest.mark.parametrize("text", ["", "#12", "12345", "zzzzzz", "#1234567"])
def test_parse_hex_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        parse_hex(text)


def test_palettes_pair_start_with_translucent_end() -> None:
    assert len(FOCUS_COLORS) == len(BREAK_COLORS) == PALETTE_SIZE == 4
    start, end = BREAK_COLORS[0]
    assert start.hex_name == end.hex_name == "#e63946"
    assert end.alpha == END_OPACITY


def test_gradient_idle_keeps_full_palette_opacity() -> None:
    controller = SessionController()
    top, bottom = gradient_for(controller.snapshot())

    expected_top, expected_bottom = FOCUS_COLORS[controller.color_index]
    assert top == expected_top
    assert bottom == expected_bottom


def test_gradient_fades_with_progress_while_running() -> None:
    controller = SessionController(TimerSettings(1, 1, 2))
    controller.start()
    for _ in range(60 + 15):
        controller.tick()

    snapshot = controller.snapshot()
    top, bottom = gradient_for(snapshot)

    assert top == BREAK_COLORS[snapshot.color_index][0]
    assert bottom.alpha == pytest.approx(END_OPACITY * 45 / 60)
