import pytest

from focus_cycles.core.settings import TimerSettings
from focus_cycles.main import build_parser, parse_settings


def test_parser_defaults() -> None:
    parser = build_parser()
    args, extra = parser.parse_known_args([])

    assert parse_settings(args, parser) == TimerSettings()
    assert args.log_level == "WARNING"
    assert extra == []


def test_parser_custom_settings_and_qt_passthrough() -> None:
    parser = build_parser()
    args, extra = parser.parse_known_args(["--work", "50", "--break", "10", "--cycles", "2", "-reverse"])

    assert parse_settings(args, parser) == TimerSettings(50, 10, 2)
    assert extra == ["-reverse"]


def test_invalid_settings_exit_through_parser() -> None:
    parser = build_parser()
    args, _ = parser.parse_known_args(["--work", "0"])

    with pytest.raises(SystemExit):
        parse_settings(args, parser)
