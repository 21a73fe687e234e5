from __future__ import annotations

"""Entry point for the Focus Cycles timer.

Parses command-line options, configures logging, and starts the Qt
event loop with the main window.
"""

import argparse
import logging
import sys

from PyQt6.QtWidgets import QApplication

from focus_cycles.core.settings import (
    DEFAULT_BREAK_MINUTES,
    DEFAULT_CYCLE_COUNT,
    DEFAULT_WORK_MINUTES,
    InvalidConfiguration,
    TimerSettings,
)
from focus_cycles.ui.main_window import MainWindow
from focus_cycles.ui.styles import apply_theme


LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="focus-cycles", description="Work/break cycle timer.")
    parser.add_argument("--work", type=int, default=DEFAULT_WORK_MINUTES, help="work phase length in minutes")
    parser.add_argument("--break", dest="break_", type=int, default=DEFAULT_BREAK_MINUTES, help="break phase length in minutes")
    parser.add_argument("--cycles", type=int, default=DEFAULT_CYCLE_COUNT, help="number of work/break cycles")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity",
    )
    return parser


def parse_settings(args: argparse.Namespace, parser: argparse.ArgumentParser) -> TimerSettings:
    """Builds the initial timer settings, exiting through argparse when they are invalid."""
    try:
        return TimerSettings(work_minutes=args.work, break_minutes=args.break_, cycle_count=args.cycles)
    except InvalidConfiguration as exc:
        parser.error(str(exc))


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args, qt_args = parser.parse_known_args(argv)
    settings = parse_settings(args, parser)
    configure_logging(args.log_level)

    app = QApplication([sys.argv[0], *qt_args])
    apply_theme(app)

    window = MainWindow(settings=settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
