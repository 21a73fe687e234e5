from __future__ import annotations

"""Periodic tick sources for the session controller."""

import logging
from typing import Callable, Protocol

from PyQt6.QtCore import QObject, QTimer


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 1000


class TickSubscription(Protocol):
    @property
    def active(self) -> bool: ...

    def cancel(self) -> None: ...


class Ticker(Protocol):
    def subscribe(self, callback: Callable[[], None]) -> TickSubscription: ...


class QtTickSubscription:
    """Handle for one running `QTimer`; cancelling stops it for good."""

    def __init__(self, timer: QTimer, callback: Callable[[], None]) -> None:
        self._timer: QTimer | None = timer
        self._callback = callback

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        if self._timer is None:
            return
        timer = self._timer
        self._timer = None
        timer.stop()
        timer.timeout.disconnect(self._callback)
        timer.deleteLater()
        logger.debug("Tick subscription cancelled")


class QtTicker(QObject):
    """Once-per-interval tick source driven by the Qt event loop."""

    def __init__(self, interval_ms: int = TICK_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        if interval_ms <= 0:
            raise ValueError("Tick interval must be positive")
        self._interval_ms = interval_ms

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def subscribe(self, callback: Callable[[], None]) -> QtTickSubscription:
        timer = QTimer(self)
        timer.setInterval(self._interval_ms)
        timer.timeout.connect(callback)
        timer.start()
        logger.debug("Tick subscription started (%d ms)", self._interval_ms)
        return QtTickSubscription(timer, callback)
