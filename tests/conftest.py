from __future__ import annotations

from typing import Callable

import pytest
from PyQt6.QtCore import QCoreApplication


class FakeSubscription:
    def __init__(self, callback: Callable[[], None]) -> None:
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        self.active = False


class FakeTicker:
    """Tick source that only fires when the test says so."""

    def __init__(self) -> None:
        self.subscriptions: list[FakeSubscription] = []

    @property
    def active_count(self) -> int:
        return sum(1 for sub in self.subscriptions if sub.active)

    def subscribe(self, callback: Callable[[], None]) -> FakeSubscription:
        subscription = FakeSubscription(callback)
        self.subscriptions.append(subscription)
        return subscription

    def fire(self, times: int = 1) -> None:
        for _ in range(times):
            for subscription in list(self.subscriptions):
                if subscription.active:
                    subscription.callback()


@pytest.fixture
def ticker() -> FakeTicker:
    return FakeTicker()


@pytest.fixture(scope="session")
def qt_core_app() -> QCoreApplication:
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app
