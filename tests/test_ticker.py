import pytest

from focus_cycles.core.ticker import QtTicker
from focus_cycles.core.timer import SessionController


def test_subscription_lifecycle(qt_core_app) -> None:
    ticker = QtTicker(interval_ms=1000)
    subscription = ticker.subscribe(lambda: None)

    assert subscription.active is True

    subscription.cancel()
    subscription.cancel()
    assert subscription.active is False


def test_rejects_non_positive_interval(qt_core_app) -> None:
    with pytest.raises(ValueError):
        QtTicker(interval_ms=0)


def test_controller_owns_single_qt_subscription(qt_core_app) -> None:
    ticker = QtTicker()
    controller = SessionController(ticker=ticker)

    controller.start()
    first = controller._subscription  # noqa: SLF001 - tests may inspect the live handle
    controller.start()
    assert controller._subscription is first  # noqa: SLF001
    assert first.active is True

    controller.pause()
    assert first.active is False
    assert controller._subscription is None  # noqa: SLF001
