from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from focus_cycles.core.palette import PALETTE_SIZE
from focus_cycles.core.phase import Phase
from focus_cycles.core.settings import TimerSettings

if TYPE_CHECKING:
    from focus_cycles.core.ticker import Ticker, TickSubscription


logger = logging.getLogger(__name__)

Listener = Callable[["SessionSnapshot"], None]


@dataclass(frozen=True)
class SessionSnapshot:
    phase: Phase
    remaining_seconds: int
    running: bool
    cycle_index: int
    color_index: int
    settings: TimerSettings

    @property
    def is_work(self) -> bool:
        return self.phase == Phase.WORK

    @property
    def phase_seconds(self) -> int:
        return self.settings.phase_seconds(self.phase)

    @property
    def progress(self) -> float:
        """Fraction of the current phase still left, 1.0 at phase start."""
        return self.remaining_seconds / self.phase_seconds

    @property
    def remaining_text(self) -> str:
        return f"{self.remaining_seconds // 60:02d}:{self.remaining_seconds % 60:02d}"

    @property
    def phase_label(self) -> str:
        return self.phase.label

    @property
    def cycle_label(self) -> str:
        return f"{self.cycle_index}/{self.settings.cycle_count}"


class SessionController:
    """Work/break cycle state machine advanced by an external tick source.

    The controller keeps no clock of its own. While running it holds one
    subscription on its ticker, and every tick is one elapsed second.
    Each mutating call publishes a fresh `SessionSnapshot` to listeners.
    """

    def __init__(
        self,
        settings: TimerSettings | None = None,
        ticker: Ticker | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._settings = settings if settings is not None else TimerSettings()
        self._ticker = ticker
        self._rng = rng if rng is not None else random.Random()
        self._subscription: TickSubscription | None = None
        self._listeners: list[Listener] = []
        self._phase = Phase.WORK
        self._remaining_seconds = self._settings.phase_seconds(Phase.WORK)
        self._running = False
        self._cycle_index = 1
        self._color_index = self._roll_color()

    @property
    def settings(self) -> TimerSettings:
        return self._settings

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def remaining_seconds(self) -> int:
        return self._remaining_seconds

    @property
    def running(self) -> bool:
        return self._running

    @property
    def cycle_index(self) -> int:
        return self._cycle_index

    @property
    def color_index(self) -> int:
        return self._color_index

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self._phase,
            remaining_seconds=self._remaining_seconds,
            running=self._running,
            cycle_index=self._cycle_index,
            color_index=self._color_index,
            settings=self._settings,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> None:
        if self._running:
            logger.debug("start() ignored, session already running")
            return
        self._running = True
        self._color_index = self._roll_color()
        if self._ticker is not None:
            self._subscription = self._ticker.subscribe(self.tick)
        logger.debug("Started %s phase, cycle %d, %ds left", self._phase.value, self._cycle_index, self._remaining_seconds)
        self._publish()

    def pause(self) -> None:
        self._stop_ticking()
        self._publish()

    def reset(self) -> None:
        self._reset_state()
        self._publish()

    def configure(self, work_minutes: int, break_minutes: int, cycle_count: int) -> None:
        settings = TimerSettings(work_minutes=work_minutes, break_minutes=break_minutes, cycle_count=cycle_count)
        self._settings = settings
        logger.debug("Configured %d/%d min x %d cycles", work_minutes, break_minutes, cycle_count)
        self.reset()

    def tick(self) -> None:
        if self._remaining_seconds > 0:
            self._remaining_seconds -= 1
        if self._remaining_seconds == 0:
            self._switch_mode()
        self._publish()

    def _switch_mode(self) -> None:
        # Phase must flip before the new duration is read.
        self._phase = self._phase.toggled()
        self._color_index = self._roll_color()
        if self._phase == Phase.WORK:
            self._cycle_index += 1
            if self._cycle_index > self._settings.cycle_count:
                logger.info("Session complete after %d cycles", self._settings.cycle_count)
                self._reset_state()
                return
        self._remaining_seconds = self._settings.phase_seconds(self._phase)
        logger.debug("Switched to %s phase, cycle %d", self._phase.value, self._cycle_index)

    def _reset_state(self) -> None:
        self._stop_ticking()
        self._phase = Phase.WORK
        self._cycle_index = 1
        self._remaining_seconds = self._settings.phase_seconds(Phase.WORK)

    def _stop_ticking(self) -> None:
        self._running = False
        if self._subscription is not None:
            self._subscription.cancel()
            self._subscription = None

    def _roll_color(self) -> int:
        return self._rng.randrange(PALETTE_SIZE)

    def _publish(self) -> None:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
