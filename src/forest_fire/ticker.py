"""Scheduling capability that drives the controller while playing."""

from typing import Callable, Optional, Protocol

TickCallback = Callable[[], None]


class Ticker(Protocol):
    """Periodic timer with explicit start and stop.

    ``stop`` must be idempotent and must cancel any pending callback.
    """

    @property
    def active(self) -> bool: ...

    def start(self, callback: TickCallback, interval_millis: int) -> None: ...

    def stop(self) -> None: ...


class ManualTicker:
    """Ticker that only fires when told to.

    Useful for tests and headless runs: call :meth:`fire` to stand in for
    the timer elapsing.
    """

    def __init__(self) -> None:
        self.callback: Optional[TickCallback] = None
        self.interval_millis: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.callback is not None

    def start(self, callback: TickCallback, interval_millis: int) -> None:
        self.callback = callback
        self.interval_millis = interval_millis

    def stop(self) -> None:
        self.callback = None

    def fire(self, times: int = 1) -> int:
        """Invoke the callback up to ``times`` times; returns how many ran."""
        fired = 0
        for _ in range(times):
            if self.callback is None:
                break
            self.callback()
            fired += 1
        return fired
