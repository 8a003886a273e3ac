"""Pygame timer implementation of the simulation ticker."""

from typing import Optional

import pygame

from forest_fire.ticker import TickCallback

STEP_EVENT = pygame.USEREVENT + 1


class PygameTicker:
    """Ticker backed by ``pygame.time.set_timer``.

    The timer posts ``event_type`` into the event queue; the main loop
    passes every event to :meth:`handle_event`, which runs the callback.
    Events still queued after :meth:`stop` are ignored.
    """

    def __init__(self, event_type: int = STEP_EVENT) -> None:
        self.event_type = event_type
        self.callback: Optional[TickCallback] = None

    @property
    def active(self) -> bool:
        return self.callback is not None

    def start(self, callback: TickCallback, interval_millis: int) -> None:
        self.callback = callback
        pygame.time.set_timer(self.event_type, interval_millis)

    def stop(self) -> None:
        self.callback = None
        pygame.time.set_timer(self.event_type, 0)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Run the callback for a timer event; returns True if the event was ours."""
        if event.type != self.event_type:
            return False
        if self.callback is not None:
            self.callback()
        return True
