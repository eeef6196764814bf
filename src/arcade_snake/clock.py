"""Timers driving the two loops: fixed-interval ticks and per-frame deltas."""

from __future__ import annotations

import pygame


class TickTimer:
    """A repeating timer the simulation restarts whenever its speed changes."""

    def __init__(self) -> None:
        self.interval_ms: int | None = None

    @property
    def active(self) -> bool:
        return self.interval_ms is not None

    def start(self, interval_ms: int) -> None:
        """Cancel any running schedule and start a new one at ``interval_ms``."""
        self.interval_ms = int(interval_ms)

    def stop(self) -> None:
        self.interval_ms = None


class PygameTickTimer(TickTimer):
    """Post ``event_type`` to the pygame queue every interval.

    pygame keeps a single timer per event type, so calling ``set_timer`` again
    swaps the schedule in place rather than stacking a second one.
    """

    def __init__(self, event_type: int) -> None:
        super().__init__()
        self.event_type = event_type

    def start(self, interval_ms: int) -> None:
        super().start(interval_ms)
        pygame.time.set_timer(self.event_type, self.interval_ms)

    def stop(self) -> None:
        super().stop()
        pygame.time.set_timer(self.event_type, 0)


class FrameClock:
    """Turn absolute frame timestamps into deltas; the first delta is zero."""

    def __init__(self) -> None:
        self.last_timestamp: float | None = None

    def delta(self, timestamp_ms: float) -> float:
        if self.last_timestamp is None:
            self.last_timestamp = timestamp_ms
            return 0.0
        delta = max(0.0, timestamp_ms - self.last_timestamp)
        self.last_timestamp = timestamp_ms
        return delta
