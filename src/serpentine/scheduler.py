"""Variable-delay tick scheduling driven by frame time."""

from __future__ import annotations


class TickScheduler:
    """One-shot timer that is re-armed after every tick.

    The render loop feeds it elapsed frame time; a due tick disarms it until
    the caller arms it again with the next delay. Time overshooting a due
    tick is carried into the next delay, so short delays can fire several
    times within one frame. A stopped scheduler never fires again.
    """

    def __init__(self) -> None:
        self.remaining_ms = 0.0
        self.armed = False
        self.stopped = False

    def arm(self, delay_ms: float) -> None:
        """Schedule the next tick ``delay_ms`` after the previous one was due."""
        if self.stopped:
            return
        self.remaining_ms = min(self.remaining_ms, 0.0) + max(0.0, float(delay_ms))
        self.armed = True

    def advance(self, elapsed_ms: float) -> bool:
        """Consume frame time and report whether the tick is due.

        Call again with ``elapsed_ms=0`` after re-arming to drain ticks that
        are still owed from the same frame.
        """
        if not self.armed or self.stopped:
            return False
        self.remaining_ms -= elapsed_ms
        if self.remaining_ms > 0:
            return False
        self.armed = False
        return True

    def stop(self) -> None:
        self.remaining_ms = 0.0
        self.armed = False
        self.stopped = True
