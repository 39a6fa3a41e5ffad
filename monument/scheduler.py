"""
Deadline scheduling on a simulated clock.

SimClock - monotonic time advanced once per tick.
DeadlineScheduler - callbacks due at a clock time, checked on later ticks.

Nothing here blocks or uses wall-clock timers, so tests can fast-forward
time deterministically.
"""

from __future__ import annotations

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable

from monument import log


class SimClock:
    """Simulated monotonic clock (seconds)."""

    def __init__(self, start: float = 0.0):
        self._now = float(start)

    @property
    def now(self) -> float:
        return self._now

    def advance(self, dt: float) -> float:
        """Advance by dt seconds. Negative dt is ignored."""
        if dt > 0:
            self._now += dt
        return self._now


@dataclass(order=True)
class Deadline:
    """A callback due at a given clock time."""

    due: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    tag: str | None = field(default=None, compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class DeadlineScheduler:
    """
    Container for deadlines with in-order firing.

    Deadlines fire in (due, insertion) order. A tagged deadline replaces
    any pending deadline with the same tag.
    """

    def __init__(self, clock: SimClock):
        self.clock = clock
        self._heap: list[Deadline] = []
        self._tagged: dict[str, Deadline] = {}
        self._seq = itertools.count()

    def schedule(self, delay: float, callback: Callable[[], None], tag: str | None = None) -> Deadline:
        """Run callback once the clock reaches now + delay."""
        if tag is not None:
            self.cancel(tag)
        deadline = Deadline(self.clock.now + max(0.0, delay), next(self._seq), callback, tag)
        heapq.heappush(self._heap, deadline)
        if tag is not None:
            self._tagged[tag] = deadline
        return deadline

    def cancel(self, tag: str) -> bool:
        """Cancel the pending deadline with this tag. Returns True if one existed."""
        deadline = self._tagged.pop(tag, None)
        if deadline is None:
            return False
        deadline.cancel()
        return True

    def is_pending(self, tag: str) -> bool:
        return tag in self._tagged

    @property
    def pending_count(self) -> int:
        return sum(1 for d in self._heap if not d.cancelled)

    def run_due(self, now: float | None = None) -> int:
        """
        Fire every deadline due at or before now (defaults to clock.now).

        Deadlines scheduled by a firing callback are considered in the same
        call if they are already due.

        Returns:
            Number of fired callbacks.
        """
        if now is None:
            now = self.clock.now
        fired = 0
        while self._heap and self._heap[0].due <= now:
            deadline = heapq.heappop(self._heap)
            if deadline.cancelled:
                continue
            if deadline.tag is not None and self._tagged.get(deadline.tag) is deadline:
                del self._tagged[deadline.tag]
            try:
                deadline.callback()
            except Exception as e:
                log.error(e, f"[Scheduler] deadline '{deadline.tag or deadline.seq}' failed")
                raise
            fired += 1
        return fired

    def clear(self) -> None:
        """Drop all pending deadlines without firing them."""
        for deadline in self._heap:
            deadline.cancel()
        self._heap.clear()
        self._tagged.clear()
