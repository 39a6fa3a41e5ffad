"""
RingController - drag interaction for the rotatable middle ring.

While a drag is in progress the ring follows the pointer freely; the
intermediate angle is visual only. On release (or pointer loss) the ring
eases to the nearest right angle and only then commits the rotation to
NavigationState, where pathfinding reads it.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Optional

from monument import log
from monument.graph.bridges import normalize_rotation
from monument.tween import Ease, Tween, TweenManager

if TYPE_CHECKING:
    from monument.settings import NavigationSettings
    from monument.state import NavigationState

QUARTER_TURN = math.pi / 2


def nearest_quarter_turn(radians: float) -> float:
    """Nearest multiple of 90° to an unnormalized angle (radians)."""
    return round(radians / QUARTER_TURN) * QUARTER_TURN


class RingController:
    """
    Drag → snap → commit state machine for the ring.

    Angles here are radians around the vertical axis; the committed
    rotation in NavigationState is integer degrees.
    """

    def __init__(
        self,
        state: "NavigationState",
        tweens: TweenManager,
        settings: "NavigationSettings",
    ) -> None:
        self._state = state
        self._tweens = tweens
        self._settings = settings

        self._angle: float = math.radians(state.ring_rotation)
        self._dragging: bool = False
        self._drag_start_angle: float = 0.0
        self._ring_start_angle: float = 0.0
        self._snap: Optional[Tween] = None
        self._on_settled: list[Callable[[int], None]] = []

    @property
    def angle(self) -> float:
        """Current visual angle (radians), including transient drag values."""
        return self._angle

    def set_angle(self, radians: float) -> None:
        self._angle = radians

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    @property
    def is_settling(self) -> bool:
        return self._snap is not None and self._snap.is_alive

    @property
    def settled_rotation(self) -> int:
        """Last committed rotation in degrees."""
        return self._state.ring_rotation

    def add_settled_listener(self, callback: Callable[[int], None]) -> None:
        """Call callback(degrees) every time a snap commits."""
        self._on_settled.append(callback)

    def drag_start(self, pointer_angle: Optional[float]) -> bool:
        """
        Begin a drag at the given pointer angle (radians).

        A snap still in flight is abandoned without committing.
        """
        if pointer_angle is None:
            return False
        if self.is_settling:
            self._snap.kill()
            self._snap = None
        self._dragging = True
        self._drag_start_angle = pointer_angle
        self._ring_start_angle = self._angle
        return True

    def drag_move(self, pointer_angle: Optional[float]) -> None:
        if not self._dragging or pointer_angle is None:
            return
        self._angle = self._ring_start_angle + (pointer_angle - self._drag_start_angle)

    def drag_end(self) -> bool:
        """Release the ring; it eases to the nearest right angle."""
        if not self._dragging:
            return False
        self._dragging = False

        target = nearest_quarter_turn(self._angle)
        self._snap = self._tweens.value(
            lambda: self._angle,
            self.set_angle,
            target,
            self._settings.snap_duration,
            ease=Ease.OUT_BACK,
            overshoot=self._settings.snap_overshoot,
        ).on_complete(lambda: self._commit(target))
        return True

    def drag_cancel(self) -> bool:
        """Pointer lost mid-drag: settle the same way as a release."""
        return self.drag_end()

    def _commit(self, target: float) -> None:
        self._angle = target
        self._snap = None
        degrees = normalize_rotation(math.degrees(target))
        previous = self._state.ring_rotation
        self._state.set_ring_rotation(degrees)
        log.info(f"[Ring] settled at {degrees}° (was {previous}°)")
        for callback in self._on_settled:
            callback(degrees)
