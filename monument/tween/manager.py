"""TweenManager - manages and updates all active tweens."""

from __future__ import annotations

from typing import Callable

from monument.tween.ease import Ease
from monument.tween.tween import Tween, ValueTween


class TweenManager:
    """
    Manages active tweens and provides factory methods.

    Usage:
        tweens = TweenManager()

        tweens.value(get_angle, set_angle, snapped, 0.35, ease=Ease.OUT_BACK, overshoot=1.5)

        # In game loop
        tweens.update(dt)
    """

    def __init__(self):
        self._tweens: list[Tween] = []

    def update(self, dt: float) -> None:
        """Update all active tweens. Removes completed/killed tweens."""
        current = self._tweens
        self._tweens = []
        alive = []
        for tween in current:
            if tween.update(dt):
                alive.append(tween)
        # Tweens created by callbacks during this update start next frame
        self._tweens = alive + [t for t in self._tweens if t.is_alive]

    def value(
        self,
        getter: Callable[[], float],
        setter: Callable[[float], None],
        target: float,
        duration: float,
        ease: Ease = Ease.LINEAR,
        overshoot: float | None = None,
    ) -> ValueTween:
        """Create a scalar value tween."""
        tween = ValueTween(getter, setter, target, duration, ease, overshoot)
        self._tweens.append(tween)
        return tween
