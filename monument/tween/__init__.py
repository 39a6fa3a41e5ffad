"""
Tween module - smooth parameter animation system.

Usage:
    from monument.tween import TweenManager, Ease

    tweens = TweenManager()
    tweens.value(lambda: ring.angle, ring.set_angle, target, 0.35,
                 ease=Ease.OUT_BACK, overshoot=1.5).on_complete(commit)

    # In game loop
    tweens.update(dt)
"""

from monument.tween.ease import Ease
from monument.tween.tween import Tween, TweenState, ValueTween
from monument.tween.manager import TweenManager

__all__ = [
    # Easing
    "Ease",
    # Base classes
    "Tween",
    "TweenState",
    "ValueTween",
    # Manager
    "TweenManager",
]
