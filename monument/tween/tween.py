"""Base Tween class and scalar value tween."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Callable

from monument.tween.ease import Ease, evaluate as ease_evaluate


class TweenState(Enum):
    """Tween lifecycle state."""

    RUNNING = auto()
    COMPLETED = auto()
    KILLED = auto()


class Tween(ABC):
    """
    Base class for all tweens.

    Subclasses must implement:
    - _apply(t: float): Apply interpolated value at normalized time t (0..1)
    """

    def __init__(
        self,
        duration: float,
        ease: Ease = Ease.LINEAR,
        overshoot: float | None = None,
    ):
        self.duration = duration
        self.ease = ease
        self.overshoot = overshoot

        self._elapsed: float = 0.0
        self._state: TweenState = TweenState.RUNNING
        self._on_complete: Callable[[], None] | None = None

    @property
    def state(self) -> TweenState:
        return self._state

    @property
    def is_alive(self) -> bool:
        return self._state == TweenState.RUNNING

    def kill(self) -> "Tween":
        """Kill the tween immediately without completing."""
        self._state = TweenState.KILLED
        return self

    def on_complete(self, callback: Callable[[], None]) -> "Tween":
        """Set callback to invoke when tween completes."""
        self._on_complete = callback
        return self

    def update(self, dt: float) -> bool:
        """
        Update tween by dt seconds.

        Returns:
            True if tween is still alive, False if completed or killed.
        """
        if self._state != TweenState.RUNNING:
            return False

        self._elapsed += dt
        raw_t = min(1.0, self._elapsed / self.duration) if self.duration > 0 else 1.0
        self._apply(ease_evaluate(self.ease, raw_t, self.overshoot))

        if raw_t >= 1.0:
            self._state = TweenState.COMPLETED
            if self._on_complete is not None:
                self._on_complete()
            return False

        return True

    @abstractmethod
    def _apply(self, t: float) -> None:
        """Apply interpolated value at normalized time t (0..1)."""
        pass


class ValueTween(Tween):
    """
    Tween for a scalar read through getter and written through setter.

    The start value is captured on the first update, so the tween starts
    from whatever the value is when it begins moving.
    """

    def __init__(
        self,
        getter: Callable[[], float],
        setter: Callable[[float], None],
        target: float,
        duration: float,
        ease: Ease = Ease.LINEAR,
        overshoot: float | None = None,
    ):
        super().__init__(duration, ease, overshoot)
        self.getter = getter
        self.setter = setter
        self.target = float(target)
        self._start: float | None = None

    def _apply(self, t: float) -> None:
        if self._start is None:
            self._start = float(self.getter())

        self.setter(self._start + (self.target - self._start) * t)
