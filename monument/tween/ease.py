"""Функции сглаживания (easing) для твининга.

Все функции принимают t в диапазоне [0, 1]. LINEAR возвращает значение
в том же диапазоне, OUT_BACK проскакивает цель и возвращается к 1.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Callable

# Стандартная величина проскока для Back (≈10%)
DEFAULT_OVERSHOOT = 1.70158


class Ease(Enum):
    """Типы функций сглаживания."""

    LINEAR = auto()

    # Отскок назад на выходе (щелчок кольца)
    OUT_BACK = auto()


def linear(t: float) -> float:
    """Линейная: равномерное движение без ускорения."""
    return t


def out_back(t: float, overshoot: float = DEFAULT_OVERSHOOT) -> float:
    """Отскок назад на выходе: проскакивает цель и возвращается."""
    c3 = overshoot + 1
    return 1 + c3 * (t - 1) ** 3 + overshoot * (t - 1) ** 2


_EASE_FUNCTIONS: dict[Ease, Callable[[float], float]] = {
    Ease.LINEAR: linear,
    Ease.OUT_BACK: out_back,
}


def evaluate(ease: Ease, t: float, overshoot: float | None = None) -> float:
    """Вычислить значение функции сглаживания в момент времени t (0..1)."""
    if overshoot is not None and ease is Ease.OUT_BACK:
        return out_back(t, overshoot)
    return _EASE_FUNCTIONS[ease](t)
