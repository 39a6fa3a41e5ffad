"""
Правило мостов: какой мост проходим при данном повороте кольца.

    0°   → Z открыт, X открыт
    90°  → Z закрыт, X открыт
    180° → Z закрыт, X закрыт
    270° → Z открыт, X закрыт
"""

from __future__ import annotations

from monument.graph.types import BridgeDir

_OPEN_AT: dict[BridgeDir, frozenset[int]] = {
    BridgeDir.Z: frozenset({0, 270}),
    BridgeDir.X: frozenset({0, 90}),
}


def normalize_rotation(degrees: float) -> int:
    """Привести угол к [0, 360)."""
    return int(round(((degrees % 360) + 360) % 360)) % 360


def snap_rotation(degrees: float) -> int:
    """Ближайший прямой угол (0, 90, 180, 270)."""
    return (int(round(normalize_rotation(degrees) / 90.0)) * 90) % 360


def is_bridge_open(direction: BridgeDir, rotation: float) -> bool:
    """Открыт ли мост при повороте кольца rotation (в градусах)."""
    return snap_rotation(rotation) in _OPEN_AT[direction]


def open_bridges(rotation: float) -> set[BridgeDir]:
    """Множество мостов, открытых при данном повороте."""
    return {d for d in BridgeDir if is_bridge_open(d, rotation)}
