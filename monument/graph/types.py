"""
Базовые структуры данных навигационного графа.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional
import numpy as np


class BridgeDir(Enum):
    """
    Сторона кольца, на которой находится мост.

    Z — мост на +Z (сторона Arts), X — мост на +X (сторона Projects).
    """

    Z = "pz"
    X = "px"


@dataclass(frozen=True)
class GraphNode:
    """Точка навигационного графа (ступень, площадка, дверь)."""

    id: str
    position: np.ndarray = field(compare=False)
    """Позиция в мировых координатах, shape (3,)."""

    @classmethod
    def at(cls, node_id: str, x: float, y: float, z: float) -> GraphNode:
        position = np.array([x, y, z], dtype=np.float64)
        position.setflags(write=False)
        return cls(id=node_id, position=position)


@dataclass(frozen=True)
class GraphEdge:
    """
    Ненаправленное ребро между двумя узлами.

    Если задан bridge, ребро проходимо только при тех поворотах кольца,
    при которых этот мост открыт.
    """

    a: str
    b: str
    bridge: Optional[BridgeDir] = None

    def other(self, node_id: str) -> Optional[str]:
        """Второй конец ребра или None, если ребро не касается узла."""
        if self.a == node_id:
            return self.b
        if self.b == node_id:
            return self.a
        return None
