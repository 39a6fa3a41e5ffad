"""
NavGraph — неизменяемый граф узлов и рёбер монумента.

Поиск соседей параметризован поворотом кольца: мостовые рёбра
отфильтровываются правилом мостов.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence
import numpy as np

from monument.graph.bridges import is_bridge_open
from monument.graph.layout import EDGES, NODES
from monument.graph.types import GraphEdge, GraphNode


class NavGraph:
    """Граф навигации. Без побочных эффектов, разделяется по ссылке."""

    def __init__(
        self,
        nodes: Iterable[GraphNode] = NODES,
        edges: Iterable[GraphEdge] = EDGES,
    ) -> None:
        self._nodes: dict[str, GraphNode] = {n.id: n for n in nodes}
        self._edges: tuple[GraphEdge, ...] = tuple(edges)

        self._incident: dict[str, list[GraphEdge]] = {node_id: [] for node_id in self._nodes}
        for edge in self._edges:
            self._incident.setdefault(edge.a, []).append(edge)
            if edge.b != edge.a:
                self._incident.setdefault(edge.b, []).append(edge)

    @property
    def node_ids(self) -> list[str]:
        return list(self._nodes)

    @property
    def edges(self) -> tuple[GraphEdge, ...]:
        return self._edges

    def get_node(self, node_id: str) -> Optional[GraphNode]:
        """Найти узел по id. Возвращает None если не найден."""
        return self._nodes.get(node_id)

    def neighbors(self, node_id: str, rotation: float) -> list[str]:
        """
        Соседи узла при данном повороте кольца.

        Для каждого ребра, касающегося узла, берётся второй конец,
        если ребро не является закрытым мостом.
        """
        result: list[str] = []
        for edge in self._incident.get(node_id, ()):
            if edge.bridge is not None and not is_bridge_open(edge.bridge, rotation):
                continue
            other = edge.other(node_id)
            if other is not None:
                result.append(other)
        return result

    def has_edge(self, a: str, b: str, rotation: float) -> bool:
        """Есть ли открытое ребро между a и b."""
        return b in self.neighbors(a, rotation)

    def distance(self, a: str, b: str) -> float:
        """Евклидово расстояние между узлами. inf если узел не найден."""
        node_a = self._nodes.get(a)
        node_b = self._nodes.get(b)
        if node_a is None or node_b is None:
            return float("inf")
        return float(np.linalg.norm(node_a.position - node_b.position))

    def path_length(self, path: Sequence[str]) -> float:
        """Суммарная длина пути по узлам."""
        return sum(self.distance(path[i], path[i + 1]) for i in range(len(path) - 1))

    def is_valid_path(self, path: Sequence[str], rotation: float) -> bool:
        """Каждая пара соседних узлов соединена открытым ребром."""
        if not path or any(node_id not in self._nodes for node_id in path):
            return False
        return all(self.has_edge(path[i], path[i + 1], rotation) for i in range(len(path) - 1))
