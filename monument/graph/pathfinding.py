"""
Pathfinding по графу монумента.

A* с евклидовой эвристикой. Стоимость ребра — евклидово расстояние
между узлами, поэтому эвристика допустима и согласована.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
    from monument.graph.graph import NavGraph


def find_path(
    graph: NavGraph,
    start_id: str,
    goal_id: str,
    rotation: float,
) -> list[str] | None:
    """
    A* поиск пути между узлами при данном повороте кольца.

    Из открытого множества всегда извлекается узел с наименьшим
    f = g + h; при равных f — узел с наименьшим id.

    Args:
        graph: навигационный граф.
        start_id: id стартового узла.
        goal_id: id целевого узла.
        rotation: поворот кольца в градусах (снимок на момент вызова).

    Returns:
        Список id узлов от старта до цели включительно, или None,
        если цель недостижима (например, нужный мост закрыт)
        или какой-либо узел не найден.
    """
    start = graph.get_node(start_id)
    goal = graph.get_node(goal_id)
    if start is None or goal is None:
        return None

    if start_id == goal_id:
        return [start_id]

    goal_pos = goal.position

    def heuristic(node_id: str) -> float:
        node = graph.get_node(node_id)
        return float(np.linalg.norm(node.position - goal_pos))

    # (f_score, node_id): id разрешает равенство f детерминированно
    open_set: list[tuple[float, str]] = [(heuristic(start_id), start_id)]
    came_from: dict[str, str] = {}
    g_score: dict[str, float] = {start_id: 0.0}
    closed: set[str] = set()

    while open_set:
        _, current = heapq.heappop(open_set)

        if current in closed:
            continue

        if current == goal_id:
            path = [current]
            while current in came_from:
                current = came_from[current]
                path.append(current)
            return path[::-1]

        closed.add(current)
        current_node = graph.get_node(current)

        for neighbor in graph.neighbors(current, rotation):
            if neighbor in closed:
                continue
            neighbor_node = graph.get_node(neighbor)
            if neighbor_node is None:
                continue

            dist = float(np.linalg.norm(current_node.position - neighbor_node.position))
            tentative_g = g_score[current] + dist

            if neighbor not in g_score or tentative_g < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative_g
                heapq.heappush(open_set, (tentative_g + heuristic(neighbor), neighbor))

    return None
