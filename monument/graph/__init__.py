"""
Навигационный граф монумента.

- types: узлы, рёбра, направления мостов
- layout: фиксированная разметка узлов и рёбер
- bridges: правило открытия мостов по повороту кольца
- graph: NavGraph — поиск узлов и соседей
- pathfinding: A* поиск пути
"""

from monument.graph.types import BridgeDir, GraphEdge, GraphNode
from monument.graph.layout import EDGES, HOME_NODE, NODES
from monument.graph.bridges import is_bridge_open, normalize_rotation, open_bridges, snap_rotation
from monument.graph.graph import NavGraph
from monument.graph.pathfinding import find_path

__all__ = [
    "BridgeDir",
    "GraphEdge",
    "GraphNode",
    "EDGES",
    "HOME_NODE",
    "NODES",
    "is_bridge_open",
    "normalize_rotation",
    "open_bridges",
    "snap_rotation",
    "NavGraph",
    "find_path",
]
