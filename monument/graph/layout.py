"""
Фиксированная разметка монумента: узлы и рёбра навигационного графа.

Монумент состоит из неподвижных лестниц и вращаемого среднего кольца
с двумя мостами. Мосты соединяют верхние площадки с нижними лестницами
только при определённых поворотах кольца (см. bridges.py).

Схема:
    home → terrace → верхние лестницы (+Z, +X) → площадки у кольца
    площадка +Z ══мост Z══ нижняя лестница +Z → arts-door
    площадка +X ══мост X══ нижняя лестница +X → projects-door
    terrace → лестница башни → about-dest
"""

from __future__ import annotations

from monument.graph.types import BridgeDir, GraphEdge, GraphNode

HOME_NODE = "home"

NODES: tuple[GraphNode, ...] = (
    # Дом персонажа (центр террасы)
    GraphNode.at("home", 0.0, 7.05, 0.0),

    # Терраса (Y ≈ 7.0)
    GraphNode.at("terrace-c", 0.0, 7.05, 0.0),
    GraphNode.at("terrace-pz", 0.0, 7.05, 2.0),
    GraphNode.at("terrace-px", 2.0, 7.05, 0.0),
    GraphNode.at("terrace-nz", 0.0, 7.05, -1.2),

    # Верхняя лестница +Z (терраса → уровень моста)
    GraphNode.at("ustair-z1", 0.2, 6.5, 2.5),
    GraphNode.at("ustair-z2", 0.1, 5.95, 2.75),
    GraphNode.at("uz-landing", 0.0, 5.4, 3.05),

    # Верхняя лестница +X
    GraphNode.at("ustair-x1", 2.5, 6.5, 0.2),
    GraphNode.at("ustair-x2", 2.75, 5.95, 0.1),
    GraphNode.at("ux-landing", 3.05, 5.85, 0.0),

    # Нижняя лестница +Z (кольцо → основание → дверь Arts)
    GraphNode.at("lstair-z1", 0.0, 4.2, 3.05),
    GraphNode.at("lstair-z2", -0.3, 3.3, 3.15),
    GraphNode.at("lstair-z3", -0.6, 2.3, 3.25),
    GraphNode.at("lstair-z4", -0.85, 1.3, 3.35),
    GraphNode.at("arts-door", -1.0, 0.5, 3.3),

    # Нижняя лестница +X (кольцо → основание → дверь Projects)
    GraphNode.at("lstair-x1", 3.05, 4.2, 0.0),
    GraphNode.at("lstair-x2", 3.15, 3.3, -0.3),
    GraphNode.at("lstair-x3", 3.25, 2.3, -0.6),
    GraphNode.at("lstair-x4", 3.35, 1.3, -0.85),
    GraphNode.at("projects-door", 3.3, 0.5, -1.0),

    # Лестница башни: терраса → About
    GraphNode.at("tower-s1", 0.0, 7.7, -1.25),
    GraphNode.at("tower-s2", 0.0, 8.4, -0.9),
    GraphNode.at("tower-s3", 0.0, 9.1, -0.4),
    GraphNode.at("about-dest", 0.0, 9.5, 0.0),
)

EDGES: tuple[GraphEdge, ...] = (
    GraphEdge("home", "terrace-c"),

    GraphEdge("terrace-c", "terrace-pz"),
    GraphEdge("terrace-c", "terrace-px"),
    GraphEdge("terrace-c", "terrace-nz"),

    GraphEdge("terrace-pz", "ustair-z1"),
    GraphEdge("ustair-z1", "ustair-z2"),
    GraphEdge("ustair-z2", "uz-landing"),

    GraphEdge("terrace-px", "ustair-x1"),
    GraphEdge("ustair-x1", "ustair-x2"),
    GraphEdge("ustair-x2", "ux-landing"),

    # Мосты зависят от поворота кольца
    GraphEdge("uz-landing", "lstair-z1", BridgeDir.Z),
    GraphEdge("ux-landing", "lstair-x1", BridgeDir.X),

    GraphEdge("lstair-z1", "lstair-z2"),
    GraphEdge("lstair-z2", "lstair-z3"),
    GraphEdge("lstair-z3", "lstair-z4"),
    GraphEdge("lstair-z4", "arts-door"),

    GraphEdge("lstair-x1", "lstair-x2"),
    GraphEdge("lstair-x2", "lstair-x3"),
    GraphEdge("lstair-x3", "lstair-x4"),
    GraphEdge("lstair-x4", "projects-door"),

    GraphEdge("terrace-nz", "tower-s1"),
    GraphEdge("tower-s1", "tower-s2"),
    GraphEdge("tower-s2", "tower-s3"),
    GraphEdge("tower-s3", "about-dest"),
)
