"""Tests for the ring bridge rule and the navigation graph."""

import unittest
import numpy as np

from monument.graph import (
    EDGES,
    NODES,
    BridgeDir,
    NavGraph,
    is_bridge_open,
    normalize_rotation,
    open_bridges,
    snap_rotation,
)


class BridgeRuleTest(unittest.TestCase):
    """Тесты для is_bridge_open."""

    TABLE = {
        0: (True, True),
        90: (False, True),
        180: (False, False),
        270: (True, False),
    }

    def test_table(self):
        """Открытость мостов совпадает с таблицей для всех четырёх поворотов."""
        for rotation, (z_open, x_open) in self.TABLE.items():
            with self.subTest(rotation=rotation):
                self.assertEqual(is_bridge_open(BridgeDir.Z, rotation), z_open)
                self.assertEqual(is_bridge_open(BridgeDir.X, rotation), x_open)

    def test_each_bridge_open_at_two_distinct_orientations(self):
        z = {r for r in self.TABLE if is_bridge_open(BridgeDir.Z, r)}
        x = {r for r in self.TABLE if is_bridge_open(BridgeDir.X, r)}
        self.assertEqual(len(z), 2)
        self.assertEqual(len(x), 2)
        self.assertNotEqual(z, x)

    def test_unnormalized_rotation(self):
        """Углы вне [0, 360) приводятся к прямому углу."""
        self.assertEqual(open_bridges(-90), {BridgeDir.Z})
        self.assertEqual(open_bridges(450), {BridgeDir.X})
        self.assertEqual(open_bridges(720), {BridgeDir.Z, BridgeDir.X})
        self.assertEqual(open_bridges(-180), set())

    def test_normalize_and_snap(self):
        self.assertEqual(normalize_rotation(-90), 270)
        self.assertEqual(normalize_rotation(360), 0)
        self.assertEqual(normalize_rotation(725), 5)
        self.assertEqual(snap_rotation(44), 0)
        self.assertEqual(snap_rotation(46), 90)
        self.assertEqual(snap_rotation(-100), 270)
        self.assertEqual(snap_rotation(359), 0)


class NavGraphTest(unittest.TestCase):
    """Тесты для NavGraph."""

    def setUp(self):
        self.graph = NavGraph()

    def test_layout_size(self):
        self.assertEqual(len(NODES), 25)
        self.assertEqual(len(EDGES), 24)
        bridges = [e for e in EDGES if e.bridge is not None]
        self.assertEqual(len(bridges), 2)
        self.assertEqual({e.bridge for e in bridges}, {BridgeDir.Z, BridgeDir.X})

    def test_edges_reference_known_nodes(self):
        for edge in EDGES:
            self.assertIsNotNone(self.graph.get_node(edge.a))
            self.assertIsNotNone(self.graph.get_node(edge.b))

    def test_get_node(self):
        node = self.graph.get_node("arts-door")
        np.testing.assert_allclose(node.position, [-1.0, 0.5, 3.3])

    def test_get_unknown_node(self):
        """Неизвестный id — None, а не исключение."""
        self.assertIsNone(self.graph.get_node("nowhere"))
        self.assertEqual(self.graph.neighbors("nowhere", 0), [])

    def test_neighbors_undirected(self):
        self.assertIn("terrace-c", self.graph.neighbors("home", 0))
        self.assertIn("home", self.graph.neighbors("terrace-c", 0))
        self.assertEqual(
            sorted(self.graph.neighbors("terrace-c", 0)),
            ["home", "terrace-nz", "terrace-px", "terrace-pz"],
        )

    def test_neighbors_filtered_by_bridge(self):
        """Мостовое ребро пропадает при закрытом мосте."""
        self.assertIn("lstair-z1", self.graph.neighbors("uz-landing", 0))
        self.assertNotIn("lstair-z1", self.graph.neighbors("uz-landing", 90))
        self.assertNotIn("uz-landing", self.graph.neighbors("lstair-z1", 180))
        self.assertIn("uz-landing", self.graph.neighbors("lstair-z1", 270))

        self.assertIn("lstair-x1", self.graph.neighbors("ux-landing", 90))
        self.assertNotIn("lstair-x1", self.graph.neighbors("ux-landing", 270))

    def test_node_positions_are_read_only(self):
        node = self.graph.get_node("home")
        with self.assertRaises(ValueError):
            node.position[0] = 5.0

    def test_path_length(self):
        self.assertAlmostEqual(self.graph.path_length(["home", "terrace-c"]), 0.0)
        self.assertAlmostEqual(self.graph.path_length(["terrace-c", "terrace-pz"]), 2.0)
        self.assertEqual(self.graph.distance("home", "nowhere"), float("inf"))

    def test_is_valid_path(self):
        self.assertTrue(self.graph.is_valid_path(["uz-landing", "lstair-z1"], 0))
        self.assertFalse(self.graph.is_valid_path(["uz-landing", "lstair-z1"], 180))
        self.assertFalse(self.graph.is_valid_path(["home", "arts-door"], 0))
        self.assertFalse(self.graph.is_valid_path([], 0))


if __name__ == "__main__":
    unittest.main()
