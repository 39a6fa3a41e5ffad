"""Tests for section navigation coordinated with walking."""

import math
import unittest

from monument.graph import find_path
from monument.sections import Section
from monument.settings import NavigationSettings
from monument.world import MonumentWorld

DT = 1.0 / 60.0


class SectionNavigatorTest(unittest.TestCase):
    def setUp(self):
        self.world = MonumentWorld()
        self.state = self.world.state

    def walk_time(self, path):
        return self.world.graph.path_length(path) / self.world.settings.walk_speed

    def arrive_at_arts(self):
        self.world.navigate_to(Section.ARTS)
        path = list(self.state.walk_path)
        self.world.run_for(self.walk_time(path) + self.world.settings.arrival_delay + 0.1, DT)
        self.assertEqual(self.state.current_section, Section.ARTS)
        self.assertEqual(self.state.character_node_id, "arts-door")

    # --- Deferred navigation ---

    def test_walk_then_switch(self):
        self.assertTrue(self.world.navigate_to("arts"))
        self.assertTrue(self.state.is_walking)
        self.assertEqual(self.state.walk_target, Section.ARTS)
        self.assertEqual(self.state.current_section, Section.MAIN)
        self.assertEqual(self.state.walk_path[0], "home")
        self.assertEqual(self.state.walk_path[-1], "arts-door")

        path = list(self.state.walk_path)
        self.world.run_for(self.walk_time(path) + self.world.settings.arrival_delay + 0.1, DT)
        self.assertFalse(self.state.is_walking)
        self.assertEqual(self.state.character_node_id, "arts-door")
        self.assertEqual(self.state.current_section, Section.ARTS)
        self.assertEqual(self.state.navigation_history, [Section.MAIN])
        self.assertIsNone(self.state.walk_target)

    def test_teleport_when_bridges_closed(self):
        """180°: пути нет — персонаж сразу у двери, секция меняется сразу."""
        self.state.set_ring_rotation(180)
        self.assertTrue(self.world.navigate_to(Section.ARTS))
        self.assertFalse(self.state.is_walking)
        self.assertIsNone(self.state.walk_path)
        self.assertEqual(self.state.character_node_id, "arts-door")
        self.assertEqual(self.state.current_section, Section.ARTS)

    def test_same_node_switch_is_immediate(self):
        self.arrive_at_arts()
        self.world.navigate_to(Section.DANCE)
        self.assertEqual(self.state.current_section, Section.DANCE)
        self.assertFalse(self.state.is_walking)
        self.assertEqual(self.state.navigation_history, [Section.MAIN, Section.ARTS])

    def test_new_request_replaces_deferred_target(self):
        self.world.navigate_to(Section.ARTS)
        self.world.run_for(0.2, DT)
        self.world.navigate_to(Section.ABOUT)
        self.assertEqual(self.state.walk_target, Section.ABOUT)
        self.assertEqual(self.state.walk_path[-1], "about-dest")
        self.assertEqual(self.state.walk_path[0], self.state.character_node_id)

        self.world.run_for(self.walk_time(self.state.walk_path) + 1.0, DT)
        self.assertEqual(self.state.current_section, Section.ABOUT)
        self.assertEqual(self.state.navigation_history, [Section.MAIN])

    def test_unknown_section_ignored(self):
        self.assertFalse(self.world.navigate_to("gallery"))
        self.assertEqual(self.state.current_section, Section.MAIN)
        self.assertEqual(self.state.navigation_history, [])
        self.assertFalse(self.state.is_walking)

    # --- Main ---

    def test_main_supersedes_walk(self):
        self.world.navigate_to(Section.PROJECTS)
        self.world.run_for(0.5, DT)
        self.assertTrue(self.state.is_walking)

        self.world.navigate_to(Section.MAIN)
        self.assertFalse(self.state.is_walking)
        self.assertIsNone(self.state.walk_path)
        self.assertIsNone(self.state.walk_target)
        self.assertEqual(self.state.current_section, Section.MAIN)

        self.world.run_for(5.0, DT)
        self.assertEqual(self.state.current_section, Section.MAIN)
        self.assertEqual(self.state.character_node_id, "home")

    def test_return_home_after_settle_delay(self):
        """У двери Arts, возврат в main: после паузы ставится путь домой."""
        self.arrive_at_arts()
        self.world.navigate_to(Section.MAIN)
        self.assertEqual(self.state.current_section, Section.MAIN)
        self.assertTrue(self.world.navigator.return_home_pending)

        settle = self.world.settings.settle_delay
        self.world.run_for(settle - 0.1, DT)
        self.assertFalse(self.state.is_walking)

        self.world.run_for(0.2, DT)
        self.assertTrue(self.state.is_walking)
        self.assertEqual(self.state.walk_path, find_path(self.world.graph, "arts-door", "home", 0))
        self.assertIsNone(self.state.walk_target)

        self.world.run_for(self.walk_time(self.state.walk_path) + 0.5, DT)
        self.assertEqual(self.state.character_node_id, "home")
        self.assertFalse(self.state.is_walking)
        self.assertEqual(self.state.current_section, Section.MAIN)

    def test_return_home_snaps_when_no_path(self):
        self.arrive_at_arts()
        self.state.set_ring_rotation(180)
        self.world.navigate_to(Section.MAIN)
        self.world.run_for(self.world.settings.settle_delay + 0.1, DT)
        self.assertFalse(self.state.is_walking)
        self.assertEqual(self.state.character_node_id, "home")

    def test_request_cancels_return_home(self):
        self.arrive_at_arts()
        self.world.navigate_to(Section.MAIN)
        self.world.navigate_to(Section.MUSIC)
        self.assertFalse(self.world.navigator.return_home_pending)
        self.assertEqual(self.state.current_section, Section.MUSIC)
        self.world.run_for(2.0, DT)
        self.assertEqual(self.state.character_node_id, "arts-door")

    def test_main_at_home_schedules_nothing(self):
        self.world.navigate_to(Section.MAIN)
        self.assertFalse(self.world.navigator.return_home_pending)

    # --- Back ---

    def test_go_back_empty(self):
        self.assertFalse(self.world.go_back())
        self.assertEqual(self.state.current_section, Section.MAIN)

    def test_go_back_to_main_returns_home(self):
        self.arrive_at_arts()
        self.assertTrue(self.world.go_back())
        self.assertEqual(self.state.current_section, Section.MAIN)
        self.assertEqual(self.state.navigation_history, [])
        self.world.run_for(self.world.settings.settle_delay + 0.1, DT)
        self.assertTrue(self.state.is_walking)
        self.assertEqual(self.state.walk_path[-1], "home")

    def test_go_back_between_sub_sections(self):
        self.arrive_at_arts()
        self.world.navigate_to(Section.GYMNASTICS)
        self.world.go_back()
        self.assertEqual(self.state.current_section, Section.ARTS)
        self.assertFalse(self.state.is_walking)
        self.assertEqual(self.state.character_node_id, "arts-door")

    def test_go_back_during_arrival_delay_drops_pending_switch(self):
        """Назад в паузе после прибытия: отложенная секция не применяется."""
        self.world.navigate_to(Section.PROJECTS)
        self.world.run_for(10.0, DT)
        self.world.navigate_to(Section.ARTS)
        self.world.run_for(10.0, DT)
        self.assertEqual(self.state.navigation_history, [Section.MAIN, Section.PROJECTS])

        self.world.navigate_to(Section.PROJECTS)
        while self.state.is_walking:
            self.world.tick(DT)
        self.assertEqual(self.state.character_node_id, "projects-door")
        self.assertEqual(self.state.walk_target, Section.PROJECTS)

        self.assertTrue(self.world.go_back())
        self.assertEqual(self.state.current_section, Section.PROJECTS)
        self.assertEqual(self.state.navigation_history, [Section.MAIN])
        self.assertIsNone(self.state.walk_target)

        self.world.run_for(1.0, DT)
        self.assertEqual(self.state.current_section, Section.PROJECTS)
        self.assertEqual(self.state.navigation_history, [Section.MAIN])

    def test_go_back_relocates_character(self):
        self.world.navigate_to(Section.ABOUT)
        self.world.run_for(10.0, DT)
        self.assertEqual(self.state.character_node_id, "about-dest")
        self.world.navigate_to(Section.MAIN)
        self.world.run_for(10.0, DT)
        self.assertEqual(self.state.character_node_id, "home")

        self.world.go_back()
        self.assertEqual(self.state.current_section, Section.ABOUT)
        self.assertTrue(self.state.is_walking)
        self.assertIsNone(self.state.walk_target)
        self.world.run_for(10.0, DT)
        self.assertEqual(self.state.character_node_id, "about-dest")

    # --- Hover ---

    def test_hovered_section(self):
        self.world.set_hovered_section("projects")
        self.assertEqual(self.state.hovered_section, Section.PROJECTS)
        self.world.set_hovered_section(None)
        self.assertIsNone(self.state.hovered_section)


class RingAndNavigationTest(unittest.TestCase):
    def test_settled_rotation_drives_pathfinding(self):
        world = MonumentWorld(NavigationSettings(snap_duration=0.2))
        world.drag_start(0.0)
        world.drag_move(math.pi / 2 - 0.1)
        world.drag_end()
        self.assertEqual(world.state.ring_rotation, 0)

        world.run_for(0.3, DT)
        self.assertEqual(world.state.ring_rotation, 90)

        world.navigate_to(Section.ARTS)
        self.assertFalse(world.state.is_walking)
        self.assertEqual(world.state.character_node_id, "arts-door")

        # 90°: bridge Z is closed, so there is no way home either
        world.navigate_to(Section.MAIN)
        world.run_for(world.settings.settle_delay + 0.1, DT)
        self.assertEqual(world.state.character_node_id, "home")

        world.navigate_to(Section.PROJECTS)
        self.assertTrue(world.state.is_walking)
        self.assertIn("lstair-x1", world.state.walk_path)

    def test_view_snapshot(self):
        world = MonumentWorld()
        world.navigate_to(Section.ABOUT)
        world.tick(DT)
        view = world.view()
        self.assertEqual(view.section, Section.MAIN)
        self.assertTrue(view.is_walking)
        self.assertEqual(view.history_depth, 0)
        self.assertEqual(view.ring_rotation, 0)
        self.assertEqual(view.camera, world.view().camera)
        self.assertEqual(len(view.character_position), 3)


if __name__ == "__main__":
    unittest.main()
