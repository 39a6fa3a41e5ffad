"""
SectionNavigator - coordinates section navigation with character movement.

Rules:
- A section anchored at another node makes the character walk there first;
  the section becomes the deferred target and switches after arrival.
- No path under the current rotation: the character is placed on the
  destination node directly and the section switches at once.
- Main is never deferred. It applies immediately, stops any walk and,
  after a settling delay, sends the character back home (or snaps it home
  when no path exists).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from monument import log
from monument.graph.pathfinding import find_path
from monument.sections import Section, destination_node

if TYPE_CHECKING:
    from monument.graph.graph import NavGraph
    from monument.locomotion import LocomotionController
    from monument.scheduler import DeadlineScheduler
    from monument.settings import NavigationSettings
    from monument.state import NavigationState

RETURN_HOME_TAG = "return-home"


class SectionNavigator:
    def __init__(
        self,
        state: "NavigationState",
        graph: "NavGraph",
        locomotion: "LocomotionController",
        scheduler: "DeadlineScheduler",
        settings: "NavigationSettings",
    ) -> None:
        self._state = state
        self._graph = graph
        self._locomotion = locomotion
        self._scheduler = scheduler
        self._settings = settings

    @property
    def home_node(self) -> str:
        return self._settings.home_node

    def request(self, section: "Section | str") -> bool:
        """
        Navigate to section, walking first if it is anchored elsewhere.

        Returns:
            False if section is not a known value (request ignored).
        """
        resolved = Section.coerce(section)
        if resolved is None:
            log.warn(f"[Navigator] unknown section {section!r} ignored")
            return False

        if resolved == Section.MAIN:
            self._locomotion.stop()
            self._state.navigate_to(Section.MAIN)
            self._on_main_entered()
            return True

        self._scheduler.cancel(RETURN_HOME_TAG)
        state = self._state
        dest = destination_node(resolved)

        if dest == state.character_node_id and not state.is_walking:
            self._locomotion.stop()
            state.navigate_to(resolved)
            return True

        path = find_path(self._graph, state.character_node_id, dest, state.ring_rotation)
        if path is not None and len(path) >= 2:
            log.info(f"[Navigator] '{resolved.value}' deferred until arrival at {dest}")
            self._locomotion.begin(path, target=resolved)
            return True

        if path is None:
            log.info(
                f"[Navigator] no path {state.character_node_id} → {dest} "
                f"at {state.ring_rotation}°, placing character directly"
            )
        self._teleport(dest)
        state.navigate_to(resolved)
        return True

    def go_back(self) -> bool:
        """
        Pop the history stack.

        Landing on main follows the main rules; landing on a section anchored
        at another node relocates the character without deferring anything.
        """
        if not self._state.go_back():
            return False

        # Drop any switch still waiting out the arrival delay
        self._locomotion.cancel_deferred()

        section = self._state.current_section
        log.info(f"[Navigator] back to '{section.value}'")
        if section == Section.MAIN:
            self._locomotion.stop()
            self._on_main_entered()
            return True

        self._scheduler.cancel(RETURN_HOME_TAG)
        self._relocate(destination_node(section))
        return True

    def set_hovered_section(self, section: "Section | str | None") -> None:
        self._state.set_hovered_section(Section.coerce(section))

    @property
    def return_home_pending(self) -> bool:
        return self._scheduler.is_pending(RETURN_HOME_TAG)

    def _on_main_entered(self) -> None:
        if self._state.character_node_id == self.home_node:
            self._scheduler.cancel(RETURN_HOME_TAG)
            return
        self._scheduler.schedule(
            self._settings.settle_delay,
            self._return_home,
            tag=RETURN_HOME_TAG,
        )

    def _return_home(self) -> None:
        state = self._state
        if not state.is_main or state.is_walking:
            return
        if state.character_node_id == self.home_node:
            return

        path = find_path(self._graph, state.character_node_id, self.home_node, state.ring_rotation)
        if path is not None and len(path) >= 2:
            log.info(f"[Navigator] returning home from {state.character_node_id}")
            self._locomotion.begin(path)
        else:
            log.info(f"[Navigator] no way home from {state.character_node_id}, snapping home")
            self._teleport(self.home_node)

    def _relocate(self, node_id: str) -> None:
        if node_id == self._state.character_node_id and not self._state.is_walking:
            return
        path = find_path(self._graph, self._state.character_node_id, node_id, self._state.ring_rotation)
        if path is not None and len(path) >= 2:
            self._locomotion.begin(path)
        else:
            self._teleport(node_id)

    def _teleport(self, node_id: str) -> None:
        self._locomotion.stop()
        self._state.set_character_node_id(node_id)
        log.debug(f"[Navigator] character placed at {node_id}")
