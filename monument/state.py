"""
NavigationState - the single store of navigation data.

Holds the active section and its history stack, the hovered section, the
settled ring rotation and the walking state (path, progress, character node,
deferred target). The object is constructed explicitly and passed to the
components that read or mutate it; the locomotion controller and the section
navigator write through the setters below.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from monument.graph.bridges import normalize_rotation
from monument.graph.layout import HOME_NODE
from monument.sections import Section


@dataclass
class WalkProgress:
    """Segment index into the walk path plus distance travelled along it."""

    segment: int = 0
    distance: float = 0.0

    def reset(self) -> None:
        self.segment = 0
        self.distance = 0.0


@dataclass
class NavigationState:
    current_section: Section = Section.MAIN
    navigation_history: List[Section] = field(default_factory=list)
    hovered_section: Optional[Section] = None

    # Settled ring rotation in degrees (multiple of 90 at rest)
    ring_rotation: int = 0

    # Walking
    walk_path: Optional[List[str]] = None
    walk_progress: WalkProgress = field(default_factory=WalkProgress)
    character_node_id: str = HOME_NODE
    is_walking: bool = False
    walk_target: Optional[Section] = None

    # --- Sections ---

    def navigate_to(self, section: Section) -> None:
        """Push the current section onto history and activate section."""
        self.navigation_history.append(self.current_section)
        self.current_section = section

    def go_back(self) -> bool:
        """
        Pop the last history entry into the current section.

        Returns:
            False when history is empty (nothing changes).
        """
        if not self.navigation_history:
            return False
        self.current_section = self.navigation_history.pop()
        return True

    def set_hovered_section(self, section: Optional[Section]) -> None:
        self.hovered_section = section

    @property
    def history_depth(self) -> int:
        return len(self.navigation_history)

    @property
    def is_main(self) -> bool:
        return self.current_section == Section.MAIN

    # --- Ring ---

    def set_ring_rotation(self, degrees: float) -> None:
        self.ring_rotation = normalize_rotation(degrees)

    # --- Walking ---

    def set_walk_path(self, path: Optional[Sequence[str]]) -> None:
        """Install a new walk path (progress resets) or clear it with None."""
        self.walk_path = list(path) if path is not None else None
        self.walk_progress.reset()

    def set_is_walking(self, walking: bool) -> None:
        self.is_walking = walking

    def set_character_node_id(self, node_id: str) -> None:
        self.character_node_id = node_id

    def set_walk_target(self, section: Optional[Section]) -> None:
        self.walk_target = section
