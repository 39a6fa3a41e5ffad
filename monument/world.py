"""
MonumentWorld - composition root of the navigation core.

Owns the clock, scheduler, tweens, state and controllers, and runs them in a
fixed order once per frame:

    clock advance → ring tweens → due deadlines → locomotion

Rendering and UI layers write through the inbound methods and read a
SceneView snapshot each frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import numpy as np

from monument.graph.graph import NavGraph
from monument.locomotion import LocomotionController
from monument.navigator import SectionNavigator
from monument.ring import RingController
from monument.scheduler import DeadlineScheduler, SimClock
from monument.sections import CameraTarget, Section, camera_target
from monument.settings import NavigationSettings
from monument.state import NavigationState
from monument.tween import TweenManager


@dataclass(frozen=True)
class SceneView:
    """What the rendering layer reads each frame."""

    section: Section
    history_depth: int
    hovered_section: Optional[Section]
    ring_rotation: int
    ring_angle: float
    character_node: str
    character_position: Optional[np.ndarray]
    character_facing: float
    is_walking: bool
    camera: CameraTarget


class MonumentWorld:
    def __init__(
        self,
        settings: Optional[NavigationSettings] = None,
        graph: Optional[NavGraph] = None,
        state: Optional[NavigationState] = None,
    ) -> None:
        self.settings = (settings or NavigationSettings()).validate()
        self.graph = graph or NavGraph()
        self.state = state or NavigationState(character_node_id=self.settings.home_node)

        self.clock = SimClock()
        self.scheduler = DeadlineScheduler(self.clock)
        self.tweens = TweenManager()

        self.ring = RingController(self.state, self.tweens, self.settings)
        self.locomotion = LocomotionController(self.state, self.graph, self.scheduler, self.settings)
        self.navigator = SectionNavigator(
            self.state, self.graph, self.locomotion, self.scheduler, self.settings
        )

    # --- Frame ---

    def tick(self, dt: float) -> None:
        """Advance the whole core by dt seconds."""
        self.clock.advance(dt)
        self.tweens.update(dt)
        self.scheduler.run_due()
        self.locomotion.update(dt)

    def run_for(self, seconds: float, dt: float = 1.0 / 60.0) -> int:
        """Tick with fixed dt until seconds of simulated time pass. Returns tick count."""
        ticks = 0
        elapsed = 0.0
        while elapsed < seconds:
            step = min(dt, seconds - elapsed)
            self.tick(step)
            elapsed += step
            ticks += 1
        return ticks

    # --- Inbound (UI / input) ---

    def navigate_to(self, section: "Section | str") -> bool:
        return self.navigator.request(section)

    def go_back(self) -> bool:
        return self.navigator.go_back()

    def set_hovered_section(self, section: "Section | str | None") -> None:
        self.navigator.set_hovered_section(section)

    def drag_start(self, pointer_angle: Optional[float]) -> bool:
        return self.ring.drag_start(pointer_angle)

    def drag_move(self, pointer_angle: Optional[float]) -> None:
        self.ring.drag_move(pointer_angle)

    def drag_end(self) -> bool:
        return self.ring.drag_end()

    def drag_cancel(self) -> bool:
        return self.ring.drag_cancel()

    # --- Outbound ---

    def view(self, base_zoom: float | None = None) -> SceneView:
        state = self.state
        camera = (
            camera_target(state.current_section)
            if base_zoom is None
            else camera_target(state.current_section, base_zoom)
        )
        return SceneView(
            section=state.current_section,
            history_depth=state.history_depth,
            hovered_section=state.hovered_section,
            ring_rotation=state.ring_rotation,
            ring_angle=self.ring.angle,
            character_node=state.character_node_id,
            character_position=self.locomotion.position(),
            character_facing=self.locomotion.facing(),
            is_walking=state.is_walking,
            camera=camera,
        )
