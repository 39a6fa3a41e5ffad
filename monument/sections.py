"""Sections - the closed set of content views and their scene anchors.

Sections form a two-level hierarchy (portal → sub-sections) but navigation
treats them as a flat history stack. Every table in this module is keyed by
portal group, so adding a section means extending ``portal_group`` first.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from monument.graph.layout import HOME_NODE


class Section(str, Enum):
    """Navigable sections."""

    MAIN = "main"
    ARTS = "arts"
    PROJECTS = "projects"
    ABOUT = "about"
    DANCE = "dance"
    GYMNASTICS = "gymnastics"
    MUSIC = "music"
    ARTICLES = "articles"
    XPOSTS = "xposts"
    PASTPROJECTS = "pastprojects"

    @classmethod
    def coerce(cls, value: "Section | str | None") -> "Section | None":
        """Convert a raw value to Section, None if it is not a known section."""
        if value is None or isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class PortalGroup(str, Enum):
    MAIN = "main"
    ARTS = "arts"
    PROJECTS = "projects"
    ABOUT = "about"


def portal_group(section: Section) -> PortalGroup:
    """Map any section to its parent portal."""
    match section:
        case Section.ARTS | Section.DANCE | Section.GYMNASTICS | Section.MUSIC:
            return PortalGroup.ARTS
        case Section.PROJECTS | Section.ARTICLES | Section.XPOSTS | Section.PASTPROJECTS:
            return PortalGroup.PROJECTS
        case Section.ABOUT:
            return PortalGroup.ABOUT
        case Section.MAIN:
            return PortalGroup.MAIN
    raise ValueError(f"Unhandled section: {section!r}")


GROUP_DESTINATION: dict[PortalGroup, str] = {
    PortalGroup.MAIN: HOME_NODE,
    PortalGroup.ARTS: "arts-door",
    PortalGroup.PROJECTS: "projects-door",
    PortalGroup.ABOUT: "about-dest",
}


def destination_node(section: Section) -> str:
    """Graph node the character must stand on while the section is active."""
    return GROUP_DESTINATION[portal_group(section)]


@dataclass(frozen=True)
class CameraTarget:
    """Scene-group pan offset and zoom for a section."""

    pos: tuple[float, float, float]
    zoom: float


DESKTOP_ZOOM = 45.0

GROUP_CAMERA: dict[PortalGroup, CameraTarget] = {
    PortalGroup.MAIN: CameraTarget((0.0, -5.5, 0.0), 45.0),
    PortalGroup.ARTS: CameraTarget((0.0, -1.5, -2.1), 80.0),
    PortalGroup.PROJECTS: CameraTarget((-2.1, -1.5, 0.0), 80.0),
    PortalGroup.ABOUT: CameraTarget((0.0, -9.0, 0.0), 70.0),
}


def camera_target(section: "Section | str | None", base_zoom: float = DESKTOP_ZOOM) -> CameraTarget:
    """
    Camera target for a section, zoom scaled by ``base_zoom / DESKTOP_ZOOM``.

    Unknown values fall back to the main view.
    """
    resolved = Section.coerce(section)
    group = portal_group(resolved) if resolved is not None else PortalGroup.MAIN
    target = GROUP_CAMERA[group]
    return CameraTarget(target.pos, target.zoom * base_zoom / DESKTOP_ZOOM)


@dataclass(frozen=True)
class LookDirection:
    """Fixed character look: body yaw (atan2 convention, +Z = 0) and head tilt."""

    body_yaw: float
    head_pitch: float


LOOK_DIRECTIONS: dict[PortalGroup, LookDirection] = {
    PortalGroup.ABOUT: LookDirection(math.pi / 4, -0.35),
    PortalGroup.ARTS: LookDirection(-math.pi / 4, 0.5),
    PortalGroup.PROJECTS: LookDirection(math.pi * 3 / 4, 0.5),
}


def look_direction(hovered: Section | None, active: Section) -> LookDirection | None:
    """Hovered portal wins over the active one; main view has no fixed look."""
    if hovered is not None:
        group = portal_group(hovered)
    else:
        group = portal_group(active)
    return LOOK_DIRECTIONS.get(group)
