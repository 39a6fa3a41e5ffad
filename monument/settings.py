"""
Navigation settings — tunable parameters for walking and ring snapping.

Settings can be stored as JSON (e.g. project_settings/navigation.json).
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from monument import log
from monument.graph.layout import HOME_NODE


@dataclass
class NavigationSettings:
    """
    Navigation parameters.

    - walk_speed: character speed along the path (world units / second)
    - arrival_delay: pause after arrival before a deferred section switch
    - settle_delay: pause after returning to main before walking home
    - snap_duration: ring snap animation length (seconds)
    - snap_overshoot: back-out overshoot of the ring snap
    - home_node: node the character returns to in the main view
    """

    walk_speed: float = 2.0
    arrival_delay: float = 0.3
    settle_delay: float = 0.6
    snap_duration: float = 0.35
    snap_overshoot: float = 1.5
    home_node: str = HOME_NODE

    def validate(self) -> "NavigationSettings":
        """Raise ValueError on out-of-range values."""
        if self.walk_speed <= 0:
            raise ValueError(f"walk_speed must be positive, got {self.walk_speed}")
        for name in ("arrival_delay", "settle_delay", "snap_duration"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
        return self

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "NavigationSettings":
        """Deserialize from dictionary."""
        defaults = NavigationSettings()
        return NavigationSettings(
            walk_speed=float(data.get("walk_speed", defaults.walk_speed)),
            arrival_delay=float(data.get("arrival_delay", defaults.arrival_delay)),
            settle_delay=float(data.get("settle_delay", defaults.settle_delay)),
            snap_duration=float(data.get("snap_duration", defaults.snap_duration)),
            snap_overshoot=float(data.get("snap_overshoot", defaults.snap_overshoot)),
            home_node=str(data.get("home_node", defaults.home_node)),
        )


def load_settings(path: Optional[Path]) -> NavigationSettings:
    """Load settings from file. Missing or broken files give defaults."""
    if path is None or not Path(path).exists():
        return NavigationSettings()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        settings = NavigationSettings.from_dict(data).validate()
        log.info(f"[NavigationSettings] Loaded from {path}")
        return settings
    except Exception as e:
        log.error(f"[NavigationSettings] Failed to load settings: {e}")
        return NavigationSettings()


def save_settings(settings: NavigationSettings, path: Path) -> bool:
    """Save settings to file."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(settings.to_dict(), f, indent=2)
        log.info(f"[NavigationSettings] Saved to {path}")
        return True
    except Exception as e:
        log.error(f"[NavigationSettings] Failed to save settings: {e}")
        return False
