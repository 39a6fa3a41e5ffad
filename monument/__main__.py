"""
Command-line entry point: headless navigation simulation.

Usage:
    python -m monument --to arts --rotation 0
    python -m monument --to projects --rotation 180 --settings navigation.json -v
"""

import argparse
import sys
from pathlib import Path

from monument import log
from monument.graph.bridges import snap_rotation
from monument.sections import Section


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Simulate the character walking to a section of the monument"
    )
    parser.add_argument(
        "--to", "-t",
        type=str,
        required=True,
        choices=[s.value for s in Section],
        help="Section to navigate to",
    )
    parser.add_argument(
        "--rotation", "-r",
        type=int,
        default=0,
        help="Ring rotation in degrees (snapped to 90, default: 0)",
    )
    parser.add_argument(
        "--dt",
        type=float,
        default=1.0 / 60.0,
        help="Simulation step in seconds (default: 1/60)",
    )
    parser.add_argument(
        "--max-time",
        type=float,
        default=60.0,
        help="Give up after this much simulated time (default: 60)",
    )
    parser.add_argument(
        "--settings", "-s",
        type=str,
        default=None,
        help="Navigation settings JSON file",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every navigation event",
    )

    args = parser.parse_args(argv)

    if args.dt <= 0:
        print(f"Error: --dt must be positive, got {args.dt}")
        return 1

    log.setup_console(log.DEBUG if args.verbose else log.WARNING)

    from monument.settings import load_settings
    from monument.world import MonumentWorld

    settings_path = Path(args.settings) if args.settings else None
    if settings_path is not None and not settings_path.exists():
        print(f"Error: Settings file does not exist: {settings_path}")
        return 1

    world = MonumentWorld(settings=load_settings(settings_path))
    world.state.set_ring_rotation(snap_rotation(args.rotation))

    world.navigate_to(args.to)
    path = list(world.state.walk_path) if world.state.walk_path else None
    if path is None:
        print(f"No walk needed or no path at {world.state.ring_rotation}°; "
              f"character at {world.state.character_node_id}")
    else:
        print(f"Path ({world.graph.path_length(path):.2f} units): {' → '.join(path)}")

    target = Section(args.to)
    elapsed = 0.0
    while elapsed < args.max_time:
        if world.state.current_section == target and not world.state.is_walking:
            break
        world.tick(args.dt)
        elapsed += args.dt

    view = world.view()
    print(f"t={elapsed:.2f}s section={view.section.value} node={view.character_node} "
          f"walking={view.is_walking}")
    return 0 if view.section == target else 2


if __name__ == "__main__":
    sys.exit(main())
