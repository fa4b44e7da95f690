"""Example routing script for experimentation.

Demonstrates how to programmatically create a RoutingConfig and route the clouds
of a points file. Uses the build_config() function instead of manually
constructing config objects.
"""

import logging
from pathlib import Path

from belt_routing.app import RoutingApp, RoutingResult, build_config, load_clouds


def run_example() -> RoutingResult:
    """Route the belts of the bundled test system."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    project_root = Path(__file__).resolve().parents[2]

    config = build_config(
        points_path=str(project_root / "data" / "test" / "belts.csv"),
        exact_threshold=10,
        distance_unit_meters=1_000.0,
        unit_label="km",
    )

    clouds = load_clouds(config.input)
    app = RoutingApp(config=config)
    result = app.run(clouds=clouds)
    for line in app.render(clouds, result):
        print(line)
    return result


if __name__ == "__main__":
    run_example()
