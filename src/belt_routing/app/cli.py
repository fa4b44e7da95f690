"""Command-line interface for RoutingApp.

Provides a Click-based command-line interface and a programmatic build_config()
function for creating RoutingConfig objects from individual parameters.
"""

import logging
from typing import Optional

import click

from ..core.config import EXACT_THRESHOLD_DEFAULT, SolverConfig
from .config import InputConfig, OutputConfig, RoutingConfig
from .data import load_clouds
from .routing import RoutingApp, RoutingResult


def build_config(
    # Input parameters
    points_path: Optional[str] = None,
    file_format: Optional[str] = None,
    cloud_column: str = "cloud",
    # Solver parameters
    exact_threshold: int = EXACT_THRESHOLD_DEFAULT,
    # Output parameters
    distance_unit_meters: float = 1_000_000.0,
    unit_label: str = "Mm",
    output_path: Optional[str] = None,
    show_ordinal: bool = True,
    show_shortest: bool = True,
) -> RoutingConfig:
    """Build RoutingConfig from individual parameters.

    Parameters
    ----------
    points_path : str, optional
        CSV or JSON file with columns cloud, id, name, x, y, z
    file_format : str, optional
        "csv" or "json"; guessed from the suffix if not given
    cloud_column : str
        Column grouping places into clouds
    exact_threshold : int
        Clouds smaller than this are solved exactly
    distance_unit_meters : float
        Meters per displayed distance unit
    unit_label : str
        Label of the displayed distance unit
    output_path : str, optional
        Where to write the JSON result
    show_ordinal : bool
        Whether to compute the ordinal route
    show_shortest : bool
        Whether to compute the shortest route

    Returns
    -------
    RoutingConfig
        Configured routing configuration object
    """
    return RoutingConfig(
        input=InputConfig(
            points_path=points_path,
            file_format=file_format,
            cloud_column=cloud_column,
        ),
        output=OutputConfig(
            distance_unit_meters=distance_unit_meters,
            unit_label=unit_label,
            output_path=output_path,
        ),
        solver=SolverConfig(exact_threshold=exact_threshold),
        show_ordinal=show_ordinal,
        show_shortest=show_shortest,
    )


@click.command()
@click.argument("points_path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "file_format",
    type=click.Choice(["csv", "json"], case_sensitive=False),
    default=None,
    help="Points file format (guessed from suffix if omitted).",
)
@click.option(
    "--cloud-column",
    type=str,
    default="cloud",
    help="Column grouping places into independently routed clouds.",
)
@click.option(
    "--exact-threshold",
    type=click.IntRange(min=3),
    default=EXACT_THRESHOLD_DEFAULT,
    help="Clouds with fewer places are searched exhaustively.",
)
@click.option(
    "--ordinal/--no-ordinal",
    "show_ordinal",
    default=True,
    help="Whether to list the ordinal route.",
)
@click.option(
    "--shortest/--no-shortest",
    "show_shortest",
    default=True,
    help="Whether to list the shortest route.",
)
@click.option(
    "--unit-meters",
    "distance_unit_meters",
    type=click.FloatRange(min=0, min_open=True),
    default=1_000_000.0,
    help="Meters per displayed distance unit.",
)
@click.option(
    "--unit-label", type=str, default="Mm", help="Label of the displayed unit."
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write routes and logs to this JSON file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level.",
)
def main(
    points_path,
    file_format,
    cloud_column,
    exact_threshold,
    show_ordinal,
    show_shortest,
    distance_unit_meters,
    unit_label,
    output_path,
    log_level,
) -> RoutingResult:
    """Find short warp routes through the clouds listed in POINTS_PATH."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()), format="%(levelname)s: %(message)s"
    )

    config = build_config(
        points_path=points_path,
        file_format=file_format,
        cloud_column=cloud_column,
        exact_threshold=exact_threshold,
        distance_unit_meters=distance_unit_meters,
        unit_label=unit_label,
        output_path=output_path,
        show_ordinal=show_ordinal,
        show_shortest=show_shortest,
    )

    try:
        clouds = load_clouds(config.input)
    except ValueError as err:
        raise click.UsageError(str(err))

    app = RoutingApp(config=config)
    result = app.run(clouds=clouds)
    for line in app.render(clouds, result):
        click.echo(line)

    if output_path:
        result.dump_json(output_path)
        click.echo(f"Results saved to {output_path}")

    return result


if __name__ == "__main__":
    main()
