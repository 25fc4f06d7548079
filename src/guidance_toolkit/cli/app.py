"""CLI application entry point for guidance_toolkit.

This module provides a developer CLI using Typer to evaluate the guidance
heuristics on values given on the command line.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated, TypeVar

import typer
from pydantic import ValidationError

from guidance_toolkit import __version__
from guidance_toolkit.cli.output import (
    console,
    print_decision,
    print_error,
    print_header,
    print_values,
)
from guidance_toolkit.config import GuidanceSettings, LoggingConfig, NameConfig, SamplingConfig
from guidance_toolkit.core import GuidanceToolkit, get_priority
from guidance_toolkit.domain import (
    CompressedEdgeContainer,
    ConnectedRoad,
    Coordinate,
    DirectionModifier,
    RoadClass,
    TurnInstruction,
    TurnType,
)
from guidance_toolkit.exceptions import GuidanceToolkitError
from guidance_toolkit.utils import configure_logging

E = TypeVar("E", bound=Enum)

# Create the Typer app
app = typer.Typer(
    name="guidance-toolkit",
    help="Evaluate turn-guidance heuristics for road networks.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Guidance Toolkit[/bold blue] v{__version__}")
        raise typer.Exit()


def _parse_enum(enum_type: type[E], value: str) -> E:
    """Look up an enum member by name, accepting any case and dashes.

    Raises:
        typer.Exit: If the name is not a member
    """
    key = value.strip().upper().replace("-", "_")
    try:
        return enum_type[key]
    except KeyError:
        valid = ", ".join(member.name.lower() for member in enum_type)
        print_error(
            f"Invalid {enum_type.__name__}: {value}",
            details=f"Valid values: {valid}",
        )
        raise typer.Exit(code=1) from None


def _parse_point(value: str) -> Coordinate:
    """Parse a ``lon,lat`` pair.

    Raises:
        typer.Exit: If the value is not two comma-separated numbers
    """
    try:
        lon, lat = (float(part) for part in value.split(","))
    except ValueError:
        print_error(f"Invalid point: {value}", details="Expected LON,LAT in degrees")
        raise typer.Exit(code=1) from None
    return Coordinate(lon=lon, lat=lat)


def _settings(ctx: typer.Context) -> GuidanceSettings:
    return ctx.obj or GuidanceSettings()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Console logging level (DEBUG|INFO|WARNING|ERROR|CRITICAL)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Log every decision to the console",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress console logging",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Evaluate turn-guidance heuristics for road networks."""
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    try:
        logging_config = LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        )
    except ValidationError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL",
        )
        raise typer.Exit(code=1) from None

    settings = GuidanceSettings(logging=logging_config)
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    if verbose:
        print_header(__version__)
    ctx.obj = settings


@app.command()
def announce(
    ctx: typer.Context,
    from_name: Annotated[
        str, typer.Argument(help="Name of the road being left, e.g. 'Main Street (A1)'")
    ],
    to_name: Annotated[str, typer.Argument(help="Name of the road being entered")],
    suffix: Annotated[
        list[str] | None,
        typer.Option(
            "--suffix",
            "-s",
            help="Additional recognized suffix/prefix token (repeatable)",
        ),
    ] = None,
) -> None:
    """Decide whether a street-name change is announced."""
    settings = _settings(ctx)
    names = NameConfig(suffixes=[*settings.names.suffixes, *(suffix or [])])
    toolkit = GuidanceToolkit(settings.model_copy(update={"names": names}))

    rules = toolkit.explain_name_change(from_name, to_name)
    print_decision(
        f"Announce '{from_name}' -> '{to_name}'",
        not rules,
        details=[f"suppressed by {rule}" for rule in rules],
    )


@app.command()
def fork(
    ctx: typer.Context,
    first: Annotated[str, typer.Argument(help="First road class, e.g. primary")],
    second: Annotated[str, typer.Argument(help="Second road class, e.g. secondary")],
) -> None:
    """Check whether two road classes can be seen as a fork."""
    first_class = _parse_enum(RoadClass, first)
    second_class = _parse_enum(RoadClass, second)
    toolkit = GuidanceToolkit(_settings(ctx))

    print_decision(
        f"Fork between {first_class.name.lower()} and {second_class.name.lower()}",
        toolkit.can_be_seen_as_fork(first_class, second_class),
        details=[
            f"{first_class.name.lower()} priority {get_priority(first_class)}",
            f"{second_class.name.lower()} priority {get_priority(second_class)}",
        ],
    )


@app.command()
def mirror(
    ctx: typer.Context,
    angle: Annotated[
        float,
        typer.Argument(help="Turn angle in degrees [0, 360)"),
    ],
    modifier: Annotated[str, typer.Argument(help="Direction modifier, e.g. slight-right")],
    turn_type: Annotated[
        str,
        typer.Option("--type", "-t", help="Turn type of the instruction"),
    ] = "turn",
) -> None:
    """Mirror a turn for the opposite traffic-hand convention."""
    if not 0.0 <= angle < 360.0:
        print_error(f"Invalid angle: {angle:g}", details="Expected degrees in [0, 360)")
        raise typer.Exit(code=1)

    instruction = TurnInstruction(
        type=_parse_enum(TurnType, turn_type),
        direction_modifier=_parse_enum(DirectionModifier, modifier),
    )
    road = ConnectedRoad(angle=angle, instruction=instruction)
    mirrored = GuidanceToolkit(_settings(ctx)).mirror(road)

    print_values(
        "Mirrored turn",
        [
            ("angle", f"{road.angle:g} -> {mirrored.angle:g}"),
            (
                "modifier",
                f"{road.instruction.direction_modifier.name.lower()} -> "
                f"{mirrored.instruction.direction_modifier.name.lower()}",
            ),
        ],
    )


@app.command()
def roundabout(
    ctx: typer.Context,
    turn_type: Annotated[str, typer.Argument(help="Turn type, e.g. enter-and-exit-rotary")],
) -> None:
    """Classify a turn type's roundabout membership."""
    instruction = TurnInstruction(type=_parse_enum(TurnType, turn_type))
    role = GuidanceToolkit(_settings(ctx)).classify_roundabout(instruction)

    print_values(
        f"Roundabout role of {instruction.type.name.lower()}",
        [
            ("roundabout", "yes" if role.is_roundabout else "no"),
            ("enters", "yes" if role.enters else "no"),
            ("leaves", "yes" if role.leaves else "no"),
        ],
    )


@app.command("trim-lanes")
def trim_lanes(
    ctx: typer.Context,
    lanes: Annotated[str, typer.Argument(help="Lane string, e.g. '||through|right'")],
    left: Annotated[
        int,
        typer.Option("--left", "-l", help="Placeholder lanes to drop on the left", min=0),
    ] = 0,
    right: Annotated[
        int,
        typer.Option("--right", "-r", help="Placeholder lanes to drop on the right", min=0),
    ] = 0,
) -> None:
    """Trim placeholder lanes from a lane string."""
    trimmed = GuidanceToolkit(_settings(ctx)).trim_lane_string(lanes, left, right)
    print_values("Lane string", [("input", lanes), ("trimmed", trimmed)])


@app.command()
def sample(
    ctx: typer.Context,
    point: Annotated[
        list[str],
        typer.Option(
            "--point",
            "-p",
            help="LON,LAT of the edge's nodes in order; first and last are the edge ends",
        ),
    ],
    reverse: Annotated[
        bool,
        typer.Option("--reverse", help="Walk the edge from its last point"),
    ] = False,
    length: Annotated[
        float | None,
        typer.Option("--length", help="Sampling distance in metres (> 0)"),
    ] = None,
) -> None:
    """Find the representative coordinate of an edge."""
    if len(point) < 2:
        print_error("An edge needs at least two points")
        raise typer.Exit(code=1)

    coordinates = [_parse_point(value) for value in point]
    settings = _settings(ctx)
    if length is not None:
        try:
            sampling = SamplingConfig(desired_segment_length=length)
        except ValidationError:
            print_error(f"Invalid length: {length:g}", details="Expected a positive distance")
            raise typer.Exit(code=1) from None
        settings = settings.model_copy(update={"sampling": sampling})

    last = len(coordinates) - 1
    store = CompressedEdgeContainer({0: range(1, last)})

    try:
        coordinate = GuidanceToolkit(settings).representative_coordinate(
            0, last, 0, reverse, store, coordinates
        )
    except GuidanceToolkitError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_values(
        "Representative coordinate",
        [("lon", f"{coordinate.lon:.7f}"), ("lat", f"{coordinate.lat:.7f}")],
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
