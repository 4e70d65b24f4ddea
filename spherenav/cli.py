"""Command line front end for spherenav.

Angles are given in decimal degrees; distances default to nautical miles.

Usage:
    spherenav bearing 39.778889 -104.9825 43.778889 -102.9825
    spherenav project 52.518611 13.408056 180 8.1
    spherenav bounds 0 179 120
    spherenav intersect 39.778889 -104.9825 0 43.778889 -102.9825 0
    spherenav small-circle 90 0 5 85 10 0 --policy closest
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from spherenav import __version__
from spherenav.geo import (
    Coordinates,
    bearing_distance,
    bearing_to,
    closest_small_circle_intersection,
    distance_bounds,
    distance_to,
    first_small_circle_intersection,
    place_bearing_intersection,
    small_circle_great_circle_intersection,
)
from spherenav.unit import Degree, Kilometer, Meter, NauticalMile

CONSOLE = Console()

UNITS = {"nm": NauticalMile, "km": Kilometer, "m": Meter}

EXIT_NO_INTERSECTION = 1

logger = logging.getLogger(__name__)


def _point_table(title: str, rows: Sequence[tuple[str, Coordinates]]) -> Table:
    table = Table(title=title)
    table.add_column("Point", style="bold")
    table.add_column("Latitude (°)", justify="right")
    table.add_column("Longitude (°)", justify="right")
    for name, point in rows:
        lat, long = point.to_deg()
        table.add_row(name, f"{lat:.6f}", f"{long:.6f}")
    return table


def _cmd_bearing(args: argparse.Namespace, console: Console) -> int:
    origin = Coordinates.new(args.lat1, args.long1)
    destination = Coordinates.new(args.lat2, args.long2)
    unit = UNITS[args.unit]

    table = Table.grid(padding=(0, 2))
    table.add_row("[b]Initial bearing[/b]:", f"{bearing_to(origin, destination).to(Degree):.6f} °")
    table.add_row("[b]Distance[/b]:", f"{distance_to(origin, destination).to(unit):.6f} {unit.SYMBOL}")
    console.print(table)
    return 0


def _cmd_project(args: argparse.Namespace, console: Console) -> int:
    origin = Coordinates.new(args.lat, args.long)
    distance = UNITS[args.unit](args.distance)
    destination = bearing_distance(origin, Degree(args.bearing), distance)
    console.print(_point_table("Projection", [("origin", origin), ("destination", destination)]))
    return 0


def _cmd_bounds(args: argparse.Namespace, console: Console) -> int:
    south_west, north_east = distance_bounds(
        Coordinates.new(args.lat, args.long), UNITS[args.unit](args.distance)
    )
    console.print(_point_table("Bounds", [("south-west", south_west), ("north-east", north_east)]))
    if south_west.long == north_east.long:
        console.print("[yellow]Circle contains a pole: box spans all longitudes[/yellow]")
    elif south_west.long > north_east.long:
        console.print("[yellow]Box crosses the antimeridian[/yellow]")
    return 0


def _cmd_intersect(args: argparse.Namespace, console: Console) -> int:
    ahead, behind = place_bearing_intersection(
        Coordinates.new(args.lat1, args.long1),
        Degree(args.bearing1),
        Coordinates.new(args.lat2, args.long2),
        Degree(args.bearing2),
    )
    console.print(_point_table("Great circle intersection", [("ahead", ahead), ("behind", behind)]))
    return 0


def _cmd_small_circle(args: argparse.Namespace, console: Console) -> int:
    center = Coordinates.new(args.center_lat, args.center_long)
    radius = UNITS[args.unit](args.radius)
    reference = Coordinates.new(args.lat, args.long)
    bearing = Degree(args.bearing)

    if args.policy == "first":
        point = first_small_circle_intersection(center, radius, reference, bearing)
        rows = None if point is None else [("first", point)]
    elif args.policy == "closest":
        point = closest_small_circle_intersection(center, radius, reference, bearing)
        rows = None if point is None else [("closest", point)]
    else:
        intercepts = small_circle_great_circle_intersection(center, radius, reference, bearing)
        rows = None if intercepts is None else [("1", intercepts[0]), ("2", intercepts[1])]

    if rows is None:
        console.print("[red]No intersection[/red]: the great circle misses the small circle")
        return EXIT_NO_INTERSECTION

    console.print(_point_table("Small circle intersection", rows))
    return 0


def _add_unit_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--unit",
        choices=sorted(UNITS),
        default="nm",
        help="distance unit (default: nm)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spherenav",
        description="Navigation geometry on a spherical Earth",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("bearing", help="initial bearing and distance between two points")
    for name in ("lat1", "long1", "lat2", "long2"):
        p.add_argument(name, type=float)
    _add_unit_option(p)
    p.set_defaults(func=_cmd_bearing)

    p = sub.add_parser("project", help="point reached along a bearing")
    for name in ("lat", "long", "bearing", "distance"):
        p.add_argument(name, type=float)
    _add_unit_option(p)
    p.set_defaults(func=_cmd_project)

    p = sub.add_parser("bounds", help="lat/long box around a radius")
    for name in ("lat", "long", "distance"):
        p.add_argument(name, type=float)
    _add_unit_option(p)
    p.set_defaults(func=_cmd_bounds)

    p = sub.add_parser("intersect", help="crossing of two great circles")
    for name in ("lat1", "long1", "bearing1", "lat2", "long2", "bearing2"):
        p.add_argument(name, type=float)
    p.set_defaults(func=_cmd_intersect)

    p = sub.add_parser("small-circle", help="crossings of a small circle and a great circle")
    for name in ("center_lat", "center_long", "radius", "lat", "long", "bearing"):
        p.add_argument(name, type=float)
    _add_unit_option(p)
    p.add_argument(
        "--policy",
        choices=["both", "first", "closest"],
        default="both",
        help="which intersection(s) to report (default: both)",
    )
    p.set_defaults(func=_cmd_small_circle)

    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    console = console or CONSOLE
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
        force=True,
    )
    logger.debug("running %s", args.command)

    return args.func(args, console)


if __name__ == "__main__":
    raise SystemExit(main())
