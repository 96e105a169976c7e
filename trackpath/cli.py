"""
CLI interface for trackpath.

Usage:
    trackpath info route.gpx
    trackpath convert route.gpx --max-width 400 --format json
"""

import logging
import sys
from pathlib import Path

import click

from trackpath.config import settings
from trackpath.shared.errors import TrackPathError
from trackpath.shared.formatters import format_distance, format_duration, format_elevation
from trackpath.features.track import GPXTrackParser
from trackpath.features.path import ConversionOptions, TrackPathService

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def _load_track(gpx_file: Path):
    try:
        return GPXTrackParser.parse_file(gpx_file)
    except TrackPathError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override TRACKPATH_LOG_LEVEL"
)
def cli(log_level):
    """Convert GPS tracks into planar paths."""
    _setup_logging(log_level or settings.log_level)


@cli.command()
@click.argument("gpx_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def info(gpx_file: Path):
    """Print summary metrics and bounds of a GPX track."""
    track = _load_track(gpx_file)
    metrics = track.metrics
    bounds = track.bounds

    click.echo(f"Name:      {track.name}")
    click.echo(f"Points:    {len(track.points)}")
    click.echo(f"Distance:  {format_distance(metrics.distance_meters)}")
    click.echo(f"Duration:  {format_duration(metrics.duration_millis)}")
    click.echo(f"Elevation: {format_elevation(metrics.elevation_gain_meters)}")
    click.echo(
        f"Bounds:    {bounds.south:.4f}..{bounds.north:.4f} N, "
        f"{bounds.west:.4f}..{bounds.east:.4f} E"
    )


@cli.command()
@click.argument("gpx_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--max-width", default=None, type=int, help="Max canvas width in px")
@click.option("--max-height", default=None, type=int, help="Max canvas height in px")
@click.option("--padding", default=None, type=float, help="Padding fraction of the bounds")
@click.option("--tolerance", default=None, type=float, help="Simplification tolerance (px)")
@click.option("--no-simplify", is_flag=True, help="Emit every projected point")
@click.option(
    "--format", "output_format",
    default="path",
    type=click.Choice(["path", "json"]),
    help="Output: path string or full JSON result"
)
def convert(gpx_file: Path, max_width, max_height, padding, tolerance, no_simplify, output_format):
    """Convert a GPX track into a path description."""
    track = _load_track(gpx_file)

    overrides = {
        "max_width": max_width,
        "max_height": max_height,
        "padding_fraction": padding,
        "simplify_tolerance": tolerance,
    }
    options = ConversionOptions(**{k: v for k, v in overrides.items() if v is not None})
    if no_simplify:
        options = options.model_copy(update={"simplify": False})

    try:
        result = TrackPathService.convert(track, options)
    except TrackPathError as e:
        raise click.ClickException(str(e)) from e

    if output_format == "json":
        click.echo(result.model_dump_json(indent=2))
    else:
        click.echo(result.svg_path)


if __name__ == "__main__":
    cli()
