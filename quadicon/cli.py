# this_file: quadicon/cli.py
"""
quadicon command line interface

Generate quadrant icons for short app names and run the example-app setup.
"""

import random
import sys
from pathlib import Path
from typing import Optional

import click

from . import __version__, create_glyph_source, generate_icon_svg, list_available
from .base import BaseGlyphSource
from .colors import PALETTES
from .constants import HELPER_DIR
from .naming import AppNames, ValidationError, parse_names
from .project import ensure_capacitor_assets, run_capacitor_assets

USAGE_HINT = (
    "Usage: quadicon generate <SHORT_NAME> <FULL_NAME>\n"
    "       SHORT_NAME: 1-3 characters (letters or digits)\n"
    "       FULL_NAME: the descriptive name (quotes required when containing spaces)"
)


def make_logger(quiet: bool):
    """Progress lines go to stderr unless quiet."""
    if quiet:
        return lambda message: None
    return lambda message: click.echo(message, err=True)


def source_options(func):
    """Options shared by commands that need a glyph source."""
    options = [
        click.option("--backend", default="auto", type=click.Choice(["auto", "coretext", "harfbuzz"]),
                     help="Glyph source: auto, coretext (macOS), harfbuzz"),
        click.option("-f", "--font", help="Font name (coretext) or font file path (harfbuzz)"),
        click.option("--helper-dir", type=click.Path(file_okay=False),
                     help=f"Directory for helper artefacts (default: ./{HELPER_DIR})"),
        click.option("--seed", type=int, help="Seed for palette selection"),
        click.option("-q", "--quiet", is_flag=True, help="Silent mode (no progress info)"),
        click.option("--verbose", is_flag=True, help="Verbose output"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_icon(
    names: AppNames,
    output_path: Path,
    source: BaseGlyphSource,
    seed: Optional[int],
    log,
    verbose: bool,
):
    rng = random.Random(seed) if seed is not None else None
    result = generate_icon_svg(names.short_name, names.full_name, output_path, source, rng=rng)
    log(f"[INFO] Generated icon at {result.output_path} using palette {', '.join(result.palette)}")
    if verbose:
        layout = result.layout
        log(
            f"[INFO] Scale {layout.horizontal_scale:.4f}x{layout.vertical_scale:.4f}, "
            f"spacing {layout.spacing:.3f}, width {layout.total_width:.3f}"
        )
        log(f"[INFO] Glyph source: {source.summary()}")
    return result


def fail(error: Exception):
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, ValidationError):
        click.echo(USAGE_HINT, err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="quadicon")
def cli():
    """quadicon - four-colour app icons from short names"""
    pass


@cli.command(name="info")
@click.option("--backends", is_flag=True, help="List available glyph sources")
@click.option("--palettes", is_flag=True, help="List the palette catalogue")
def info(backends: bool, palettes: bool):
    """Display available glyph sources and palettes"""
    show_all = not (backends or palettes)

    click.echo(f"quadicon v{__version__}")
    click.echo()

    if show_all or backends:
        click.echo("Glyph sources:")
        available = list_available()
        if available:
            for name in available:
                click.echo(f"  {name}")
        else:
            click.echo("  (none available)")
        if show_all:
            click.echo()

    if show_all or palettes:
        click.echo("Palettes (top-left, top-right, bottom-left, bottom-right):")
        for index, palette in enumerate(PALETTES):
            click.echo(f"  {index:2d}  {' '.join(palette)}")


@cli.command(name="generate")
@click.argument("names", nargs=-1)
@click.option("-o", "--output-file", default="logo.svg", type=click.Path(dir_okay=False),
              help="Output SVG path")
@source_options
def generate(
    names: tuple,
    output_file: str,
    backend: str,
    font: Optional[str],
    helper_dir: Optional[str],
    seed: Optional[int],
    quiet: bool,
    verbose: bool,
):
    """Generate an icon SVG for SHORT_NAME FULL_NAME..."""
    log = make_logger(quiet)
    try:
        app_names = parse_names(names)
        log(f"[INFO] Short name: {app_names.short_name}")
        log(f"[INFO] Full name: {app_names.full_name}")

        source = create_glyph_source(backend, font, helper_dir)
        if verbose:
            log(f"[INFO] Using glyph source: {source.engine}")
        build_icon(app_names, Path(output_file), source, seed, log, verbose)
    except Exception as e:
        fail(e)


@cli.command(name="setup")
@click.argument("names", nargs=-1)
@click.option("-p", "--project-dir", default=".", type=click.Path(exists=True, file_okay=False),
              help="Example app directory (holds package.json)")
@click.option("--skip-install", is_flag=True, help="Do not check/install @capacitor/assets")
@click.option("--skip-assets", is_flag=True, help="Do not run @capacitor/assets generate")
@source_options
def setup(
    names: tuple,
    project_dir: str,
    skip_install: bool,
    skip_assets: bool,
    backend: str,
    font: Optional[str],
    helper_dir: Optional[str],
    seed: Optional[int],
    quiet: bool,
    verbose: bool,
):
    """Set up the example app: icon, then platform assets"""
    log = make_logger(quiet)
    try:
        app_names = parse_names(names)
        log(f"[INFO] Short name: {app_names.short_name}")
        log(f"[INFO] Full name: {app_names.full_name}")

        project = Path(project_dir).resolve()
        log(f"[INFO] Project directory resolved to {project}")

        if not skip_install:
            ensure_capacitor_assets(project, log)

        log(f"[INFO] App id: {app_names.app_id}")
        log(f"[INFO] Display name: {app_names.display_name}")

        source = create_glyph_source(backend, font, helper_dir or project / HELPER_DIR)
        build_icon(app_names, project / "assets" / "logo.svg", source, seed, log, verbose)

        if not skip_assets:
            run_capacitor_assets(project, log)

        log("[INFO] Setup completed successfully.")
    except Exception as e:
        fail(e)


def main():
    """Main CLI entry point"""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nInterrupted", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
