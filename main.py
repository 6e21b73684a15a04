#!/usr/bin/env python3
"""
Main CLI for fontmatch
======================

This CLI lists installed font families and selects fonts by family
preferences, style properties or PostScript name.
"""

import logging
import sys
from pathlib import Path

import click

# Setup logging
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

try:
    from fontmatch.core.config import BACKENDS, AppConfig
    from fontmatch.core.exceptions import FontMatchError, FontNotFoundError
    from fontmatch.core.models import FamilyName, PathHandle, Properties, Style
    from fontmatch.matching import FontSelector
    from fontmatch.sources import create_source
    from fontmatch.sources.loader import describe_handle
except ImportError as e:
    logger.exception(f"Import failed: {e}")
    logger.exception("Make sure you have all dependencies installed (pip install -e .)")
    sys.exit(1)


def _build_selector(config: AppConfig) -> FontSelector:
    source = create_source(config.source)
    return FontSelector(source, generic_families=config.generic_families)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration YAML file",
)
@click.option("--backend", type=click.Choice(BACKENDS), help="Font source backend")
@click.option(
    "--font-dir",
    "font_dirs",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Font directory to scan (filesystem backend, repeatable)",
)
@click.pass_context
def cli(ctx, verbose, config, backend, font_dirs):
    """fontmatch CLI."""
    try:
        app_config = AppConfig.from_yaml(config) if config else AppConfig.load_from_env()
    except FontMatchError as e:
        logger.error(f"Configuration failed: {e}")
        sys.exit(1)

    overrides = {}
    if backend:
        overrides["backend"] = backend
    if font_dirs:
        overrides["font_directories"] = list(font_dirs)
        overrides.setdefault("backend", "filesystem")
    if overrides:
        app_config.source = app_config.source.model_copy(update=overrides)

    logging.getLogger().setLevel(logging.DEBUG if verbose else app_config.log_level)
    ctx.obj = app_config


@cli.command()
@click.pass_obj
def families(config):
    """List installed font families."""
    try:
        selector = _build_selector(config)
        for family_name in sorted(selector.all_families(), key=str.casefold):
            click.echo(family_name)
    except FontMatchError as e:
        logger.error(f"Listing families failed: {e}")
        sys.exit(1)


@cli.command()
@click.argument("family_names", nargs=-1, required=True)
@click.option("--weight", "-w", type=click.FloatRange(1, 1000), default=400.0, help="CSS weight")
@click.option("--stretch", "-s", type=click.FloatRange(0.5, 2.0), default=1.0, help="CSS stretch")
@click.option(
    "--style",
    type=click.Choice([style.value for style in Style]),
    default=Style.NORMAL.value,
    help="Font style",
)
@click.pass_obj
def match(config, family_names, weight, stretch, style):
    """Select the best font for FAMILY_NAMES, most preferred first."""
    preferences = [FamilyName.parse(name) for name in family_names]
    properties = Properties(weight=weight, stretch=stretch, style=Style(style))

    try:
        selector = _build_selector(config)
        handle = selector.select_best_match(preferences, properties)
        description = selector.describe(handle)
    except FontNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except FontMatchError as e:
        logger.error(f"Font selection failed: {e}")
        sys.exit(1)

    click.echo(f"{handle}\t{description}")


@cli.command()
@click.argument("postscript_name")
@click.pass_obj
def postscript(config, postscript_name):
    """Find the font with POSTSCRIPT_NAME."""
    try:
        selector = _build_selector(config)
        handle = selector.select_by_postscript_name(postscript_name)
    except FontNotFoundError as e:
        logger.error(str(e))
        sys.exit(1)
    except FontMatchError as e:
        logger.error(f"Font lookup failed: {e}")
        sys.exit(1)

    click.echo(str(handle))


@cli.command()
@click.argument("font_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--index", "-i", type=click.IntRange(min=0), default=0, help="Face index")
def describe(font_path, index):
    """Describe one face of a font file."""
    try:
        description = describe_handle(PathHandle(font_path, index))
    except FontMatchError as e:
        logger.error(f"Describe failed: {e}")
        sys.exit(1)

    click.echo(f"family: {description.family_name}")
    click.echo(f"postscript: {description.postscript_name or '-'}")
    click.echo(f"weight: {description.properties.weight:g}")
    click.echo(f"stretch: {description.properties.stretch:g}")
    click.echo(f"style: {description.properties.style.value}")


if __name__ == "__main__":
    cli()
