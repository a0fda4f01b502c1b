"""CLI for previewing generated palettes in the terminal."""

import click
import numpy as np
from pathlib import Path
from typing import Optional

from colourado.config import OUTPUT_FORMATS, load_config
from colourado.core.logging_utils import get_logger
from colourado.core.palette import generate_palette
from colourado.core.styles import parse_adjacent, parse_palette_type


SWATCH_WIDTH = 6
DEFAULT_PER_ROW = 10


def _parse_count(token: Optional[str], default: int) -> int:
    """Parse the count argument; anything that is not an integer gives ``default``."""
    if token is None:
        return default
    try:
        return int(token)
    except ValueError:
        return default


def _config_per_row(value, logger) -> int:
    """Validate the configured row width, falling back to the default."""
    try:
        per_row = int(value)
    except (TypeError, ValueError):
        per_row = 0
    if per_row < 1:
        logger.warning(f"Invalid preview.per_row {value!r}, using {DEFAULT_PER_ROW}")
        return DEFAULT_PER_ROW
    return per_row


def format_color(color, output_format: str) -> str:
    """Render a single color for terminal output."""
    if output_format == 'hex':
        return color.to_hex()
    if output_format == 'rgb':
        return "{:.4f} {:.4f} {:.4f}".format(*color.to_triplet())
    r, g, b = (int(round(c * 255)) for c in color.to_triplet())
    return click.style(" " * SWATCH_WIDTH, bg=(r, g, b))


def render_rows(palette, output_format: str, per_row: int):
    """Yield output lines, wrapping swatches to a new row every ``per_row`` colors."""
    cells = [format_color(c, output_format) for c in palette]
    if output_format != 'swatch':
        yield from cells
        return
    for start in range(0, len(cells), per_row):
        yield " ".join(cells[start:start + per_row])


@click.command()
@click.argument('count', required=False)
@click.argument('palette_type', metavar='[TYPE]', required=False)
@click.argument('layout', required=False)
@click.option('--config', type=click.Path(exists=True, path_type=Path),
              help='Path to config file')
@click.option('--format', '-f', 'output_format', type=click.Choice(OUTPUT_FORMATS),
              default=None, help='Output format (default from config: swatch)')
@click.option('--per-row', type=click.IntRange(min=1), default=None,
              help='Swatches per row before wrapping')
@click.option('--seed', type=click.IntRange(min=0), default=None,
              help='Seed for the random starting color (reproducible output)')
@click.option('--quiet', '-q', is_flag=True, help='Suppress status messages')
def main(count: Optional[str], palette_type: Optional[str], layout: Optional[str],
         config: Optional[Path], output_format: Optional[str],
         per_row: Optional[int], seed: Optional[int], quiet: bool):
    """
    Generate a color palette and print it.

    COUNT is the number of colors (falls back to the configured count,
    4 by default, if it is not a number). TYPE is one of random, pastel
    or dark; LAYOUT is adjacent or spread. Unknown TYPE or LAYOUT values
    fall back to random and spread.

    Example: colourado-preview 12 pastel adjacent
    """
    cfg = load_config(config)

    logger = get_logger(verbose=not quiet)
    if config is not None:
        logger.info(f"Using config file: {config}")

    num_colors = _parse_count(count, _parse_count(str(cfg.get('palette.count', 4)), 4))
    if num_colors < 0:
        raise click.BadParameter(f"must be non-negative, got {num_colors}",
                                 param_hint='COUNT')

    kind = parse_palette_type(palette_type or str(cfg.get('palette.type', 'random')))
    if layout is None:
        layout = cfg.get('palette.adjacent', False)
    adjacent = parse_adjacent(layout) if isinstance(layout, str) else bool(layout)

    output_format = output_format or cfg.get('preview.format', 'swatch')
    if output_format not in OUTPUT_FORMATS:
        logger.warning(f"Unknown output format {output_format!r}, using swatch")
        output_format = 'swatch'
    if per_row is None:
        per_row = _config_per_row(cfg.get('preview.per_row', DEFAULT_PER_ROW), logger)

    palette = generate_palette(num_colors, kind, adjacent, rng=np.random.default_rng(seed))

    logger.header(f"{kind.value} palette, {num_colors} colors "
                  f"({'adjacent' if adjacent else 'spread'})")
    for line in render_rows(palette, output_format, per_row):
        click.echo(line)
    logger.success(f"Generated {len(palette)} colors")


if __name__ == '__main__':
    main()
