"""Palette generation.

A palette is produced by drawing one starting HSV point from the range
of the selected :class:`PaletteType` and then walking that point with the
type's recurrence, converting each visited point to RGB.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence

import numpy as np

from colourado.core.color import Color, hsv_to_rgb
from colourado.core.styles import (
    SEED_RANGES,
    HSVPoint,
    PaletteType,
    advance,
)


logger = logging.getLogger(__name__)

ADJACENT_DIVERGENCE = 25.0
SPREAD_DIVERGENCE = 80.0
DIVERGENCE_FALLOFF = 2.6

# Fixed hue offset of the simple (legacy) walk
SIMPLE_HUE_OFFSET = 85.0


@dataclass
class ColorPalette:
    """
    Ordered collection of generated colors.

    Can also hold a hand-made list of colors.
    """

    colors: List[Color] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.colors)

    def __iter__(self) -> Iterator[Color]:
        return iter(self.colors)

    def __getitem__(self, index: int) -> Color:
        return self.colors[index]

    def to_array(self) -> np.ndarray:
        """
        Return the palette as a float array.

        Returns:
            Array of shape (n, 3) with one RGB row per color
        """
        if not self.colors:
            return np.empty((0, 3), dtype=float)
        return np.array([c.to_triplet() for c in self.colors], dtype=float)

    def to_hex(self) -> List[str]:
        """Return the palette as a list of '#rrggbb' strings."""
        return [c.to_hex() for c in self.colors]


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")


def seed_hsv(palette_type: PaletteType,
             rng: Optional[np.random.Generator] = None) -> HSVPoint:
    """
    Draw a random starting HSV point for a palette type.

    Args:
        palette_type: Palette type selecting the seed ranges
        rng: Random generator (a new default generator if None)

    Returns:
        HSVPoint drawn uniformly from the type's half-open ranges
    """
    if rng is None:
        rng = np.random.default_rng()
    ranges = SEED_RANGES[palette_type]
    return HSVPoint(
        hue=float(rng.uniform(*ranges.hue)),
        saturation=float(rng.uniform(*ranges.saturation)),
        value=float(rng.uniform(*ranges.value)),
    )


def base_divergence(count: int, adjacent: bool) -> float:
    """Hue step for a palette, shrinking as more colors are requested."""
    base = ADJACENT_DIVERGENCE if adjacent else SPREAD_DIVERGENCE
    return base - count / DIVERGENCE_FALLOFF


def iter_hsv(seed: Sequence[float], palette_type: PaletteType,
             divergence: float, count: int) -> Iterator[HSVPoint]:
    """
    Walk the HSV recurrence from a seed point.

    Yields the working point before each step, so the first item is the
    seed itself and ``count`` items are produced in total.
    """
    point = HSVPoint(*seed)
    for i in range(count):
        yield point
        point = advance(palette_type, point, float(i), divergence)


def generate_palette(count: int,
                     palette_type: PaletteType = PaletteType.RANDOM,
                     adjacent: bool = False,
                     rng: Optional[np.random.Generator] = None,
                     seed: Optional[Sequence[float]] = None) -> ColorPalette:
    """
    Generate a palette of visually distinct colors.

    Args:
        count: Number of colors to generate (0 gives an empty palette)
        palette_type: Color scheme (random, pastel or dark)
        adjacent: True keeps hues close together, False spreads them apart
        rng: Random generator used for the starting point
        seed: Explicit starting (hue, saturation, value); skips the random draw

    Returns:
        ColorPalette with ``count`` colors in generation order
    """
    _check_count(count)
    if not isinstance(palette_type, PaletteType):
        raise TypeError(f"Expected PaletteType, got {type(palette_type).__name__}")

    start = HSVPoint(*seed) if seed is not None else seed_hsv(palette_type, rng)
    divergence = base_divergence(count, adjacent)
    logger.debug("Generating %d %s colors from %s (divergence %.2f)",
                 count, palette_type.value, start, divergence)

    colors = [hsv_to_rgb(*point)
              for point in iter_hsv(start, palette_type, divergence, count)]
    return ColorPalette(colors=colors)


def iter_simple_hsv(seed: Sequence[float], count: int) -> Iterator[HSVPoint]:
    """Walk the simple recurrence: fixed hue offset, value held at its seed."""
    point = HSVPoint(*seed)
    for i in range(count):
        yield point
        point = HSVPoint(
            hue=(point.hue + SIMPLE_HUE_OFFSET + i * 55.0) % 360.0,
            saturation=math.sin(i * 0.5),
            value=point.value,
        )


def generate_simple_palette(count: int,
                            rng: Optional[np.random.Generator] = None,
                            seed: Optional[Sequence[float]] = None) -> ColorPalette:
    """
    Generate a palette with the original fixed-step recurrence.

    Saturation follows ``sin(i * 0.5)`` and can go negative; the converter
    clamps it to 0, which renders those entries as grays.
    """
    _check_count(count)
    start = HSVPoint(*seed) if seed is not None else seed_hsv(PaletteType.RANDOM, rng)
    colors = [hsv_to_rgb(*point) for point in iter_simple_hsv(start, count)]
    return ColorPalette(colors=colors)
