"""Palette types and their HSV stepping functions.

Each :class:`PaletteType` has a seed range for the starting HSV point and
a recurrence that walks the point from one palette entry to the next.
The recurrences take the 0-based iteration index as a float and the base
divergence for the palette; the divergence is floored at
``MIN_DIVERGENCE`` for the hue step only.
"""

import math
from enum import Enum
from typing import Callable, Dict, NamedTuple, Optional, Tuple


MIN_DIVERGENCE = 15.0

Range = Tuple[float, float]


class HSVPoint(NamedTuple):
    """Transient HSV working point: hue in degrees, saturation and value in [0, 1]."""

    hue: float
    saturation: float
    value: float


class SeedRange(NamedTuple):
    """Half-open [low, high) ranges for the initial HSV draw."""

    hue: Range
    saturation: Range
    value: Range


class PaletteType(Enum):
    """Color schemes supported by the palette generator."""

    RANDOM = "random"
    PASTEL = "pastel"
    DARK = "dark"


SEED_RANGES: Dict[PaletteType, SeedRange] = {
    PaletteType.RANDOM: SeedRange((0.0, 360.0), (0.5, 1.0), (0.3, 1.0)),
    PaletteType.PASTEL: SeedRange((0.0, 360.0), (0.1, 0.4), (0.7, 1.0)),
    PaletteType.DARK: SeedRange((0.0, 360.0), (0.5, 1.0), (0.0, 0.4)),
}


def _floor_divergence(divergence: float) -> float:
    return max(divergence, MIN_DIVERGENCE)


def _step_hue(hue: float, divergence: float, jitter: float) -> float:
    return abs(hue + _floor_divergence(divergence) + jitter) % 360.0


def step_dark(point: HSVPoint, iteration: float, divergence: float) -> HSVPoint:
    """Low value, mid saturation."""
    f = abs(math.cos(iteration * 43.0))
    return HSVPoint(
        hue=_step_hue(point.hue, divergence, f),
        saturation=0.32 + abs(math.sin(iteration * 0.75) / 2.0),
        value=0.1 + abs(math.cos(iteration) / 6.0),
    )


def step_pastel(point: HSVPoint, iteration: float, divergence: float) -> HSVPoint:
    """Low saturation, high value."""
    f = abs(math.cos(iteration * 25.0))
    return HSVPoint(
        hue=_step_hue(point.hue, divergence, f),
        saturation=abs(math.cos(iteration * 0.35) / 5.0),
        value=0.5 + abs(math.cos(iteration) / 2.0),
    )


def step_random(point: HSVPoint, iteration: float, divergence: float) -> HSVPoint:
    """Saturation floored at 0.4, value kept within [0.2, 0.85]."""
    f = abs(math.tan(iteration * 55.0))
    saturation = abs(math.sin(iteration * 0.35))
    value = abs(math.cos((6.33 * iteration) * 0.5))

    if saturation < 0.4:
        saturation = 0.4

    if value < 0.2:
        value = 0.2
    elif value > 0.85:
        value = 0.85

    return HSVPoint(
        hue=_step_hue(point.hue, divergence, f),
        saturation=saturation,
        value=value,
    )


STEP_FUNCTIONS: Dict[PaletteType, Callable[[HSVPoint, float, float], HSVPoint]] = {
    PaletteType.RANDOM: step_random,
    PaletteType.PASTEL: step_pastel,
    PaletteType.DARK: step_dark,
}


def advance(palette_type: PaletteType, point: HSVPoint,
            iteration: float, divergence: float) -> HSVPoint:
    """Advance an HSV point one step using the recurrence for ``palette_type``."""
    if not isinstance(palette_type, PaletteType):
        raise TypeError(f"Expected PaletteType, got {type(palette_type).__name__}")
    return STEP_FUNCTIONS[palette_type](point, float(iteration), divergence)


def parse_palette_type(name: Optional[str]) -> PaletteType:
    """Parse a palette type name, falling back to RANDOM for unknown names."""
    if name is None:
        return PaletteType.RANDOM
    try:
        return PaletteType(name.strip().lower())
    except ValueError:
        return PaletteType.RANDOM


def parse_adjacent(token: Optional[str]) -> bool:
    """Parse a layout token: 'adjacent' gives True, anything else means spread."""
    if token is None:
        return False
    return token.strip().lower() == "adjacent"
