"""Core palette generation functionality."""

from colourado.core.color import Color, hsv_to_rgb, normalize_hue
from colourado.core.styles import PaletteType, HSVPoint, advance
from colourado.core.palette import (
    ColorPalette,
    base_divergence,
    generate_palette,
    generate_simple_palette,
    iter_hsv,
    seed_hsv,
)

__all__ = [
    "Color",
    "hsv_to_rgb",
    "normalize_hue",
    "PaletteType",
    "HSVPoint",
    "advance",
    "ColorPalette",
    "base_divergence",
    "generate_palette",
    "generate_simple_palette",
    "iter_hsv",
    "seed_hsv",
]
