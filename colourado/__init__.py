"""
Colourado

Small library for generating palettes of visually distinct RGB colors
(random, pastel or dark) from a count and a spread setting.
"""

__version__ = "0.1.0"
__author__ = "Colourado Contributors"

__all__ = [
    "Color",
    "ColorPalette",
    "PaletteType",
    "hsv_to_rgb",
    "generate_palette",
    "generate_simple_palette",
]


def __getattr__(name):
    """Lazy import so `import colourado` does not load numpy or matplotlib."""
    if name in ("Color", "hsv_to_rgb"):
        from colourado.core import color
        return getattr(color, name)
    elif name == "PaletteType":
        from colourado.core.styles import PaletteType
        return PaletteType
    elif name in ("ColorPalette", "generate_palette", "generate_simple_palette"):
        from colourado.core import palette
        return getattr(palette, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
