"""RGB color value type and HSV to RGB conversion."""

from dataclasses import dataclass
from typing import Tuple

from matplotlib.colors import to_hex


RGB = Tuple[float, float, float]

# (r', g', b') layout per 60 degree hue sector, as indices into (chroma, x, 0)
_SECTORS = (
    (0, 1, 2),
    (1, 0, 2),
    (2, 0, 1),
    (2, 1, 0),
    (1, 2, 0),
    (0, 2, 1),
)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def normalize_hue(hue: float) -> float:
    """Wrap a hue angle into [0, 360)."""
    wrapped = hue % 360.0
    # Tiny negative angles round up to exactly 360.0
    if wrapped >= 360.0:
        return 0.0
    return wrapped


@dataclass(frozen=True)
class Color:
    """An RGB color with each channel in [0.0, 1.0]."""

    red: float
    green: float
    blue: float

    def to_triplet(self) -> RGB:
        """Return the channels as an (r, g, b) tuple."""
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        """Return the color as a '#rrggbb' string."""
        return to_hex(self.to_triplet())

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float) -> "Color":
        """Create a Color from HSV coordinates (see :func:`hsv_to_rgb`)."""
        return hsv_to_rgb(hue, saturation, value)


def hsv_to_rgb(hue: float, saturation: float, value: float) -> Color:
    """
    Convert an HSV point to an RGB Color.

    Hue is wrapped into [0, 360) and saturation/value are clamped into
    [0, 1] first, so every channel of the result lies in [0, 1].

    Args:
        hue: Hue angle in degrees
        saturation: Saturation in [0, 1]
        value: Value (brightness) in [0, 1]

    Returns:
        Color with red, green and blue channels in [0, 1]
    """
    saturation = _clamp01(saturation)
    value = _clamp01(value)

    chroma = value * saturation
    h2 = normalize_hue(hue) / 60.0
    x = chroma * (1.0 - abs((h2 % 2.0) - 1.0))

    # Non-finite hues fall outside every sector
    if 0.0 <= h2 < 6.0:
        components = (chroma, x, 0.0)
        r1, g1, b1 = (components[idx] for idx in _SECTORS[int(h2)])
    else:
        r1 = g1 = b1 = 0.0

    m = value - chroma
    return Color(
        red=_clamp01(r1 + m),
        green=_clamp01(g1 + m),
        blue=_clamp01(b1 + m),
    )
