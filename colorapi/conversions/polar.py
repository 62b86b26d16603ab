import math
from typing import Optional

from .css_to_hsl import normalize_hue


def rect_to_polar(l: float, a: float, b: float, achromatic: float) -> tuple[float, float, Optional[float]]:
    """
    Lab-like rectangular coordinates -> (lightness, chroma, hue).

    Args:
        achromatic: chroma below which the hue is powerless and returned as None
    """
    c = math.hypot(a, b)
    if c < achromatic:
        return l, c, None
    h = math.degrees(math.atan2(b, a)) % 360
    return l, c, h


def polar_to_rect(l: float, c: float, h: Optional[float]) -> tuple[float, float, float]:
    """(lightness, chroma, hue) -> rectangular. Negative chroma is clamped to 0."""
    c = max(c, 0.0)
    h = math.radians(normalize_hue(h))
    return l, c * math.cos(h), c * math.sin(h)
