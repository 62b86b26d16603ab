import math
from typing import Optional

from boundednumbers.functions import cyclic_wrap_float

from ..types.defaults import HSL_ACHROMATIC_EPSILON, HUE_360


def normalize_hue(h: Optional[float]) -> float:
    """Normalize hue to [0, 360) range; an absent hue counts as 0."""
    if h is None:
        return 0.0
    h = float(cyclic_wrap_float(h, 0, HUE_360))
    # wrap may land exactly on the upper bound
    return 0.0 if h >= HUE_360 else h

## HSL to RGB conversions

def css_hsl_to_rgb(h: Optional[float], s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB using the CSS Color 4 algorithm.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue in degrees, any value (wrapped to [0, 360))
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1] for in-gamut input
    """
    h = normalize_hue(h)
    s = s if s is not None else 0
    l = l if l is not None else 0

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = m1, m2, 2 * l - m1
    elif hue_section == 1:
        r, g, b = m2, m1, 2 * l - m1
    elif hue_section == 2:
        r, g, b = 2 * l - m1, m1, m2
    elif hue_section == 3:
        r, g, b = 2 * l - m1, m2, m1
    elif hue_section == 4:
        r, g, b = m2, 2 * l - m1, m1
    elif hue_section == 5:
        r, g, b = m1, 2 * l - m1, m2
    else:
        r, g, b = 2 * l - m1, 2 * l - m1, 2 * l - m1

    return r, g, b

## RGB to HSL conversions

def css_rgb_to_hsl(r: float, g: float, b: float) -> tuple[Optional[float], float, float]:
    """
    Convert RGB to HSL using the CSS Color 4 algorithm.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        (hue [0,360) or None when achromatic, saturation, lightness)

    Out-of-gamut input can produce a negative saturation; it is folded back
    by rotating the hue half a turn, as CSS does.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta <= HSL_ACHROMATIC_EPSILON:
        return None, 0.0, lightness

    denominator = 1 - abs(2 * lightness - 1)
    saturation = delta / denominator if denominator != 0 else 0.0

    if max_c == r:
        hue = 60 * ((g - b) / delta) + 360
    elif max_c == g:
        hue = 60 * ((b - r) / delta) + 120
    else:
        hue = 60 * ((r - g) / delta) + 240

    if saturation < 0:
        hue += 180
        saturation = abs(saturation)

    return hue % 360, saturation, lightness
