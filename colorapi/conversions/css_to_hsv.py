from typing import Optional

from ..types.defaults import HSL_ACHROMATIC_EPSILON

Hue = Optional[float]

## HSL <-> HSV

def hsl_to_hsv(h: Hue, s: float, l: float) -> tuple[Hue, float, float]:
    """
    Convert HSL to HSV. Saturations and lightness/value are in [0, 1].
    The hue passes through untouched unless the result is achromatic.
    """
    v = l + s * min(l, 1 - l)
    sv = 0.0 if v == 0 else 2 * (1 - l / v)
    if abs(sv) <= HSL_ACHROMATIC_EPSILON:
        h = None
    return h, sv, v

def hsv_to_hsl(h: Hue, s: float, v: float) -> tuple[Hue, float, float]:
    l = v * (1 - s / 2)
    denominator = min(l, 1 - l)
    sl = 0.0 if denominator == 0 else (v - l) / denominator
    return h, sl, l

## HSV <-> HWB

def hsv_to_hwb(h: Hue, s: float, v: float) -> tuple[Hue, float, float]:
    w = (1 - s) * v
    b = 1 - v
    if w + b >= 1 - HSL_ACHROMATIC_EPSILON:
        h = None
    return h, w, b

def hwb_to_hsv(h: Hue, w: float, b: float) -> tuple[Hue, float, float]:
    """
    Convert HWB to HSV. Whiteness plus blackness of 1 or more is a gray,
    normalized so the two sum to 1.
    """
    total = w + b
    if total >= 1:
        v = w / total
        return h, 0.0, v
    v = 1 - b
    s = 0.0 if v == 0 else 1 - w / v
    return h, s, v
