"""
Built-in color spaces.

Every space but ``xyz-d65`` names a base space plus a pair of functions to
and from it; ``colorapi.conversions.convert`` chains them. Percent-valued
coordinates (HSL/HSV/HWB saturation, lightness, ...) are stored on a 0-100
scale, as CSS writes them, and rescaled to 0-1 around the conversion math.
"""
from ..conversions.css_to_hsl import css_hsl_to_rgb, css_rgb_to_hsl
from ..conversions.css_to_hsv import hsl_to_hsv, hsv_to_hsl, hsv_to_hwb, hwb_to_hsv
from ..conversions.lab import lab_to_xyz_d50, xyz_d50_to_lab
from ..conversions.oklab import oklab_to_xyz, xyz_to_oklab
from ..conversions.polar import polar_to_rect, rect_to_polar
from ..conversions.rgb_spaces import (
    a98_to_xyz,
    linear_srgb_to_xyz,
    linear_to_srgb,
    p3_to_xyz,
    prophoto_to_xyz_d50,
    rec2020_to_xyz,
    srgb_to_linear,
    xyz_d50_to_d65,
    xyz_d50_to_prophoto,
    xyz_d65_to_d50,
    xyz_to_a98,
    xyz_to_linear_srgb,
    xyz_to_p3,
    xyz_to_rec2020,
)
from ..types.defaults import LCH_ACHROMATIC_CHROMA, OKLCH_ACHROMATIC_CHROMA
from .space import ColorSpace, Coordinate

define = ColorSpace._define


def _percent_scaled(convert):
    """Wrap an (h, a, b) -> (h, a, b) function working on 0-1 for 0-100 storage."""
    def wrapped(h, a, b):
        h, a, b = convert(h, a / 100, b / 100)
        return h, a * 100, b * 100
    return wrapped


def _hsl_to_srgb(h, s, l):
    return css_hsl_to_rgb(h, s / 100, l / 100)


def _srgb_to_hsl(r, g, b):
    h, s, l = css_rgb_to_hsl(r, g, b)
    return h, s * 100, l * 100


## Coordinates

_XYZ = (
    Coordinate("x", "X", (0.0, 1.0), percent_reference=1.0),
    Coordinate("y", "Y", (0.0, 1.0), percent_reference=1.0),
    Coordinate("z", "Z", (0.0, 1.0), percent_reference=1.0),
)

_RGB = (
    Coordinate("r", "red", (0.0, 1.0), percent_reference=1.0),
    Coordinate("g", "green", (0.0, 1.0), percent_reference=1.0),
    Coordinate("b", "blue", (0.0, 1.0), percent_reference=1.0),
)

_HUE = Coordinate("h", "hue", angle=True)


def _percent(id: str, name: str) -> Coordinate:
    return Coordinate(id, name, (0.0, 100.0), percent_reference=100.0, serialize_percent=True)


## Connection spaces

XYZ_D65 = define(
    "xyz-d65", "XYZ D65", _XYZ,
    css_id="xyz-d65", aliases=("xyz",),
)

XYZ_D50 = define(
    "xyz-d50", "XYZ D50", _XYZ,
    base="xyz-d65", to_base=xyz_d50_to_d65, from_base=xyz_d65_to_d50,
    white="D50", css_id="xyz-d50",
)

## RGB spaces

SRGB_LINEAR = define(
    "srgb-linear", "Linear sRGB", _RGB,
    base="xyz-d65", to_base=linear_srgb_to_xyz, from_base=xyz_to_linear_srgb,
    css_id="srgb-linear",
)

SRGB = define(
    "srgb", "sRGB", _RGB,
    base="srgb-linear", to_base=srgb_to_linear, from_base=linear_to_srgb,
    css_id="srgb", css_function="rgb",
)

DISPLAY_P3 = define(
    "display-p3", "Display P3", _RGB,
    base="xyz-d65", to_base=p3_to_xyz, from_base=xyz_to_p3,
    css_id="display-p3", aliases=("p3",),
)

A98_RGB = define(
    "a98-rgb", "Adobe 98 RGB compatible", _RGB,
    base="xyz-d65", to_base=a98_to_xyz, from_base=xyz_to_a98,
    css_id="a98-rgb",
)

PROPHOTO_RGB = define(
    "prophoto-rgb", "ProPhoto RGB", _RGB,
    base="xyz-d50", to_base=prophoto_to_xyz_d50, from_base=xyz_d50_to_prophoto,
    white="D50", css_id="prophoto-rgb",
)

REC2020 = define(
    "rec2020", "ITU-R BT.2020", _RGB,
    base="xyz-d65", to_base=rec2020_to_xyz, from_base=xyz_to_rec2020,
    css_id="rec2020",
)

## Cylindrical sRGB

HSL = define(
    "hsl", "HSL",
    (_HUE, _percent("s", "saturation"), _percent("l", "lightness")),
    base="srgb",
    to_base=_hsl_to_srgb,
    from_base=_srgb_to_hsl,
    css_function="hsl",
)

HSV = define(
    "hsv", "HSV",
    (_HUE, _percent("s", "saturation"), _percent("v", "value")),
    base="hsl",
    to_base=_percent_scaled(hsv_to_hsl),
    from_base=_percent_scaled(hsl_to_hsv),
)

HWB = define(
    "hwb", "HWB",
    (_HUE, _percent("w", "whiteness"), _percent("b", "blackness")),
    base="hsv",
    to_base=_percent_scaled(hwb_to_hsv),
    from_base=_percent_scaled(hsv_to_hwb),
    css_function="hwb",
)

## Perceptual spaces

LAB = define(
    "lab", "CIE Lab",
    (
        Coordinate("l", "lightness", (0.0, 100.0), percent_reference=100.0),
        Coordinate("a", "a", (-125.0, 125.0), percent_reference=125.0),
        Coordinate("b", "b", (-125.0, 125.0), percent_reference=125.0),
    ),
    base="xyz-d50", to_base=lab_to_xyz_d50, from_base=xyz_d50_to_lab,
    white="D50", css_function="lab",
)

LCH = define(
    "lch", "CIE LCH",
    (
        Coordinate("l", "lightness", (0.0, 100.0), percent_reference=100.0),
        Coordinate("c", "chroma", (0.0, 150.0), percent_reference=150.0),
        _HUE,
    ),
    base="lab",
    to_base=polar_to_rect,
    from_base=lambda l, a, b: rect_to_polar(l, a, b, LCH_ACHROMATIC_CHROMA),
    white="D50", css_function="lch",
)

OKLAB = define(
    "oklab", "OKLab",
    (
        Coordinate("l", "lightness", (0.0, 1.0), percent_reference=1.0),
        Coordinate("a", "a", (-0.4, 0.4), percent_reference=0.4),
        Coordinate("b", "b", (-0.4, 0.4), percent_reference=0.4),
    ),
    base="xyz-d65", to_base=oklab_to_xyz, from_base=xyz_to_oklab,
    css_function="oklab",
)

OKLCH = define(
    "oklch", "OKLCh",
    (
        Coordinate("l", "lightness", (0.0, 1.0), percent_reference=1.0),
        Coordinate("c", "chroma", (0.0, 0.4), percent_reference=0.4),
        _HUE,
    ),
    base="oklab",
    to_base=polar_to_rect,
    from_base=lambda l, a, b: rect_to_polar(l, a, b, OKLCH_ACHROMATIC_CHROMA),
    css_function="oklch",
)
