"""
colorapi Color Space Conversions
================================

Scalar conversion functions between the CSS Color 4 color spaces. Every
space converts to and from its base space; ``convert`` chains those steps
through the first common ancestor, with XYZ D65 at the root.

Families
--------
- RGB spaces <-> XYZ: ``rgb_spaces`` (transfer functions + matrices)
- sRGB <-> HSL: ``css_to_hsl``
- HSL <-> HSV <-> HWB: ``css_to_hsv``
- XYZ D50 <-> Lab: ``lab``
- XYZ D65 <-> OKLab: ``oklab``
- Lab/OKLab <-> LCH/OKLCh: ``polar``

Examples
--------
>>> from colorapi.conversions import convert
>>> convert((1, 0, 0), "srgb", "hsl")
(0.0, 100.0, 50.0)
"""

from .wrapper import convert, conversion_path

__all__ = [
    'convert',
    'conversion_path',
]
