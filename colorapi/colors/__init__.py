"""
colorapi Color Objects
======================

:class:`Color` is a mutable value object: a color space, a list of
coordinates and an alpha channel. Absent components (CSS ``none``) are
``None``.

Usage
-----
>>> from colorapi import Color
>>> red = Color("srgb", [1, 0, 0])
>>> red.get("r")
1
>>> red.to("hsl").coords
(0.0, 100.0, 50.0)
>>> str(Color("srgb", [1, 0, 0], 0.5))
'rgb(255 0 0 / 0.5)'
>>> Color.parse("hsl(120 100% 25%)").to("srgb").get_all()
[0.0, 0.5, 0.0]

Copies never share state with the original:

>>> copy = Color(red)
>>> copy.set("g", 1)
>>> red.get("g")
0
"""

from .color import Color

__all__ = ['Color']
