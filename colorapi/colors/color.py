from __future__ import annotations

import math
import warnings
from typing import Any, Optional, Sequence, Union

import numpy as np
from boundednumbers import clamp

from ..conversions import convert
from ..css import parse_color, serialize_color
from ..errors import CoordinateCountError
from ..spaces import ColorSpace
from ..types.color_types import (
    Component,
    ComponentName,
    CoordInput,
    CoordList,
    Coords,
    ColorSpaceLike,
    CSSColorString,
)
from ..types.defaults import ALPHA_RANGE, DEFAULT_ALPHA
from ..utils.num_utils import is_real_number

_ALPHA = "alpha"


class _Unset:
    def __repr__(self):
        return "<unset>"


_UNSET: Any = _Unset()


def _check_component(value: Any, what: str, stacklevel: int) -> Component:
    """
    Validate one coordinate or alpha: a real number or None (``none``).

    ``stacklevel`` is passed to ``warnings.warn``; the helpers below take it
    counted from themselves and add their own frame.
    """
    if value is None:
        return None
    if not is_real_number(value):
        raise TypeError(f"{what} must be a real number or None, got {type(value).__name__}")
    if type(value) not in (int, float):
        # numpy scalars and other Real types
        value = float(value)
    if math.isnan(value):
        warnings.warn(
            f"{what} is NaN, which is a number, not 'none'; use None for a missing component",
            UserWarning,
            stacklevel=stacklevel,
        )
    return value


def _check_alpha(value: Any, stacklevel: int) -> Component:
    value = _check_component(value, "alpha", stacklevel + 1)
    if value is None or math.isnan(value):
        return value
    return float(clamp(value, *ALPHA_RANGE))


def _check_coords(space: ColorSpace, coords: CoordInput, stacklevel: int) -> CoordList:
    if isinstance(coords, (str, bytes)) or not isinstance(coords, (Sequence, np.ndarray)):
        raise TypeError(f"coords must be a sequence, got {type(coords).__name__}")
    expected = len(space.coords)
    if len(coords) != expected:
        raise CoordinateCountError(space.id, expected, len(coords))
    checked = []
    for value, coord in zip(coords, space.coords):
        checked.append(_check_component(value, f"{space.id} coordinate {coord.id!r}", stacklevel + 1))
    return checked


class Color:
    """
    A color: a color space, its coordinates and an alpha channel.

    Three ways to build one::

        Color("srgb", [1, 0, 0])          # space + coordinates (+ alpha)
        Color("cornflowerblue")           # any supported CSS color string
        Color(other)                      # an independent copy

    The named factories :meth:`from_components`, :meth:`from_string` (alias
    :meth:`parse`) and :meth:`from_color` do the same thing explicitly.

    Coordinates and alpha are numbers or ``None``; ``None`` is the CSS
    ``none`` keyword and is kept distinct from 0. Colors are mutable through
    :meth:`set` and :meth:`set_all`; every other operation returns a new
    object.
    """
    __slots__ = ('_space', '_coords', '_alpha')

    def __init__(
        self,
        color: Union[Color, ColorSpaceLike, CSSColorString],
        coords: Optional[CoordInput] = None,
        alpha: Component = _UNSET,
    ) -> None:
        # ---- Copy ----
        if isinstance(color, Color):
            if coords is not None or alpha is not _UNSET:
                raise TypeError("Copying a Color takes no coords or alpha")
            self._space: ColorSpace = color._space
            self._coords: CoordList = list(color._coords)
            self._alpha: Component = color._alpha
            return

        # ---- CSS string ----
        if coords is None:
            if alpha is not _UNSET:
                raise TypeError("Parsing a CSS color takes no alpha")
            if not isinstance(color, str):
                raise TypeError(
                    f"Color expects a Color, a CSS string or a space and coords, got {type(color).__name__}"
                )
            parsed = parse_color(color)
            self._space = parsed.space
            self._coords = list(parsed.coords)
            self._alpha = parsed.alpha
            return

        # ---- Space + coordinates ----
        self._assign(ColorSpace(color), coords, DEFAULT_ALPHA if alpha is _UNSET else alpha)

    def _assign(self, space: ColorSpace, coords: CoordInput, alpha: Component) -> None:
        # called straight from a public constructor: warnings point at its caller
        self._space = space
        self._coords = _check_coords(space, coords, stacklevel=4)
        self._alpha = _check_alpha(alpha, stacklevel=4)

    @classmethod
    def _trusted(cls, space: ColorSpace, coords: CoordInput, alpha: Component) -> Color:
        """Build from values that were already validated."""
        color = cls.__new__(cls)
        color._space = space
        color._coords = list(coords)
        color._alpha = alpha
        return color

    # ------------------ FACTORIES ------------------
    @classmethod
    def from_components(
        cls, space: ColorSpaceLike, coords: CoordInput, alpha: Component = DEFAULT_ALPHA
    ) -> Color:
        color = cls.__new__(cls)
        color._assign(ColorSpace(space), coords, alpha)
        return color

    @classmethod
    def from_string(cls, css: CSSColorString) -> Color:
        if not isinstance(css, str):
            raise TypeError(f"CSS color must be a string, got {type(css).__name__}")
        return cls(css)

    @classmethod
    def from_color(cls, color: Color) -> Color:
        if not isinstance(color, Color):
            raise TypeError(f"Expected a Color, got {type(color).__name__}")
        return cls(color)

    @classmethod
    def parse(cls, css: CSSColorString) -> Color:
        """Parse a CSS color string. Same as ``Color(css)``."""
        return cls.from_string(css)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def color_space(self) -> str:
        """Id of the color's space, e.g. ``"srgb"``."""
        return self._space.id

    @property
    def space(self) -> ColorSpace:
        return self._space

    @property
    def coords(self) -> Coords:
        """Snapshot of the coordinates; use :meth:`set` to change them."""
        return tuple(self._coords)

    @property
    def alpha(self) -> Component:
        return self._alpha

    # ------------------ COORDINATES ------------------
    def get(self, name: ComponentName) -> Component:
        """
        Value of one coordinate, by id or name (``"r"`` or ``"red"``).
        ``"alpha"`` returns the alpha.

        Raises:
            UnknownCoordinateError: the space has no such coordinate
        """
        if isinstance(name, str) and name.lower() == _ALPHA:
            return self._alpha
        return self._coords[self._space.index_of(name)]

    def set(self, name: ComponentName, value: Component) -> None:
        """Set one coordinate (or ``"alpha"``) in place. ``None`` means ``none``."""
        if isinstance(name, str) and name.lower() == _ALPHA:
            self._alpha = _check_alpha(value, stacklevel=3)
            return
        index = self._space.index_of(name)
        self._coords[index] = _check_component(
            value, f"{self.color_space} coordinate {name!r}", stacklevel=3
        )

    def get_all(self) -> CoordList:
        """A new list with all coordinates; changing it does not affect the color."""
        return list(self._coords)

    def set_all(self, coords: CoordInput, alpha: Component = _UNSET) -> None:
        """
        Replace all coordinates and, when given, the alpha.

        Everything is validated before anything changes.

        Raises:
            CoordinateCountError: ``coords`` has the wrong length for the space
        """
        new_coords = _check_coords(self._space, coords, stacklevel=3)
        new_alpha = self._alpha if alpha is _UNSET else _check_alpha(alpha, stacklevel=3)
        self._coords = new_coords
        self._alpha = new_alpha

    # ------------------ CONVERSION ------------------
    def to(self, space: ColorSpaceLike) -> Color:
        """
        The same color in another space, as a new Color.

        Converting to the color's own space returns a copy.
        """
        target = ColorSpace(space)
        if target is self._space:
            return Color(self)
        coords = convert(self._coords, self._space, target)
        return Color._trusted(target, coords, self._alpha)

    def to_string(self) -> CSSColorString:
        """CSS serialization in the color's own space."""
        return serialize_color(self._space, self._coords, self._alpha)

    # ------------------ DUNDER ------------------
    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        if self._alpha == DEFAULT_ALPHA:
            return f"Color({self.color_space!r}, {self._coords!r})"
        return f"Color({self.color_space!r}, {self._coords!r}, alpha={self._alpha!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            self._space is other._space
            and self._coords == other._coords
            and self._alpha == other._alpha
        )

    # mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> Color:
        return Color(self)

    def __deepcopy__(self, memo) -> Color:
        return Color(self)
