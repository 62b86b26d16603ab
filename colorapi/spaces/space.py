from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Dict, Iterable, List, Optional, Tuple

from ..errors import UnknownColorSpaceError, UnknownCoordinateError
from ..types.color_types import Component, ColorSpaceLike

Transform = Callable[..., Tuple[Component, ...]]

_CSS_ID_ALIASES = {"xyz": "xyz-d65"}


@dataclass(frozen=True)
class Coordinate:
    """
    One axis of a color space.

    Attributes:
        id: short id used by ``Color.get``/``Color.set`` (``"r"``, ``"h"``)
        name: human readable name (``"red"``, ``"hue"``); also accepted on lookup
        range: reference range, informational only; ``None`` for angles
        angle: the coordinate is a hue in degrees
        percent_reference: value that ``100%`` stands for when parsing CSS
        serialize_percent: CSS output writes this coordinate as a percentage
    """
    id: str
    name: str
    range: Optional[Tuple[float, float]] = None
    angle: bool = False
    percent_reference: Optional[float] = None
    serialize_percent: bool = False


class ColorSpace:
    """
    Read-only tag identifying a color space.

    Spaces are registered by the package at import time and cannot be defined
    by users. Calling ``ColorSpace(x)`` resolves ``x`` (an id, an alias or a
    space) to the registered instance, so ``ColorSpace("p3") is
    ColorSpace("display-p3")``.

    ``name``, ``white`` and ``is_polar`` are informational, like
    ``Coordinate.range``: conversion only follows ``base`` and the to/from
    functions, which already include any white point adaptation.
    """
    __slots__ = (
        '_id', '_name', '_coords', '_base', '_to_base', '_from_base',
        '_white', '_css_id', '_css_function', '_coord_index', '_is_frozen',
    )

    _registry: ClassVar[Dict[str, ColorSpace]] = {}
    _aliases: ClassVar[Dict[str, str]] = {}

    def __new__(cls, space: ColorSpaceLike) -> ColorSpace:
        return cls.resolve(space)

    def __setattr__(self, name, value):
        """Block attribute changes once the space is registered."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    # ------------------ REGISTRY ------------------
    @classmethod
    def _define(
        cls,
        id: str,
        name: str,
        coords: Iterable[Coordinate],
        base: Optional[str] = None,
        to_base: Optional[Transform] = None,
        from_base: Optional[Transform] = None,
        white: str = "D65",
        css_id: Optional[str] = None,
        css_function: Optional[str] = None,
        aliases: Iterable[str] = (),
    ) -> ColorSpace:
        if id in cls._registry:
            raise ValueError(f"Color space {id!r} is already defined")
        if (base is None) != (to_base is None) or (base is None) != (from_base is None):
            raise ValueError(f"{id}: base, to_base and from_base go together")

        space = object.__new__(cls)
        coords = tuple(coords)
        index: Dict[str, int] = {}
        for i, coord in enumerate(coords):
            index.setdefault(coord.id.lower(), i)
            index.setdefault(coord.name.lower(), i)

        space._id = id
        space._name = name
        space._coords = coords
        space._base = cls._registry[base] if base is not None else None
        space._to_base = to_base
        space._from_base = from_base
        space._white = white
        space._css_id = css_id
        space._css_function = css_function
        space._coord_index = index
        space._is_frozen = True

        cls._registry[id] = space
        for alias in aliases:
            cls._aliases[alias] = id
        return space

    @classmethod
    def resolve(cls, space: ColorSpaceLike) -> ColorSpace:
        """Resolve an id, alias or ColorSpace to the registered space."""
        if isinstance(space, ColorSpace):
            return space
        if not isinstance(space, str):
            raise TypeError(f"Color space must be a ColorSpace or a string id, got {type(space).__name__}")
        key = space.strip().lower()
        key = cls._aliases.get(key, key)
        try:
            return cls._registry[key]
        except KeyError:
            raise UnknownColorSpaceError(space) from None

    @classmethod
    def ids(cls) -> List[str]:
        """Ids of every registered color space, in definition order."""
        return list(cls._registry)

    @classmethod
    def from_css_id(cls, css_id: str) -> Optional[ColorSpace]:
        """Find the space used by ``color(<css_id> ...)``, or None."""
        key = css_id.lower()
        if key.startswith("--"):
            # dashed ids reach the spaces CSS has no syntax for
            space = cls._registry.get(key[2:])
            if space is not None and space._css_id is None and space._css_function is None:
                return space
            return None
        key = _CSS_ID_ALIASES.get(key, key)
        for space in cls._registry.values():
            if space._css_id == key:
                return space
        return None

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def coords(self) -> Tuple[Coordinate, ...]:
        return self._coords

    @property
    def base(self) -> Optional[ColorSpace]:
        return self._base

    @property
    def white(self) -> str:
        return self._white

    @property
    def css_id(self) -> Optional[str]:
        """Identifier inside ``color()``; None when a dedicated function is used."""
        return self._css_id

    @property
    def css_function(self) -> Optional[str]:
        return self._css_function

    @property
    def is_polar(self) -> bool:
        return any(c.angle for c in self._coords)

    # ------------------ COORDINATES ------------------
    def index_of(self, name: str) -> int:
        """Position of the coordinate with the given id or name."""
        if not isinstance(name, str):
            raise TypeError(f"Coordinate name must be a string, got {type(name).__name__}")
        try:
            return self._coord_index[name.lower()]
        except KeyError:
            raise UnknownCoordinateError(name, self._id) from None

    def coordinate(self, name: str) -> Coordinate:
        return self._coords[self.index_of(name)]

    # ------------------ CONVERSION CHAIN ------------------
    def path_to_root(self) -> List[ColorSpace]:
        """This space followed by its bases, ending at the connection space."""
        path = [self]
        while path[-1]._base is not None:
            path.append(path[-1]._base)
        return path

    def to_base(self, coords: Tuple[float, ...]) -> Tuple[Component, ...]:
        if self._to_base is None:
            raise ValueError(f"{self._id} has no base space")
        return tuple(self._to_base(*coords))

    def from_base(self, coords: Tuple[float, ...]) -> Tuple[Component, ...]:
        if self._from_base is None:
            raise ValueError(f"{self._id} has no base space")
        return tuple(self._from_base(*coords))

    # ------------------ DUNDER ------------------
    def __reduce__(self):
        return (ColorSpace, (self._id,))

    def __copy__(self) -> ColorSpace:
        return self

    def __deepcopy__(self, memo) -> ColorSpace:
        return self

    def __repr__(self) -> str:
        return f"ColorSpace({self._id!r})"

    def __str__(self) -> str:
        return self._id
