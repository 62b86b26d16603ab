from __future__ import annotations
from typing import List, Optional, Sequence, Tuple, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from ..spaces.space import ColorSpace

Scalar = int | float
# A single component; ``None`` stands for the CSS ``none`` keyword
Component = Optional[Scalar]
ComponentName = str
CSSColorString = str
Coords = Tuple[Component, ...]
CoordList = List[Component]
CoordInput = Sequence[Component]
ColorSpaceLike = Union["ColorSpace", str]
