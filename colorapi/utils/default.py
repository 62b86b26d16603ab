from typing import Iterable, Optional, Tuple, TypeVar

T = TypeVar('T')

def value_or_default(value: Optional[T], default: T) -> T:
    """Return the value if it is not None, otherwise return the default."""
    return value if value is not None else default

def zero_none(coords: Iterable[Optional[float]]) -> Tuple[float, ...]:
    """Replace absent (``None``) components by 0, as CSS does before converting."""
    return tuple(value_or_default(c, 0.0) for c in coords)
