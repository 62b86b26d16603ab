from typing import Sequence, Tuple

from ..spaces.space import ColorSpace
from ..types.color_types import Component, ColorSpaceLike
from ..utils.default import zero_none


def conversion_path(from_space: ColorSpace, to_space: ColorSpace) -> Tuple[list, list]:
    """
    Steps needed to go from one space to another.

    Returns:
        (up, down): spaces to leave through ``to_base`` in order, then spaces
        to enter through ``from_base`` in order. Both are empty when the
        spaces are the same.
    """
    source_chain = from_space.path_to_root()
    target_chain = to_space.path_to_root()

    for depth, space in enumerate(source_chain):
        if space in target_chain:
            up = source_chain[:depth]
            down = list(reversed(target_chain[:target_chain.index(space)]))
            return up, down

    raise ValueError(f"No conversion path from {from_space.id} to {to_space.id}")


def convert(
    coords: Sequence[Component],
    from_space: ColorSpaceLike,
    to_space: ColorSpaceLike,
) -> Tuple[Component, ...]:
    """
    Convert coordinates between color spaces.

    Absent components count as 0 going into every step. Whatever the last
    step reports as absent (an achromatic hue) stays absent in the result.

    Args:
        coords: coordinates in ``from_space``
        from_space: source space, id or ColorSpace
        to_space: target space, id or ColorSpace

    Returns:
        coordinates in ``to_space``
    """
    source = ColorSpace(from_space)
    target = ColorSpace(to_space)
    result: Tuple[Component, ...] = tuple(coords)

    if source is target:
        return result

    up, down = conversion_path(source, target)
    for space in up:
        result = space.to_base(zero_none(result))
    for space in down:
        result = space.from_base(zero_none(result))
    return result
