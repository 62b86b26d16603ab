from typing import Sequence

from ..spaces.space import ColorSpace
from ..types.color_types import Component
from ..types.defaults import DEFAULT_ALPHA, DEFAULT_PRECISION
from ..utils.num_utils import format_number

# srgb is written through rgb(), whose numbers run 0-255
_RGB_NUMBER_RANGE = 255


def serialize_color(
    space: ColorSpace,
    coords: Sequence[Component],
    alpha: Component = DEFAULT_ALPHA,
    precision: int = DEFAULT_PRECISION,
) -> str:
    """
    Serialize a color in its own space.

    srgb uses ``rgb()``, spaces with a dedicated CSS function use it, the other
    predefined spaces use ``color()``, and spaces without CSS syntax use
    ``color(--<id> ...)``. Alpha is only written when it is not 1.

    >>> serialize_color(ColorSpace("hsl"), (120, 50, None), 0.5)
    'hsl(120 50% none / 0.5)'
    """
    if space.id == "srgb":
        values = [format_number(None if c is None else c * _RGB_NUMBER_RANGE, precision) for c in coords]
    else:
        values = [
            _format_coordinate(c, coord.serialize_percent, precision)
            for c, coord in zip(coords, space.coords)
        ]

    body = " ".join(values)
    if alpha is None:
        body += " / none"
    elif alpha != DEFAULT_ALPHA:
        body += f" / {format_number(alpha, precision)}"

    if space.css_function is not None:
        return f"{space.css_function}({body})"
    css_id = space.css_id if space.css_id is not None else f"--{space.id}"
    return f"color({css_id} {body})"


def _format_coordinate(value: Component, percent: bool, precision: int) -> str:
    text = format_number(value, precision)
    if percent and value is not None:
        return f"{text}%"
    return text
