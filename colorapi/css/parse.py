"""
Parse CSS color strings.

Tokenizing is left to tinycss2; this module only interprets the component
values. Supported syntax:

- named colors (``red``, ``cornflowerblue``) and ``transparent``
- hex colors with 3, 4, 6 or 8 digits
- ``rgb()``/``rgba()`` and ``hsl()``/``hsla()``, legacy comma separated and
  modern space separated forms
- ``hwb()``, ``lab()``, ``lch()``, ``oklab()``, ``oklch()``
- ``color(<space> c1 c2 c3)`` for the predefined spaces, plus ``--<id>`` for
  registered spaces without CSS syntax (``color(--hsv 120 50% 50%)``)

Every form but the legacy one accepts ``none`` and an optional
``/ <alpha>``.
"""
import math
import string
from typing import NamedTuple, Optional, Sequence, Tuple

import tinycss2
import webcolors
from boundednumbers import clamp

from ..errors import ColorParseError
from ..spaces.space import ColorSpace, Coordinate
from ..types.color_types import Component, CoordList
from ..types.defaults import ALPHA_RANGE, DEFAULT_ALPHA


class ParsedColor(NamedTuple):
    space: ColorSpace
    coords: CoordList
    alpha: Component


# CSS function name -> color space id
_FUNCTIONS = {
    "rgb": "srgb",
    "rgba": "srgb",
    "hsl": "hsl",
    "hsla": "hsl",
    "hwb": "hwb",
    "lab": "lab",
    "lch": "lch",
    "oklab": "oklab",
    "oklch": "oklch",
}

_LEGACY_FUNCTIONS = {"rgb", "rgba", "hsl", "hsla"}

# Angle units -> degrees per unit
_ANGLE_UNITS = {
    "deg": 1.0,
    "grad": 0.9,
    "rad": 180 / math.pi,
    "turn": 360.0,
}

# rgb() channels written as numbers run 0-255
_RGB_NUMBER_RANGE = 255

# CSS Color 4 keywords missing from the webcolors CSS3 table
_EXTRA_KEYWORDS = {
    "transparent": ((0, 0, 0), 0.0),
    "rebeccapurple": ((0x66, 0x33, 0x99), DEFAULT_ALPHA),
}


def parse_color(css: str) -> ParsedColor:
    """
    Parse a CSS color string.

    Args:
        css: any supported CSS color, case-insensitive, surrounding whitespace ignored

    Returns:
        ParsedColor with the resolved space, the coordinates (``None`` for
        ``none``) and the alpha

    Raises:
        ColorParseError: the string is not a supported CSS color
        TypeError: ``css`` is not a string
    """
    if not isinstance(css, str):
        raise TypeError(f"CSS color must be a string, got {type(css).__name__}")

    token = tinycss2.parse_one_component_value(css, skip_comments=True)
    if token.type == "error":
        raise ColorParseError(css, f"is not a valid CSS color ({token.message})")
    if token.type == "ident":
        return _parse_keyword(css, token.lower_value)
    if token.type == "hash":
        return _parse_hex(css, token.value)
    if token.type == "function":
        return _parse_function(css, token)
    raise ColorParseError(css)


## Keywords and hex

def _parse_keyword(css: str, name: str) -> ParsedColor:
    if name in _EXTRA_KEYWORDS:
        channels, alpha = _EXTRA_KEYWORDS[name]
        return ParsedColor(ColorSpace("srgb"), [c / 255 for c in channels], alpha)
    try:
        rgb = webcolors.name_to_rgb(name)
    except ValueError:
        raise ColorParseError(css, "is not a known color name") from None
    return ParsedColor(
        ColorSpace("srgb"),
        [rgb.red / 255, rgb.green / 255, rgb.blue / 255],
        DEFAULT_ALPHA,
    )


def _parse_hex(css: str, digits: str) -> ParsedColor:
    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    if len(digits) not in (6, 8):
        raise ColorParseError(css, "does not have 3, 4, 6 or 8 hex digits")
    # int() would also take signs and non-ASCII digits
    if not all(d in string.hexdigits for d in digits):
        raise ColorParseError(css, "has non-hex digits")
    channels = [int(digits[n:n + 2], 16) for n in range(0, len(digits), 2)]

    alpha = channels[3] / 255 if len(channels) == 4 else DEFAULT_ALPHA
    return ParsedColor(ColorSpace("srgb"), [c / 255 for c in channels[:3]], alpha)


## Functions

def _parse_function(css: str, token) -> ParsedColor:
    name = token.lower_name
    args = [t for t in token.arguments if t.type not in ("whitespace", "comment")]
    legacy = any(_is_literal(t, ",") for t in args)

    if name == "color":
        if legacy:
            raise ColorParseError(css, "uses commas in color()")
        if not args or args[0].type != "ident":
            raise ColorParseError(css, "does not name a color space")
        space = ColorSpace.from_css_id(args[0].value)
        if space is None:
            raise ColorParseError(css, f"names an unsupported color space {args[0].value!r}")
        args = args[1:]
    elif name in _FUNCTIONS:
        if legacy and name not in _LEGACY_FUNCTIONS:
            raise ColorParseError(css, f"uses commas in {name}()")
        space = ColorSpace(_FUNCTIONS[name])
    else:
        raise ColorParseError(css, f"uses unknown color function {name}()")

    channels, alpha_token = _split_arguments(css, args, legacy, len(space.coords))

    if legacy:
        _check_legacy_channels(css, space, channels)

    number_range = _RGB_NUMBER_RANGE if name in ("rgb", "rgba") else 1
    coords = [
        _parse_channel(css, tok, coord, allow_none=not legacy, number_range=number_range)
        for tok, coord in zip(channels, space.coords)
    ]
    alpha = DEFAULT_ALPHA if alpha_token is None else _parse_alpha(css, alpha_token, allow_none=not legacy)
    return ParsedColor(space, coords, alpha)


def _is_literal(token, value: str) -> bool:
    return token.type == "literal" and token.value == value


def _split_arguments(css: str, args: Sequence, legacy: bool, count: int) -> Tuple[list, Optional[object]]:
    """Separate channel tokens from the alpha token, checking the separators."""
    if legacy:
        values = args[0::2]
        separators = args[1::2]
        if not all(_is_literal(s, ",") for s in separators) or len(separators) != len(values) - 1:
            raise ColorParseError(css, "has misplaced commas")
        if any(v.type == "literal" for v in values):
            raise ColorParseError(css, "mixes separators")
        if len(values) not in (count, count + 1):
            raise ColorParseError(css, f"needs {count} channels and an optional alpha")
        return list(values[:count]), values[count] if len(values) > count else None

    slashes = [i for i, t in enumerate(args) if _is_literal(t, "/")]
    if any(t.type == "literal" and not _is_literal(t, "/") for t in args):
        raise ColorParseError(css, "has an unexpected delimiter")
    if len(slashes) > 1:
        raise ColorParseError(css, "has more than one '/'")
    if slashes:
        cut = slashes[0]
        channels, rest = list(args[:cut]), list(args[cut + 1:])
        if len(rest) != 1:
            raise ColorParseError(css, "needs exactly one alpha value after '/'")
        alpha = rest[0]
    else:
        channels, alpha = list(args), None
    if len(channels) != count:
        raise ColorParseError(css, f"needs {count} channels, got {len(channels)}")
    return channels, alpha


def _check_legacy_channels(css: str, space: ColorSpace, channels: list) -> None:
    if space.id == "srgb":
        kinds = {t.type for t in channels}
        if kinds not in ({"number"}, {"percentage"}):
            raise ColorParseError(css, "mixes numbers and percentages in legacy rgb()")
    else:
        if any(t.type != "percentage" for t in channels[1:]):
            raise ColorParseError(css, "needs percentages for saturation and lightness in legacy hsl()")


def _parse_channel(css: str, token, coord: Coordinate, allow_none: bool, number_range: float) -> Component:
    if token.type == "ident" and token.lower_value == "none":
        if not allow_none:
            raise ColorParseError(css, "uses 'none' in legacy syntax")
        return None
    if token.type == "number":
        return token.value if coord.angle else token.value / number_range
    if token.type == "percentage" and not coord.angle and coord.percent_reference is not None:
        return token.value / 100 * coord.percent_reference
    if token.type == "dimension" and coord.angle:
        factor = _ANGLE_UNITS.get(token.lower_unit)
        if factor is not None:
            return token.value * factor
    raise ColorParseError(css, f"has an invalid value for {coord.name}: {tinycss2.serialize([token])!r}")


def _parse_alpha(css: str, token, allow_none: bool) -> Component:
    if token.type == "ident" and token.lower_value == "none":
        if not allow_none:
            raise ColorParseError(css, "uses 'none' in legacy syntax")
        return None
    if token.type == "number":
        value = token.value
    elif token.type == "percentage":
        value = token.value / 100
    else:
        raise ColorParseError(css, f"has an invalid alpha: {tinycss2.serialize([token])!r}")
    return float(clamp(value, *ALPHA_RANGE))
