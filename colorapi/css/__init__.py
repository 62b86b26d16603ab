from .parse import parse_color, ParsedColor
from .serialize import serialize_color

__all__ = ['parse_color', 'ParsedColor', 'serialize_color']
