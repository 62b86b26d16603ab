from .space import ColorSpace, Coordinate
from . import definitions

__all__ = ['ColorSpace', 'Coordinate']
