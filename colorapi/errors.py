"""Exceptions raised by colorapi.

Every error derives from :class:`ColorError` and from :class:`ValueError`, so
callers can catch either the package-specific base or the builtin.
"""


class ColorError(Exception):
    """Base class for all colorapi errors."""


class ColorParseError(ColorError, ValueError):
    """A CSS color string could not be parsed."""

    def __init__(self, value: str, reason: str = "is not a valid CSS color"):
        self.value = value
        self.reason = reason
        super().__init__(f"{value!r} {reason}")


class UnknownColorSpaceError(ColorError, ValueError):
    """No registered color space matches the given id."""

    def __init__(self, space_id: object):
        self.space_id = space_id
        super().__init__(f"Unknown color space: {space_id!r}")


class UnknownCoordinateError(ColorError, ValueError):
    def __init__(self, name: str, space_id: str):
        self.name = name
        self.space_id = space_id
        super().__init__(f"{space_id} has no coordinate named {name!r}")


class CoordinateCountError(ColorError, ValueError):
    def __init__(self, space_id: str, expected: int, got: int):
        self.space_id = space_id
        self.expected = expected
        self.got = got
        super().__init__(f"{space_id} expects {expected} coordinates, got {got}")
