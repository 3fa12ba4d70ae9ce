"""
Exceptions and warnings raised by hexchroma.

Only the validated factories (``Color.new_from_int`` and ``Color.new_from_rgb``)
raise; the plain constructors coerce their input and at most emit a
``HexParseWarning``.
"""
from typing import Dict, Tuple


class HexchromaError(Exception):
    """Base class for all hexchroma errors."""


class InvalidInputError(HexchromaError, TypeError):
    """
    An argument handed to a validated factory is not an integer.

    Attributes:
        received: Mapping of argument name to the type name that was received,
            e.g. ``{"red": "float", "green": "int", "blue": "int"}``.
        offending: Names of the arguments that were rejected.
    """

    def __init__(self, message: str, received: Dict[str, str], offending: Tuple[str, ...]):
        super().__init__(message)
        self.received = received
        self.offending = offending


class HexParseWarning(UserWarning):
    """Characters that are not hex digits were dropped while parsing a hex string."""
