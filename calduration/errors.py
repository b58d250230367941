"""Exceptions raised by calduration.

All errors are raised synchronously to the caller of the failing operation.
"""


class DurationError(Exception):
    """Base class for all calduration errors."""


class ParseError(DurationError, ValueError):
    """Text could not be read as a duration.

    Attributes:
        text: The complete input
        fragment: The offending part of the input
        offset: Character offset of ``fragment`` within ``text``
        reason: Short description of what was expected
    """

    def __init__(self, text: str, fragment: str, offset: int, reason: str):
        self.text: str = text
        self.fragment: str = fragment
        self.offset: int = offset
        self.reason: str = reason
        super().__init__(
            f"Cannot parse duration {text!r}: {reason}\n"
            f"At offset {offset}: {fragment!r}\n"
            f"Examples: 'P1Y2M3DT4H5M6.5S', 'P2W', '-PT30M', '1 hour, 30 minutes'"
        )


class RangeError(DurationError, ValueError):
    """A numeric input is non-finite, negative where disallowed, or otherwise
    outside the domain of the operation."""


class UnknownUnitError(RangeError, KeyError):
    """A unit name is not in the unit registry."""

    def __init__(self, name: object, valid: str):
        self.name: object = name
        super().__init__(f"Unknown duration unit: {name!r}\nValid units: {valid}")

    def __str__(self) -> str:
        return str(self.args[0])
