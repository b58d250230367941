from .duration import Duration, DurationLike
from .errors import DurationError, ParseError, RangeError, UnknownUnitError
from .formatting import CompactFormatter, LocaleFormatter, PlainFormatter
from .interop import between, date_add, date_subtract
from .iso import parse, serialize
from .units import Unit, resolve
from .util import DEFAULT_POLICY, ApproximationPolicy

__all__ = [
    "Duration",
    "DurationLike",
    "DurationError",
    "ParseError",
    "RangeError",
    "UnknownUnitError",
    "LocaleFormatter",
    "PlainFormatter",
    "CompactFormatter",
    "between",
    "date_add",
    "date_subtract",
    "parse",
    "serialize",
    "Unit",
    "resolve",
    "ApproximationPolicy",
    "DEFAULT_POLICY",
]
