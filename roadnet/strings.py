"""String helpers and conversion of text to numbers and enums."""

import enum
import re
import string as _string

_WHITESPACE = " \f\n\r\t\v"
_TO_LOWER = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)
_TO_UPPER = str.maketrans(_string.ascii_lowercase, _string.ascii_uppercase)

_INT_RE = re.compile(r"-?[0-9]*")
_FLOAT_RE = re.compile(r"(-?)([0-9]*)(?:[.,]([0-9]*))?(?:[eE](-?[0-9]*))?")

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def is_whitespace(c):
    """Return True if c is a single white-space character."""
    return len(c) == 1 and c in _WHITESPACE


def trim(string):
    """Return string without leading and trailing white space."""
    return string.strip(_WHITESPACE)


def to_lower_case(string):
    """Convert the ASCII letters in string to lower case."""
    return string.translate(_TO_LOWER)


def to_upper_case(string):
    """Convert the ASCII letters in string to upper case."""
    return string.translate(_TO_UPPER)


def _no_digit(text):
    return ValueError(f"'{text}' cannot be converted to an arithmetic type")


def _parse_int(text):
    if not _INT_RE.fullmatch(text):
        raise _no_digit(text)
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    value = int(digits) if digits else 0
    if negative:
        value = -value
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"'{text}' is outside the range of representable values")
    return value


def _parse_float(text):
    match = _FLOAT_RE.fullmatch(text)
    if match is None:
        raise _no_digit(text)
    sign, whole, fraction, exponent = match.groups()
    if exponent in (None, "", "-"):
        exponent = "0"
    return float(f"{sign}{whole or '0'}.{fraction or '0'}e{exponent}")


def lexical_cast(text, target):
    """Convert text to int, float, str or an int-valued enum.

    Raises ValueError if text is not a number and OverflowError if an
    integer does not fit in 32 bits.
    """
    if isinstance(target, type) and issubclass(target, enum.Enum):
        return target(_parse_int(text))
    if target is str:
        return str(text)
    if target is int:
        return _parse_int(text)
    if target is float:
        return _parse_float(text)
    raise TypeError(f"cannot convert text to {target!r}")


def contains(iterable, value):
    """Return True if the iterable yields an element equal to value."""
    return any(item == value for item in iterable)