"""
Value parsers.
Strict string-to-primitive conversions for each supported value kind.

Every parser either returns a fully parsed value or raises ParseError;
the accessor turns that error into the default / not-found result.
"""

import math
import re
from fractions import Fraction
from typing import Any, Callable, Dict

import numpy as np
import pandas as pd

from typed_env.core.constants import (
    DURATION_UNITS,
    FALSE_LITERALS,
    INT64_MAX,
    INT64_MIN,
    TRUE_LITERALS,
    ValueKind,
)
from typed_env.core.exceptions import ParseError, UnsupportedValueKindError


_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_PATTERN = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_PATTERN = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)
_DURATION_SEGMENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")

# A whole part wider than 19 digits (after leading zeros) overflows int64;
# fraction digits past 19 contribute less than a nanosecond
_MAX_INT_DIGITS = 19
_MAX_FRACTION_DIGITS = 19


def parse_string(raw: str) -> str:
    """Return raw text verbatim."""
    return raw


def parse_bool(raw: str) -> bool:
    """
    Parse a boolean literal.

    Accepts 1, t, T, TRUE, true, True and 0, f, F, FALSE, false, False.

    Args:
        raw: Raw environment value

    Returns:
        Parsed boolean

    Raises:
        ParseError: If raw is not a recognized literal
    """
    if raw in TRUE_LITERALS:
        return True
    if raw in FALSE_LITERALS:
        return False
    raise ParseError(ValueKind.BOOL.value, raw, "not a boolean literal")


def parse_int(raw: str) -> int:
    """
    Parse a base-10 signed 64-bit integer.

    Args:
        raw: Raw environment value

    Returns:
        Parsed integer

    Raises:
        ParseError: If raw is not a decimal integer or is out of range
    """
    if not _INT_PATTERN.fullmatch(raw):
        raise ParseError(ValueKind.INT.value, raw, "invalid syntax")
    sign = "-" if raw[0] == "-" else ""
    digits = raw.lstrip("+-").lstrip("0") or "0"
    if len(digits) > _MAX_INT_DIGITS:
        raise ParseError(ValueKind.INT.value, raw, "value out of range")
    value = int(sign + digits)
    if value < INT64_MIN or value > INT64_MAX:
        raise ParseError(ValueKind.INT.value, raw, "value out of range")
    return value


def parse_float64(raw: str) -> float:
    """
    Parse a 64-bit floating point literal.

    Decimal literals with an optional exponent, hexadecimal literals
    (0x1p-2) and inf/infinity/nan in any case are accepted.

    Args:
        raw: Raw environment value

    Returns:
        Parsed float

    Raises:
        ParseError: If raw is malformed or a finite literal overflows
    """
    if _SPECIAL_FLOAT_PATTERN.fullmatch(raw):
        return float(raw)
    if _HEX_FLOAT_PATTERN.fullmatch(raw):
        try:
            value = float.fromhex(raw)
        except OverflowError:
            raise ParseError(ValueKind.FLOAT64.value, raw, "value out of range")
        return value
    if not _DECIMAL_FLOAT_PATTERN.fullmatch(raw):
        raise ParseError(ValueKind.FLOAT64.value, raw, "invalid syntax")
    value = float(raw)
    if math.isinf(value):
        raise ParseError(ValueKind.FLOAT64.value, raw, "value out of range")
    return value


def parse_float32(raw: str) -> np.float32:
    """
    Parse a floating point literal at 64-bit precision, then narrow to 32 bits.

    Narrowing a value beyond the float32 range yields infinity.
    """
    value = parse_float64(raw)
    with np.errstate(over="ignore"):
        return np.float32(value)


def _parse_duration_nanoseconds(raw: str) -> int:
    text = raw
    negative = False
    if text[:1] in ("-", "+"):
        negative = text[0] == "-"
        text = text[1:]

    if text == "0":
        return 0
    if not text:
        raise ParseError(ValueKind.DURATION.value, raw, "invalid duration")

    total = 0
    position = 0
    while position < len(text):
        match = _DURATION_SEGMENT.match(text, position)
        whole, fraction, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not fraction:
            raise ParseError(ValueKind.DURATION.value, raw, "invalid duration")
        if not unit:
            raise ParseError(ValueKind.DURATION.value, raw, "missing unit in duration")
        if unit not in DURATION_UNITS:
            raise ParseError(ValueKind.DURATION.value, raw, "unknown unit in duration")

        scale = DURATION_UNITS[unit]
        whole = whole.lstrip("0") or "0"
        if len(whole) > _MAX_INT_DIGITS:
            raise ParseError(ValueKind.DURATION.value, raw, "invalid duration")
        total += int(whole) * scale
        fraction = (fraction or "")[:_MAX_FRACTION_DIGITS]
        if fraction:
            total += int(Fraction(int(fraction), 10 ** len(fraction)) * scale)
        position = match.end()

    if negative:
        total = -total
    # INT64_MIN is reserved for NaT
    if total <= INT64_MIN or total > INT64_MAX:
        raise ParseError(ValueKind.DURATION.value, raw, "invalid duration")
    return total


def parse_duration(raw: str) -> pd.Timedelta:
    """
    Parse a duration literal such as "300ms", "-1.5h" or "2h45m".

    A duration is an optionally signed sequence of decimal numbers, each
    with an optional fraction and a unit suffix. Valid units are "ns",
    "us" (or "µs"), "ms", "s", "m" and "h". Segments are summed; the bare
    literal "0" needs no unit.

    Args:
        raw: Raw environment value

    Returns:
        Duration with nanosecond resolution

    Raises:
        ParseError: If raw is malformed, uses an unknown unit or overflows
    """
    return pd.Timedelta(_parse_duration_nanoseconds(raw), unit="ns")


PARSERS: Dict[ValueKind, Callable[[str], Any]] = {
    ValueKind.STRING: parse_string,
    ValueKind.BOOL: parse_bool,
    ValueKind.INT: parse_int,
    ValueKind.FLOAT32: parse_float32,
    ValueKind.FLOAT64: parse_float64,
    ValueKind.DURATION: parse_duration,
}


ZERO_VALUES: Dict[ValueKind, Any] = {
    ValueKind.STRING: "",
    ValueKind.BOOL: False,
    ValueKind.INT: 0,
    ValueKind.FLOAT32: np.float32(0.0),
    ValueKind.FLOAT64: 0.0,
    ValueKind.DURATION: pd.Timedelta(0),
}


def _unsupported_kind(kind: Any) -> UnsupportedValueKindError:
    return UnsupportedValueKindError(
        f"Unsupported value kind: {kind!r}",
        details={"supported": [k.value for k in ValueKind]},
    )


def zero_value(kind: ValueKind) -> Any:
    """Return the zero value reported alongside found=False for kind."""
    try:
        return ZERO_VALUES[kind]
    except (KeyError, TypeError):
        raise _unsupported_kind(kind) from None


def parse_value(kind: ValueKind, raw: str) -> Any:
    """
    Parse raw text as the given kind.

    Args:
        kind: Target value kind
        raw: Raw environment value

    Returns:
        Parsed value

    Raises:
        ParseError: If raw cannot be parsed as kind
        UnsupportedValueKindError: If kind has no parser
    """
    try:
        parser = PARSERS[kind]
    except (KeyError, TypeError):
        raise _unsupported_kind(kind) from None
    return parser(raw)
