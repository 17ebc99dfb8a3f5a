"""
Round-Trip Validator

Decides whether storing a literal at a given width discards digits the user
wrote. The literal is rounded once, exactly, to the nearest value of the target
width and the stored value is rendered back to its shortest round-trip decimal
text (numpy's Dragon4 ``unique=True`` formatting). If that text denotes exactly
the decimal number written, nothing was lost.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Dict, Optional

import numpy as np

from .digits import numeric_body
from ..shared.errors import MalformedLiteralError, RoundTripError
from ..shared.types import FloatWidth
from ..utils.config import EXPONENT_MARKERS, SCIENTIFIC_EXP_DIGITS

# Same-size unsigned view of each width, for the ties-to-even mantissa check
_BITS_VIEW: Dict[FloatWidth, type] = {
    FloatWidth.SINGLE: np.uint32,
    FloatWidth.DOUBLE: np.uint64,
}


def _overflow_threshold(width: FloatWidth) -> Fraction:
    """Smallest magnitude that rounds to infinity: max plus half its ulp (the tie goes to inf)"""
    largest = np.finfo(width.dtype).max
    ulp = largest - np.nextafter(largest, width.dtype(0))
    return Fraction(float(largest)) + Fraction(float(ulp)) / 2


_OVERFLOW: Dict[FloatWidth, Fraction] = {width: _overflow_threshold(width) for width in FloatWidth}


def _is_odd(value: np.floating, width: FloatWidth) -> bool:
    return bool(int(value.view(_BITS_VIEW[width])) & 1)


def nearest(exact: Fraction, approx: float, width: FloatWidth) -> np.floating:
    """
    Value of ``width`` nearest to ``exact``, ties to even.

    ``approx`` is the nearest double to ``exact``. Narrowing it to single
    rounds a second time and can land one ulp off when the double sits on a
    single-precision halfway point, so the neighbours of the narrowed value are
    compared against ``exact`` directly.
    """
    dtype = width.dtype
    if abs(exact) >= _OVERFLOW[width]:
        return dtype(np.inf) if exact > 0 else dtype(-np.inf)

    largest = np.finfo(dtype).max
    with np.errstate(over="ignore", under="ignore"):
        guess = dtype(approx)
        if not np.isfinite(guess):
            # approx sat on the overflow tie, exact is below it
            guess = largest if exact > 0 else -largest
        candidates = [
            c for c in (np.nextafter(guess, dtype(-np.inf)), guess, np.nextafter(guess, dtype(np.inf)))
            if np.isfinite(c)
        ]
    return min(candidates, key=lambda c: (abs(Fraction(float(c)) - exact), _is_odd(c, width)))


def materialize(text: str, width: FloatWidth) -> np.floating:
    """
    Nearest value of ``width`` to the literal ``text`` (correctly rounded, ties to even).

    Raises RoundTripError when the value overflows to infinity, or when a
    nonzero literal underflows to zero. Text that is not a decimal number
    raises MalformedLiteralError.
    """
    body = numeric_body(text)
    try:
        exact = Fraction(body)
        as_double = float(body)
    except ValueError as e:
        raise MalformedLiteralError(text, "not a decimal number") from e

    value = nearest(exact, as_double, width)

    if not np.isfinite(value):
        raise RoundTripError(f"{text!r} overflows {width.value}")
    if value == 0 and exact != 0:
        raise RoundTripError(f"{text!r} underflows {width.value} to zero")
    return value


def shortest_text(value: np.floating, scientific: bool = False) -> str:
    """Shortest decimal text that parses back to exactly ``value`` at its own width"""
    if scientific:
        return np.format_float_scientific(
            value, unique=True, trim="0", exp_digits=SCIENTIFIC_EXP_DIGITS,
        )
    return np.format_float_positional(value, unique=True, trim="0")


def _has_exponent(body: str) -> bool:
    return any(marker in body for marker in EXPONENT_MARKERS)


def validate(text: str, width: FloatWidth) -> Optional[str]:
    """
    Return the shortest round-trip text of ``text`` at ``width`` when storing
    it changes the written value, else None.

    The returned text keeps the original's notation (scientific when the
    literal had an exponent) and carries no suffix or separators; an explicit
    ``+`` in the exponent is kept only if the original wrote one.

    Raises RoundTripError when the value cannot be materialized (see
    ``materialize``).
    """
    body = numeric_body(text)
    value = materialize(text, width)

    scientific = _has_exponent(body)
    rendered = shortest_text(value, scientific=scientific)
    if scientific and "+" not in body[1:]:
        rendered = rendered.replace("e+", "e")
    if scientific and "E" in body:
        rendered = rendered.replace("e", "E")

    if Decimal(rendered) == Decimal(body):
        return None
    return rendered
