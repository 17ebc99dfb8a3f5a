"""
Digit Scanner

Turns a float literal's source text into its significant decimal digits.

Leading-zero policy: every zero before the first nonzero digit is
insignificant, whether it sits before or after the decimal point
(``0.000123`` has three significant digits). From the first nonzero digit on,
every digit counts, including internal and trailing zeros. A literal whose
digits are all zero has no significant digits.

Separators, the decimal point and a leading sign are skipped; an exponent
marker or a width suffix ends the scan.
"""

import re
from typing import Iterator, Optional, Tuple

from ..shared.errors import MalformedLiteralError
from ..shared.types import FloatWidth
from ..utils.config import (
    GROUP_SEPARATOR, DECIMAL_POINT, SIGN_CHARS, EXPONENT_MARKERS, WIDTH_SUFFIX_MARKER,
)

# (offset, digit) pair of a significant digit
DigitPosition = Tuple[int, str]

_SUFFIX_RE = re.compile(
    rf"{re.escape(GROUP_SEPARATOR)}*{WIDTH_SUFFIX_MARKER}(?:"
    + "|".join(w.value[len(WIDTH_SUFFIX_MARKER):] for w in FloatWidth)
    + r")$"
)


def significant_digits(text: str) -> Iterator[DigitPosition]:
    """
    Yield ``(offset, digit)`` for each significant digit of ``text``, in order.

    Offsets index into ``text`` (literals are ASCII, so they are byte offsets
    too). The iterator is single-pass; call again to rescan.

    Raises MalformedLiteralError (lazily, during iteration) for characters
    that cannot appear in a float literal, a second decimal point, or a
    mantissa without any digit.
    """
    seen_nonzero = False
    seen_digit = False
    seen_point = False

    for offset, ch in enumerate(text):
        if ch == GROUP_SEPARATOR:
            continue
        if ch in SIGN_CHARS:
            if offset != 0:
                raise MalformedLiteralError(text, f"sign {ch!r} at offset {offset}")
            continue
        if ch == DECIMAL_POINT:
            if seen_point:
                raise MalformedLiteralError(text, "more than one decimal point")
            seen_point = True
            continue
        if ch in EXPONENT_MARKERS or ch == WIDTH_SUFFIX_MARKER:
            break
        if not ("0" <= ch <= "9"):
            raise MalformedLiteralError(text, f"unexpected character {ch!r} at offset {offset}")

        seen_digit = True
        if ch == "0" and not seen_nonzero:
            continue
        seen_nonzero = True
        yield offset, ch

    if not seen_digit:
        raise MalformedLiteralError(text, "no digits in mantissa")


def count_significant_digits(text: str) -> int:
    return sum(1 for _ in significant_digits(text))


def split_suffix(text: str) -> Tuple[str, str]:
    """
    Split ``text`` into ``(body, suffix)``.

    The suffix keeps any separators joining it to the digits, so
    ``"1.5_f32"`` splits into ``("1.5", "_f32")`` and ``"1.5"`` into
    ``("1.5", "")``.
    """
    match = _SUFFIX_RE.search(text)
    if match is None:
        return text, ""
    return text[:match.start()], text[match.start():]


def width_from_suffix(text: str) -> Optional[FloatWidth]:
    """Width named by the literal's own suffix, if it has one"""
    suffix = split_suffix(text)[1].lstrip(GROUP_SEPARATOR)
    if not suffix:
        return None
    return FloatWidth.from_name(suffix)


def numeric_body(text: str) -> str:
    """Literal text with its suffix and every separator removed (parseable by float/Decimal)"""
    return split_suffix(text)[0].replace(GROUP_SEPARATOR, "")
