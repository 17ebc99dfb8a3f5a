"""
Precision Classifier

Entry point of the analysis core: ``classify(text, width)`` runs
scan -> count -> (maybe) round-trip -> (maybe) render for one literal.

Rust Pattern: clippy_lints::float_literal (excessive_precision)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .digits import count_significant_digits
from .round_trip import validate
from .suggestion import render_suggestion
from ..shared.errors import RoundTripError
from ..shared.types import FloatWidth, CAPACITY


class VerdictTag(Enum):
    NOT_EXCESSIVE = "not_excessive"
    EXCESSIVE_CONFIRMED = "excessive_confirmed"


@dataclass(frozen=True)
class PrecisionVerdict:
    """Outcome of checking one literal (returned as a value, never raised)"""
    tag: VerdictTag
    suggestion: Optional[str] = None

    @classmethod
    def not_excessive(cls) -> 'PrecisionVerdict':
        return cls(VerdictTag.NOT_EXCESSIVE)

    @classmethod
    def confirmed(cls, suggestion: str) -> 'PrecisionVerdict':
        return cls(VerdictTag.EXCESSIVE_CONFIRMED, suggestion)

    @property
    def is_excessive(self) -> bool:
        return self.tag == VerdictTag.EXCESSIVE_CONFIRMED


NOT_EXCESSIVE = PrecisionVerdict.not_excessive()


def exceeds_capacity(text: str, width: FloatWidth) -> bool:
    return count_significant_digits(text) > CAPACITY[width]


def classify(text: str, width: FloatWidth) -> PrecisionVerdict:
    """
    Check a literal's source text against its storage width.

    Literals within the width's capacity are never flagged. Longer ones are
    flagged only if storing them changes the written value; a value that
    cannot be materialized (overflow, underflow to zero) is not flagged.

    Malformed text raises MalformedLiteralError.
    """
    if not exceeds_capacity(text, width):
        return NOT_EXCESSIVE

    try:
        suggested = validate(text, width)
    except RoundTripError:
        return NOT_EXCESSIVE

    if suggested is None:
        return NOT_EXCESSIVE
    return PrecisionVerdict.confirmed(render_suggestion(text, suggested))
