"""
Precision analysis core: digit scanning, classification, round-trip
validation and suggestion rendering for float literals.
"""

from .digits import (
    significant_digits, count_significant_digits, split_suffix, width_from_suffix, numeric_body,
)
from .precision import PrecisionVerdict, VerdictTag, classify, exceeds_capacity
from .round_trip import validate, materialize, shortest_text
from .suggestion import render_suggestion

__all__ = [
    "significant_digits", "count_significant_digits", "split_suffix", "width_from_suffix",
    "numeric_body", "PrecisionVerdict", "VerdictTag", "classify", "exceeds_capacity",
    "validate", "materialize", "shortest_text", "render_suggestion",
]
