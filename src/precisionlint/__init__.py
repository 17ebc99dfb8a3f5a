"""
precisionlint: flags float literals written with more digits than their
float type can store, and suggests the shortest literal that keeps the value.
"""

from .analysis import PrecisionVerdict, classify, significant_digits
from .shared.types import FloatWidth

__version__ = "0.1.0"

__all__ = ["PrecisionVerdict", "classify", "significant_digits", "FloatWidth", "__version__"]
