"""
Parse-tree to AST transformers
"""

from .base import PrecisionLintTransformer
from .literals import LiteralParser

__all__ = ["PrecisionLintTransformer", "LiteralParser"]
