"""
Lint passes over the AST
"""

from .base import LintContext, BasePass, PassManager
from .width_resolution import WidthResolutionPass, WidthResolver
from .excessive_precision import ExcessivePrecisionPass

__all__ = [
    "LintContext", "BasePass", "PassManager",
    "WidthResolutionPass", "WidthResolver", "ExcessivePrecisionPass",
]
