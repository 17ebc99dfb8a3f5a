"""
Lint driver and fix application
"""

from .driver import LintDriver, LintResult
from .fixes import apply_suggestions

__all__ = ["LintDriver", "LintResult", "apply_suggestions"]
