"""
Excessive Precision Lint Pass

Rust Pattern: clippy_lints::excessive_precision::ExcessivePrecision

**What it does:** Checks for float literals with a precision greater than
that supported by the underlying type.

**Why is this bad?** The literal is silently rounded when stored.

**Example:**

    // Bad
    let v: f32 = 0.123_456_789_9;

    // Good
    let v: f64 = 0.123_456_789_9;
"""

import logging

from .base import BasePass, LintContext
from .width_resolution import WidthResolutionPass, WidthResolver
from ..analysis.precision import classify
from ..shared.nodes import Program
from ..utils.config import (
    EXCESSIVE_PRECISION_CODE, EXCESSIVE_PRECISION_MESSAGE, EXCESSIVE_PRECISION_HELP,
)

logger = logging.getLogger(__name__)


class ExcessivePrecisionPass(BasePass):
    """Report every float literal whose written digits do not survive storage at its width"""
    requires = [WidthResolutionPass]

    def run(self, program: Program, cx: LintContext) -> None:
        resolver: WidthResolver = cx.get_analysis(WidthResolutionPass)
        flagged = 0

        for literal, width in resolver:
            if width is None:
                logger.debug(f"{literal.location}: no width for {literal.text!r}, skipped")
                continue

            verdict = classify(literal.text, width)
            if not verdict.is_excessive:
                continue

            flagged += 1
            cx.reporter.report_warning(
                message=EXCESSIVE_PRECISION_MESSAGE,
                location=literal.location,
                code=EXCESSIVE_PRECISION_CODE,
                help=EXCESSIVE_PRECISION_HELP.format(suggestion=verdict.suggestion),
                suggestion=verdict.suggestion,
            )

        cx.set_analysis(ExcessivePrecisionPass, flagged)
