"""
Lint Driver

Rust Pattern: rustc_driver::driver
"""

import logging
from typing import List, Optional

from ..frontend.parser import Parser, ParseError
from ..passes.base import LintContext, PassManager
from ..passes.excessive_precision import ExcessivePrecisionPass
from ..passes.width_resolution import WidthResolutionPass
from ..shared.errors import Diagnostic
from ..utils.config import DEFAULT_SOURCE_FILE

logger = logging.getLogger(__name__)


class LintResult:
    """Lint result for one source file"""
    def __init__(self, cx: LintContext, success: bool = False):
        self.cx = cx
        self.success = success

    @property
    def source_file(self) -> str:
        return self.cx.source_file

    @property
    def source(self) -> str:
        return self.cx.source_files[self.cx.source_file]

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return list(self.cx.reporter.diagnostics)

    @property
    def warnings(self) -> List[Diagnostic]:
        return self.cx.reporter.warnings()

    def has_errors(self) -> bool:
        return self.cx.reporter.has_errors()

    def has_warnings(self) -> bool:
        return self.cx.reporter.has_warnings()

    def format(self, color: Optional[bool] = None) -> str:
        return self.cx.reporter.format_all(color=color)


class LintDriver:
    """
    Lint driver (Rust naming: rustc_driver::driver).

    - Orchestrates parse -> width resolution -> lint
    - Reports parse errors as diagnostics instead of raising
    - Stateless between files: one driver can lint any number of sources
    """

    def __init__(self):
        self.pass_manager = PassManager()
        self.parser = Parser()
        self._register_passes()

    def _register_passes(self) -> None:
        """
        Pass order:
        1. WidthResolutionPass (literal context -> float width)
        2. ExcessivePrecisionPass (classify + report)
        """
        self.pass_manager.register_pass(WidthResolutionPass)
        self.pass_manager.register_pass(ExcessivePrecisionPass)

    def lint(self, source: str, source_file: str = DEFAULT_SOURCE_FILE) -> LintResult:
        cx = LintContext(source_file, source)

        try:
            program = self.parser.parse(source, source_file)
        except ParseError as e:
            cx.reporter.report(e.to_diagnostic())
            logger.debug(f"{source_file}: {e.message}")
            return LintResult(cx, success=False)

        self.pass_manager.run_all(program, cx)
        logger.debug(f"{source_file}: {len(cx.reporter.warnings())} warning(s)")
        return LintResult(cx, success=True)
