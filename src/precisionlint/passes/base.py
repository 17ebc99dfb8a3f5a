"""
Base Pass System

Rust Pattern: rustc_lint::LateLintPass scheduling
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Type

from ..shared.errors import DiagnosticReporter
from ..shared.nodes import Program

logger = logging.getLogger(__name__)


class LintContext:
    """
    Lint context - single source of truth for per-file lint state
    (Rust naming: rustc_lint::LateContext).

    - Analysis results stored here (not in passes)
    - One context per linted file; passes never share state across files
    """

    def __init__(self, source_file: str, source: str):
        self.source_file = source_file
        self.source_files: Dict[str, str] = {source_file: source}
        self.reporter: DiagnosticReporter = DiagnosticReporter(self.source_files)
        self._analysis_results: Dict[Type['BasePass'], Any] = {}

    def get_analysis(self, pass_class: Type['BasePass']) -> Any:
        """Get analysis results from a pass"""
        if pass_class not in self._analysis_results:
            raise RuntimeError(f"Analysis {pass_class.__name__} not available")
        return self._analysis_results[pass_class]

    def set_analysis(self, pass_class: Type['BasePass'], results: Any) -> None:
        """Store analysis results"""
        self._analysis_results[pass_class] = results


class BasePass(ABC):
    """
    Base class for all passes (all operate on the AST).

    - Explicit dependencies via `requires`
    - Pass results stored in LintContext (not in pass)
    - Passes never mutate the AST
    """
    requires: List[Type['BasePass']] = []

    @abstractmethod
    def run(self, program: Program, cx: LintContext) -> None:
        raise NotImplementedError


class PassManager:
    """
    Pass manager with dependency resolution.

    - Automatic dependency resolution (topological sort)
    - Passes run in dependency order
    - Fresh pass instances per run, so one manager can lint many files
    """

    def __init__(self):
        self.passes: List[Type[BasePass]] = []
        self._dependency_graph: Dict[Type[BasePass], set] = {}

    def register_pass(self, pass_class: Type[BasePass]) -> None:
        """Register a pass"""
        self.passes.append(pass_class)
        self._dependency_graph[pass_class] = set(pass_class.requires)

    def run_all(self, program: Program, cx: LintContext) -> None:
        for pass_class in self._topological_sort():
            logger.debug(f"Running {pass_class.__name__} on {cx.source_file}")
            pass_class().run(program, cx)

    def _topological_sort(self) -> List[Type[BasePass]]:
        """Topological sort of passes by dependencies"""
        missing = {
            dep for deps in self._dependency_graph.values() for dep in deps
            if dep not in self._dependency_graph
        }
        if missing:
            names = ", ".join(sorted(d.__name__ for d in missing))
            raise RuntimeError(f"Required passes not registered: {names}")

        in_degree = {p: len(self._dependency_graph[p]) for p in self.passes}
        queue = [p for p, degree in in_degree.items() if degree == 0]
        result = []

        while queue:
            pass_class = queue.pop(0)
            result.append(pass_class)

            for other_pass in self.passes:
                if pass_class in self._dependency_graph[other_pass]:
                    in_degree[other_pass] -= 1
                    if in_degree[other_pass] == 0:
                        queue.append(other_pass)

        if len(result) != len(self.passes):
            raise RuntimeError("Circular dependency detected in passes")

        return result
