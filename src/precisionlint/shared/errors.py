"""
Diagnostic Reporting

Rust Pattern: rustc_errors::Diagnostic
"""

import os
import sys
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional, List, Dict

from .source_location import SourceLocation
from ..utils.config import COLOR_ENV_VAR, NO_COLOR_ENV_VAR, PARSE_ERROR_CODE, SPAN_STOP_CHARS


# ---------------------------------------------------------------------------
# ANSI color helpers (disabled when NO_COLOR is set)
# ---------------------------------------------------------------------------

def _use_color() -> bool:
    if os.environ.get(NO_COLOR_ENV_VAR):
        return False
    explicit = os.environ.get(COLOR_ENV_VAR, "").lower()
    if explicit in ("0", "false", "no", "never"):
        return False
    return True

_BOLD   = "\033[1m"
_RED    = "\033[31m"
_BLUE   = "\033[34m"
_CYAN   = "\033[36m"
_YELLOW = "\033[33m"
_RESET  = "\033[0m"

def _style(text: str, *codes: str, color: bool = True) -> str:
    if not color:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{_RESET}" if prefix else text


class Severity(Enum):
    """Diagnostic level (Rust pattern: rustc_errors::Level)"""
    ERROR = "error"
    WARNING = "warning"

    @property
    def color(self) -> str:
        return _RED if self is Severity.ERROR else _YELLOW


# ---------------------------------------------------------------------------
# Diagnostic dataclass
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Diagnostic:
    """
    One reported finding.

    Rust Pattern: rustc_errors::Diagnostic

    ``suggestion`` is the replacement for the text covered by ``location``,
    meant for mechanical substitution (see ``compiler.fixes``).
    """
    message: str
    location: Optional[SourceLocation]
    code: Optional[str] = None
    severity: Severity = Severity.ERROR
    help: Optional[str] = None
    note: Optional[str] = None
    label: Optional[str] = None
    suggestion: Optional[str] = None


# ---------------------------------------------------------------------------
# Formatting engine
# ---------------------------------------------------------------------------

def _format_diagnostic(
    diagnostic: Diagnostic,
    source_files: Dict[str, str],
    color: bool = False,
) -> str:
    """
    Render a single diagnostic in rustc style.

    Example output (plain, no color)::

        warning[excessive_precision]: float has excessive precision
         --> main.rs:1:18
          |
        1 | const BAD: f32 = 1.123_456_789;
          |                  ^^^^^^^^^^^^^
          |
          = help: consider changing the type or truncating it to: `1.1234568`
    """
    out: List[str] = []
    level_color = diagnostic.severity.color

    # ---- header -----------------------------------------------------------
    code_str = f"[{diagnostic.code}]" if diagnostic.code else ""
    out.append(
        _style(f"{diagnostic.severity.value}{code_str}", _BOLD, level_color, color=color)
        + _style(f": {diagnostic.message}", _BOLD, color=color)
    )

    # ---- location arrow ---------------------------------------------------
    if diagnostic.location is None:
        out.append(_style(" --> ", _BOLD, _BLUE, color=color) + "<unknown location>")
        _append_annotations(out, diagnostic, 1, color)
        return "\n".join(out)

    loc = diagnostic.location

    # ---- source snippet ---------------------------------------------------
    source = source_files.get(loc.file)
    if source is None:
        out.append(
            _style(" --> ", _BOLD, _BLUE, color=color)
            + f"{loc.file}:{loc.line}:{loc.column}"
        )
        _append_annotations(out, diagnostic, 1, color)
        return "\n".join(out)

    src_lines = source.split("\n")

    err_line = loc.line
    err_col = max(loc.column, 1)
    single_line_end = loc.end_column if (loc.end_line in (0, err_line)) else 0

    gw = max(len(str(err_line)), 1)

    def empty_gutter() -> str:
        return _style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color)

    def code_gutter(num: int) -> str:
        return _style(str(num).rjust(gw) + " | ", _BOLD, _BLUE, color=color)

    def underline_gutter() -> str:
        return _style(" " * (gw + 1) + "| ", _BOLD, _BLUE, color=color)

    out.append(
        _style(" " * gw + "--> ", _BOLD, _BLUE, color=color)
        + f"{loc.file}:{loc.line}:{loc.column}"
    )
    out.append(empty_gutter())

    idx = err_line - 1
    code_line = src_lines[idx] if 0 <= idx < len(src_lines) else ""
    out.append(f"{code_gutter(err_line)}{code_line}")

    col_start = err_col - 1
    if single_line_end > err_col:
        span_len = single_line_end - err_col
    else:
        span_len = _guess_span(code_line, col_start)
    carets = " " * col_start + "^" * max(1, span_len)
    label_suffix = f" {diagnostic.label}" if diagnostic.label else ""
    out.append(f"{underline_gutter()}{_style(carets + label_suffix, _BOLD, level_color, color=color)}")

    _append_annotations(out, diagnostic, gw, color)

    return "\n".join(out)


def _guess_span(code_line: str, col_start: int) -> int:
    """Guess token length when end_column is unavailable."""
    if col_start >= len(code_line):
        return 1
    length = 0
    for ch in code_line[col_start:]:
        if ch in SPAN_STOP_CHARS:
            break
        length += 1
    return max(1, length)


def _append_annotations(
    out: List[str],
    diagnostic: Diagnostic,
    gw: int,
    color: bool,
) -> None:
    if not (diagnostic.help or diagnostic.note):
        return
    out.append(_style(" " * (gw + 1) + "|", _BOLD, _BLUE, color=color))
    pad = " " * (gw + 1)
    if diagnostic.help:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("help: ", _BOLD, color=color)
            + diagnostic.help
        )
    if diagnostic.note:
        out.append(
            _style(f"{pad}= ", _BOLD, _CYAN, color=color)
            + _style("note: ", _BOLD, color=color)
            + diagnostic.note
        )


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


# ---------------------------------------------------------------------------
# DiagnosticReporter
# ---------------------------------------------------------------------------

class DiagnosticReporter:
    """
    Diagnostic sink with Rust-style formatting.

    Rust Pattern: rustc_errors::Emitter

    Append-only; ``report`` may be called from several threads.
    """

    def __init__(self, source_files: Optional[Dict[str, str]] = None):
        self.source_files: Dict[str, str] = source_files if source_files is not None else {}
        self.diagnostics: List[Diagnostic] = []
        self._lock = threading.Lock()

    def report(self, diagnostic: Diagnostic) -> None:
        with self._lock:
            self.diagnostics.append(diagnostic)

    def report_error(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help: Optional[str] = None,
        note: Optional[str] = None,
        label: Optional[str] = None,
    ) -> None:
        self.report(Diagnostic(
            message=message,
            location=location,
            code=code,
            severity=Severity.ERROR,
            help=help,
            note=note,
            label=label,
        ))

    def report_warning(
        self,
        message: str,
        location: Optional[SourceLocation],
        code: Optional[str] = None,
        help: Optional[str] = None,
        suggestion: Optional[str] = None,
    ) -> None:
        self.report(Diagnostic(
            message=message,
            location=location,
            code=code,
            severity=Severity.WARNING,
            help=help,
            suggestion=suggestion,
        ))

    def errors(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.ERROR]

    def warnings(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.WARNING]

    def has_errors(self) -> bool:
        return any(d.severity is Severity.ERROR for d in self.diagnostics)

    def has_warnings(self) -> bool:
        return any(d.severity is Severity.WARNING for d in self.diagnostics)

    def format_diagnostic(self, diagnostic: Diagnostic, color: Optional[bool] = None) -> str:
        use_color = color if color is not None else _use_color()
        return _format_diagnostic(diagnostic, self.source_files, color=use_color)

    def summary(self, color: Optional[bool] = None) -> Optional[str]:
        """``warning: 2 warnings emitted`` style trailer; None when nothing was reported"""
        use_color = color if color is not None else _use_color()
        n_errors = len(self.errors())
        n_warnings = len(self.warnings())
        if n_errors:
            return (
                _style("error", _BOLD, _RED, color=use_color)
                + _style(f": aborting due to {_plural(n_errors, 'previous error')}", _BOLD, color=use_color)
            )
        if n_warnings:
            return (
                _style("warning", _BOLD, _YELLOW, color=use_color)
                + _style(f": {_plural(n_warnings, 'warning')} emitted", _BOLD, color=use_color)
            )
        return None

    def format_all(self, color: Optional[bool] = None) -> str:
        parts = [self.format_diagnostic(d, color=color) for d in self.diagnostics]
        trailer = self.summary(color=color)
        if trailer:
            parts.append(trailer)
        return "\n\n".join(parts)

    def print_all(self, stream=None) -> None:
        stream = stream if stream is not None else sys.stderr
        if not self.diagnostics:
            return
        print(self.format_all(color=_use_color()), file=stream)


# ============================================================================
# Exception Classes
# ============================================================================

class PrecisionLintError(Exception):
    """Base exception for all precisionlint errors"""
    def __init__(self, message: str, location: Optional[SourceLocation] = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def __str__(self):
        if self.location:
            return f"{self.message}\n --> {self.location}"
        return self.message


class PrecisionLintSourceError(PrecisionLintError):
    """
    Error in the linted source code, rendered like a diagnostic.

    Use this for errors the user can fix in their source (syntax errors,
    unreadable files).
    """
    def __init__(self,
                 message: str,
                 location: Optional[SourceLocation] = None,
                 error_code: str = PARSE_ERROR_CODE,
                 source_code: Optional[str] = None,
                 help: Optional[str] = None):
        super().__init__(message, location)
        self.error_code = error_code
        self.source_code = source_code
        self.help_text = help

    def to_diagnostic(self) -> Diagnostic:
        return Diagnostic(
            message=self.message,
            location=self.location,
            code=self.error_code,
            severity=Severity.ERROR,
            help=self.help_text,
        )

    def __str__(self):
        source_files: Dict[str, str] = {}
        if self.source_code and self.location:
            source_files[self.location.file] = self.source_code
        return _format_diagnostic(self.to_diagnostic(), source_files, color=_use_color())


class PrecisionLintImplementationError(Exception):
    """
    Error in the lint's own logic (not in the user's source).

    Never use this for errors in linted code - use PrecisionLintSourceError instead.
    """
    def __init__(self, message: str, error_code: str = "E9999"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code

    def __str__(self):
        return f"[{self.error_code}] {self.message}"


class MalformedLiteralError(PrecisionLintImplementationError):
    """A literal that upstream syntax validation should have rejected reached the analysis core"""
    def __init__(self, text: str, reason: str):
        super().__init__(f"malformed float literal {text!r}: {reason}", error_code="E9001")
        self.text = text
        self.reason = reason


class RoundTripError(PrecisionLintError):
    """The literal's value cannot be materialized at the target width (overflow/underflow)"""
