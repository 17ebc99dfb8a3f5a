"""
Parser

Rust Pattern: rustc_parse
"""

import logging
from pathlib import Path
from typing import Optional

from lark import Lark
from lark.exceptions import UnexpectedInput, VisitError, LarkError

from ..shared.errors import PrecisionLintSourceError
from ..shared.nodes import Program
from ..shared.source_location import SourceLocation
from ..utils.config import DEFAULT_PARSER_CACHE_FILE, DEFAULT_SOURCE_FILE, PARSE_ERROR_CODE
from .transformers.base import PrecisionLintTransformer

logger = logging.getLogger("precisionlint.frontend.parser")

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"


class Parser:
    """
    Parser (Rust naming: rustc_parse).

    - Takes source code, returns AST
    - Preserves source locations (every float literal keeps its exact span)
    - Converts Lark errors to ParseError
    - Uses Lark LALR with native caching
    """

    def __init__(self, cache_file: str = DEFAULT_PARSER_CACHE_FILE):
        self.parser = Lark.open(
            str(GRAMMAR_PATH),
            start='program',
            parser='lalr',              # Required for caching
            cache=cache_file,           # Built-in caching
            propagate_positions=True,   # Enable position tracking for diagnostics
            maybe_placeholders=False,
        )
        self.transformer = PrecisionLintTransformer()

    def parse(self, source: str, source_file: str = DEFAULT_SOURCE_FILE) -> Program:
        """
        Parse source code to AST.

        Rust Pattern: rustc_parse::parse()
        """
        self.transformer.current_file = source_file
        try:
            tree = self.parser.parse(source)
        except UnexpectedInput as e:
            # UnexpectedEOF reports line/column -1
            location = SourceLocation(
                file=source_file,
                line=max(getattr(e, 'line', 1) or 1, 1),
                column=max(getattr(e, 'column', 1) or 1, 1),
            )
            raise ParseError(f"Parse error: {_first_line(str(e))}", source_file, location, source) from e
        except LarkError as e:
            raise ParseError(f"Parse error: {e}", source_file, source_code=source) from e

        try:
            ast = self.transformer.transform(tree)
        except VisitError as e:
            raise ParseError(f"Parse error: {e.orig_exc}", source_file, source_code=source) from e

        logger.debug(f"Parsed {source_file}: {len(ast.statements)} top-level items")
        return ast


def _first_line(message: str) -> str:
    return message.strip().split("\n", 1)[0]


class ParseError(PrecisionLintSourceError):
    """Source that does not parse; reported as an E0001 diagnostic at the offending token"""
    def __init__(self, message: str, source_file: str, location: Optional[SourceLocation] = None,
                 source_code: Optional[str] = None):
        super().__init__(
            message,
            location=location or SourceLocation(file=source_file, line=1, column=1),
            error_code=PARSE_ERROR_CODE,
            source_code=source_code,
        )
        self.source_file = source_file
