"""
Literal Parser - Extracted from PrecisionLintTransformer
Handles parsing of all literal tokens (floats, integers, strings, booleans)
"""

import re

from lark.lexer import Token

from ...shared import FloatLiteral, Literal, SourceLocation
from ...utils.config import GROUP_SEPARATOR

_INT_SUFFIX_RE = re.compile(r"[iu](?:8|16|32|64|128|size)$")


class LiteralParser:
    """Dedicated parser for literal tokens"""

    @staticmethod
    def token_location(token: Token, current_file: str) -> SourceLocation:
        """Span of exactly one token (what a fix replaces)"""
        return SourceLocation(
            file=current_file,
            line=token.line or 0,
            column=token.column or 0,
            start=token.start_pos or 0,
            end=token.end_pos or 0,
            end_line=token.end_line or 0,
            end_column=token.end_column or 0,
        )

    @staticmethod
    def parse_float(token: Token, location: SourceLocation) -> FloatLiteral:
        """Float literals keep their source text; the value is never computed here"""
        return FloatLiteral(text=str(token), location=location)

    @staticmethod
    def parse_int(token: Token, location: SourceLocation) -> Literal:
        digits = _INT_SUFFIX_RE.sub("", str(token)).replace(GROUP_SEPARATOR, "")
        return Literal(value=int(digits), location=location)

    @staticmethod
    def parse_string(token: Token, location: SourceLocation) -> Literal:
        quoted = str(token)
        return Literal(value=quoted[1:-1], location=location)

    @staticmethod
    def parse_bool(value: bool, location: SourceLocation) -> Literal:
        return Literal(value=value, location=location)
