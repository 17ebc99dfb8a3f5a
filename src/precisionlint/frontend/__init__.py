"""
Frontend: Lark grammar, parser and AST transformer
"""

from .parser import Parser, ParseError

__all__ = ["Parser", "ParseError"]
