"""
precisionlint AST Transformer
Converts Lark parse tree to AST nodes
"""

import logging
from typing import List, Optional, Union

from lark import Transformer, v_args
from lark.lexer import Token
from typing_extensions import TypeAlias

from ...shared import (
    SourceLocation, Type, PrimitiveType, ArrayType,
    Program, FunctionDefinition, Parameter, ConstDeclaration, VariableDeclaration,
    ExpressionStatement, BlockExpression, Expression, Statement,
    Identifier, FunctionCall, ArrayLiteral, UnaryExpression, BinaryExpression,
    CastExpression, FloatLiteral, Literal, BinaryOp, UnaryOp,
    PrecisionLintImplementationError,
)
from ...utils.base import extract_location_info
from .literals import LiteralParser

# Lark Meta object contains location information
LarkMeta: TypeAlias = Union[None, object]
DeclarationPart: TypeAlias = Union[Token, Type, Expression]

logger: logging.Logger = logging.getLogger(__name__)


def _is_token(arg: object, kind: str) -> bool:
    return isinstance(arg, Token) and arg.type == kind


@v_args(inline=True, meta=True)
class PrecisionLintTransformer(Transformer):
    """
    AST Transformer with clear errors for grammar/transformer mismatches.

    Anonymous keyword and punctuation tokens are filtered by Lark; declaration
    rules receive their optional parts in grammar order and sort them by kind
    (Token, Type, Expression).
    """

    def __default__(self, data, children, meta):
        """Every grammar rule must map to an AST node; a leftover Tree is a transformer bug"""
        raise PrecisionLintImplementationError(
            f"Missing transformer method for grammar rule '{data}'"
        )

    def __init__(self) -> None:
        super().__init__()
        self.current_file: str = ""  # Must be set by parser before use

    def _extract_location(self, meta: LarkMeta) -> SourceLocation:
        """Extract location from Lark meta object"""
        if not self.current_file:
            raise RuntimeError(
                "Parser bug: current_file not set. "
                "Parser must set current_file before transforming."
            )
        info = extract_location_info(meta)
        return SourceLocation(
            file=self.current_file,
            line=info['line'],
            column=info['column'],
            start=info['start_pos'],
            end=info['end_pos'],
            end_line=info['end_line'],
            end_column=info['end_column'],
        )

    def _token_location(self, token: Token) -> SourceLocation:
        return LiteralParser.token_location(token, self.current_file)

    # =========================================================================
    # PROGRAM STRUCTURE
    # =========================================================================

    def program(self, meta: LarkMeta, *items: Statement) -> Program:
        return Program(statements=list(items), location=self._extract_location(meta))

    def const_item(self, meta: LarkMeta, name: Token, type_annotation: Type, value: Expression) -> ConstDeclaration:
        """Grammar: 'const' NAME ':' type '=' expr ';'"""
        return ConstDeclaration(
            name=str(name),
            type_annotation=type_annotation,
            value=value,
            is_static=False,
            location=self._extract_location(meta),
        )

    def static_item(self, meta: LarkMeta, *args: DeclarationPart) -> ConstDeclaration:
        """Grammar: 'static' MUT? NAME ':' type '=' expr ';'"""
        name = next(str(a) for a in args if _is_token(a, "NAME"))
        type_annotation = next(a for a in args if isinstance(a, Type))
        value = next(a for a in args if isinstance(a, Expression))
        return ConstDeclaration(
            name=name,
            type_annotation=type_annotation,
            value=value,
            is_static=True,
            location=self._extract_location(meta),
        )

    def fn_item(self, meta: LarkMeta, name: Token, *args: Union[Parameter, Type, BlockExpression]) -> FunctionDefinition:
        """Grammar: 'fn' NAME '(' params? ')' ('->' type)? block"""
        parameters = [a for a in args if isinstance(a, Parameter)]
        return_type: Optional[Type] = next((a for a in args if isinstance(a, Type)), None)
        body = args[-1]
        return FunctionDefinition(
            name=str(name),
            parameters=parameters,
            body=body,
            return_type=return_type,
            location=self._extract_location(meta),
        )

    def param(self, meta: LarkMeta, name: Token, param_type: Type) -> Parameter:
        return Parameter(name=str(name), param_type=param_type, location=self._extract_location(meta))

    def block(self, meta: LarkMeta, *children: Union[Statement, Expression]) -> BlockExpression:
        """Grammar: '{' stmt* expr? '}' - a trailing bare expression is the block's value"""
        statements: List[Statement] = list(children)
        final_expr: Optional[Expression] = None
        if statements and isinstance(statements[-1], Expression):
            final_expr = statements.pop()
        return BlockExpression(statements=statements, final_expr=final_expr, location=self._extract_location(meta))

    # =========================================================================
    # STATEMENTS
    # =========================================================================

    def let_stmt(self, meta: LarkMeta, *args: DeclarationPart) -> VariableDeclaration:
        """Grammar: 'let' MUT? NAME (':' type)? ('=' expr)? ';'"""
        return VariableDeclaration(
            name=next(str(a) for a in args if _is_token(a, "NAME")),
            value=next((a for a in args if isinstance(a, Expression)), None),
            type_annotation=next((a for a in args if isinstance(a, Type)), None),
            mutable=any(_is_token(a, "MUT") for a in args),
            location=self._extract_location(meta),
        )

    def expr_stmt(self, meta: LarkMeta, expr: Expression) -> ExpressionStatement:
        return ExpressionStatement(expr=expr, location=self._extract_location(meta))

    # =========================================================================
    # OPERATIONS - USING ALIASES
    # =========================================================================

    def _binary(self, meta: LarkMeta, op: BinaryOp, left: Expression, right: Expression) -> BinaryExpression:
        return BinaryExpression(operator=op, left=left, right=right, location=self._extract_location(meta))

    def add(self, meta: LarkMeta, left: Expression, right: Expression) -> BinaryExpression:
        return self._binary(meta, BinaryOp.ADD, left, right)

    def sub(self, meta: LarkMeta, left: Expression, right: Expression) -> BinaryExpression:
        return self._binary(meta, BinaryOp.SUB, left, right)

    def mul(self, meta: LarkMeta, left: Expression, right: Expression) -> BinaryExpression:
        return self._binary(meta, BinaryOp.MUL, left, right)

    def div(self, meta: LarkMeta, left: Expression, right: Expression) -> BinaryExpression:
        return self._binary(meta, BinaryOp.DIV, left, right)

    def neg(self, meta: LarkMeta, operand: Expression) -> UnaryExpression:
        return UnaryExpression(operator=UnaryOp.NEG, operand=operand, location=self._extract_location(meta))

    def cast_expr(self, meta: LarkMeta, expr: Expression, target_type: Type) -> CastExpression:
        return CastExpression(expr=expr, target_type=target_type, location=self._extract_location(meta))

    def call(self, meta: LarkMeta, name: Token, *arguments: Expression) -> FunctionCall:
        return FunctionCall(function_name=str(name), arguments=list(arguments), location=self._extract_location(meta))

    def array(self, meta: LarkMeta, *elements: Expression) -> ArrayLiteral:
        return ArrayLiteral(elements=list(elements), location=self._extract_location(meta))

    def ident(self, meta: LarkMeta, name: Token) -> Identifier:
        return Identifier(name=str(name), location=self._token_location(name))

    # =========================================================================
    # LITERALS
    # =========================================================================

    def float_lit(self, meta: LarkMeta, token: Token) -> FloatLiteral:
        return LiteralParser.parse_float(token, self._token_location(token))

    def int_lit(self, meta: LarkMeta, token: Token) -> Literal:
        return LiteralParser.parse_int(token, self._token_location(token))

    def string_lit(self, meta: LarkMeta, token: Token) -> Literal:
        return LiteralParser.parse_string(token, self._token_location(token))

    def true_lit(self, meta: LarkMeta) -> Literal:
        return LiteralParser.parse_bool(True, self._extract_location(meta))

    def false_lit(self, meta: LarkMeta) -> Literal:
        return LiteralParser.parse_bool(False, self._extract_location(meta))

    # =========================================================================
    # TYPES
    # =========================================================================

    def named_type(self, meta: LarkMeta, name: Token) -> PrimitiveType:
        return PrimitiveType(str(name))

    def array_type(self, meta: LarkMeta, element_type: Type, length: Token) -> ArrayType:
        length_digits = LiteralParser.parse_int(length, self._token_location(length))
        return ArrayType(element_type=element_type, length=length_digits.value)

    def slice_type(self, meta: LarkMeta, element_type: Type) -> ArrayType:
        return ArrayType(element_type=element_type)
