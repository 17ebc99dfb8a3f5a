"""
AST (Abstract Syntax Tree) Definitions

Minimal Rust-like surface: items (const/static/fn), statements, and the
expressions a float literal can appear in.

Visitor Pattern Support:
- All AST nodes have accept() methods for polymorphic dispatch
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union, TYPE_CHECKING, TypeVar

from .source_location import SourceLocation
from .types import Type

if TYPE_CHECKING:
    from .ast_visitor import ASTVisitor

T = TypeVar('T')


class NodeType(Enum):
    """AST node types"""
    PROGRAM = "program"
    FUNCTION_DEF = "function_def"
    PARAMETER = "parameter"
    CONST_DECL = "const_decl"
    VARIABLE_DECL = "variable_decl"
    EXPR_STMT = "expr_stmt"
    BLOCK_EXPR = "block_expr"
    FLOAT_LITERAL = "float_literal"
    LITERAL = "literal"
    IDENTIFIER = "identifier"
    FUNCTION_CALL = "function_call"
    ARRAY_LITERAL = "array_literal"
    UNARY_OP = "unary_op"
    BINARY_OP = "binary_op"
    CAST = "cast"


class BinaryOp(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class UnaryOp(Enum):
    NEG = "-"


@dataclass
class ASTNode:
    """Base AST node"""
    node_type: NodeType
    location: Optional[SourceLocation]

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement accept()")


class Expression(ASTNode):
    """Base class for expressions"""


class Statement(ASTNode):
    """Base class for statements and items"""


# ============================================================================
# Expressions
# ============================================================================

@dataclass
class FloatLiteral(Expression):
    """
    Float literal, kept as written.

    ``text`` is the exact token (separators, exponent and suffix included);
    ``location`` spans exactly that token.
    """
    text: str

    def __init__(self, text: str, location: SourceLocation = None):
        super().__init__(NodeType.FLOAT_LITERAL, location)
        self.text = text

    def __str__(self) -> str:
        return self.text

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_float_literal(self)


@dataclass
class Literal(Expression):
    """Non-float literal value (integer, string, boolean)"""
    value: Union[int, str, bool]

    def __init__(self, value: Union[int, str, bool], location: SourceLocation = None):
        super().__init__(NodeType.LITERAL, location)
        self.value = value

    def __str__(self) -> str:
        return str(self.value)

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_literal(self)


@dataclass
class Identifier(Expression):
    name: str

    def __init__(self, name: str, location: SourceLocation = None):
        super().__init__(NodeType.IDENTIFIER, location)
        self.name = name

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_identifier(self)


@dataclass
class FunctionCall(Expression):
    function_name: str
    arguments: List[Expression]

    def __init__(self, function_name: str, arguments: List[Expression], location: SourceLocation = None):
        super().__init__(NodeType.FUNCTION_CALL, location)
        self.function_name = function_name
        self.arguments = arguments

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_function_call(self)


@dataclass
class ArrayLiteral(Expression):
    elements: List[Expression]

    def __init__(self, elements: List[Expression], location: SourceLocation = None):
        super().__init__(NodeType.ARRAY_LITERAL, location)
        self.elements = elements

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_array_literal(self)


@dataclass
class UnaryExpression(Expression):
    operator: UnaryOp
    operand: Expression

    def __init__(self, operator: UnaryOp, operand: Expression, location: SourceLocation = None):
        super().__init__(NodeType.UNARY_OP, location)
        self.operator = operator
        self.operand = operand

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_unary_expression(self)


@dataclass
class BinaryExpression(Expression):
    operator: BinaryOp
    left: Expression
    right: Expression

    def __init__(self, operator: BinaryOp, left: Expression, right: Expression, location: SourceLocation = None):
        super().__init__(NodeType.BINARY_OP, location)
        self.operator = operator
        self.left = left
        self.right = right

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_binary_expression(self)


@dataclass
class CastExpression(Expression):
    """``expr as T``"""
    expr: Expression
    target_type: Type

    def __init__(self, expr: Expression, target_type: Type, location: SourceLocation = None):
        super().__init__(NodeType.CAST, location)
        self.expr = expr
        self.target_type = target_type

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_cast_expression(self)


@dataclass
class BlockExpression(Expression):
    """``{ stmt* expr? }`` - ``final_expr`` is the tail (value) expression"""
    statements: List[Statement] = field(default_factory=list)
    final_expr: Optional[Expression] = None

    def __init__(self, statements: List[Statement], final_expr: Optional[Expression] = None,
                 location: SourceLocation = None):
        super().__init__(NodeType.BLOCK_EXPR, location)
        self.statements = statements
        self.final_expr = final_expr

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_block_expression(self)


# ============================================================================
# Statements and items
# ============================================================================

@dataclass
class ConstDeclaration(Statement):
    """``const NAME: T = expr;`` or ``static NAME: T = expr;``"""
    name: str
    type_annotation: Type
    value: Expression
    is_static: bool = False

    def __init__(self, name: str, type_annotation: Type, value: Expression,
                 is_static: bool = False, location: SourceLocation = None):
        super().__init__(NodeType.CONST_DECL, location)
        self.name = name
        self.type_annotation = type_annotation
        self.value = value
        self.is_static = is_static

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_const_declaration(self)


@dataclass
class VariableDeclaration(Statement):
    """``let [mut] name[: T] [= expr];``"""
    name: str
    value: Optional[Expression] = None
    type_annotation: Optional[Type] = None
    mutable: bool = False

    def __init__(self, name: str, value: Optional[Expression] = None,
                 type_annotation: Optional[Type] = None, mutable: bool = False,
                 location: SourceLocation = None):
        super().__init__(NodeType.VARIABLE_DECL, location)
        self.name = name
        self.value = value
        self.type_annotation = type_annotation
        self.mutable = mutable

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_variable_declaration(self)


@dataclass
class ExpressionStatement(Statement):
    expr: Expression

    def __init__(self, expr: Expression, location: SourceLocation = None):
        super().__init__(NodeType.EXPR_STMT, location)
        self.expr = expr

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_expression_statement(self)


@dataclass
class Parameter(ASTNode):
    name: str
    param_type: Type

    def __init__(self, name: str, param_type: Type, location: SourceLocation = None):
        super().__init__(NodeType.PARAMETER, location)
        self.name = name
        self.param_type = param_type

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_parameter(self)


@dataclass
class FunctionDefinition(Statement):
    name: str
    parameters: List[Parameter]
    body: BlockExpression
    return_type: Optional[Type] = None

    def __init__(self, name: str, parameters: List[Parameter], body: BlockExpression,
                 return_type: Optional[Type] = None, location: SourceLocation = None):
        super().__init__(NodeType.FUNCTION_DEF, location)
        self.name = name
        self.parameters = parameters
        self.body = body
        self.return_type = return_type

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_function_definition(self)


@dataclass
class Program(ASTNode):
    statements: List[Statement]

    def __init__(self, statements: List[Statement], location: SourceLocation = None):
        super().__init__(NodeType.PROGRAM, location)
        self.statements = statements

    def accept(self, visitor: 'ASTVisitor[T]') -> T:
        return visitor.visit_program(self)

    def functions(self) -> List[FunctionDefinition]:
        return [s for s in self.statements if isinstance(s, FunctionDefinition)]
