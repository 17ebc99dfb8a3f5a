"""
Shared components: spans, diagnostics, types and AST.
"""

from .source_location import SourceLocation
from .errors import (
    Diagnostic, DiagnosticReporter, Severity,
    PrecisionLintError, PrecisionLintSourceError, PrecisionLintImplementationError,
    MalformedLiteralError, RoundTripError,
)
from .types import (
    FloatWidth, CAPACITY, Type, TypeKind, PrimitiveType, ArrayType, F32, F64,
)
from .nodes import (
    ASTNode, Expression, Statement, Program, NodeType, BinaryOp, UnaryOp,
    FunctionDefinition, Parameter, ConstDeclaration, VariableDeclaration, ExpressionStatement,
    BlockExpression, FloatLiteral, Literal, Identifier, FunctionCall, ArrayLiteral,
    UnaryExpression, BinaryExpression, CastExpression,
)
from .ast_visitor import ASTVisitor
