"""
AST Visitor Pattern

Abstract visitor with default traversal for non-leaf nodes. Leaf nodes
(literals, identifiers) must be handled explicitly by every visitor.
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .nodes import (
        Program, FunctionDefinition, Parameter, ConstDeclaration, VariableDeclaration,
        ExpressionStatement, BlockExpression, FloatLiteral, Literal, Identifier,
        FunctionCall, ArrayLiteral, UnaryExpression, BinaryExpression, CastExpression,
    )

T = TypeVar('T')


class ASTVisitor(ABC, Generic[T]):
    """
    Base AST visitor with default traversal for all nodes.

    Usage:
        class LiteralCollector(ASTVisitor[None]):
            def visit_float_literal(self, node) -> None:
                self.found.append(node)

            def visit_literal(self, node) -> None:
                pass

            def visit_identifier(self, node) -> None:
                pass
    """

    # Leaf nodes - NO DEFAULT IMPLEMENTATION
    @abstractmethod
    def visit_float_literal(self, node: 'FloatLiteral') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_float_literal()")

    @abstractmethod
    def visit_literal(self, node: 'Literal') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_literal()")

    @abstractmethod
    def visit_identifier(self, node: 'Identifier') -> T:
        raise NotImplementedError(f"{self.__class__.__name__} must implement visit_identifier()")

    # Default traversal
    def visit_program(self, node: 'Program') -> Optional[T]:
        for stmt in node.statements:
            stmt.accept(self)
        return None

    def visit_function_definition(self, node: 'FunctionDefinition') -> Optional[T]:
        for param in node.parameters:
            param.accept(self)
        node.body.accept(self)
        return None

    def visit_parameter(self, node: 'Parameter') -> Optional[T]:
        return None

    def visit_const_declaration(self, node: 'ConstDeclaration') -> Optional[T]:
        node.value.accept(self)
        return None

    def visit_variable_declaration(self, node: 'VariableDeclaration') -> Optional[T]:
        if node.value is not None:
            node.value.accept(self)
        return None

    def visit_expression_statement(self, node: 'ExpressionStatement') -> Optional[T]:
        node.expr.accept(self)
        return None

    def visit_block_expression(self, node: 'BlockExpression') -> Optional[T]:
        for stmt in node.statements:
            stmt.accept(self)
        if node.final_expr is not None:
            node.final_expr.accept(self)
        return None

    def visit_function_call(self, node: 'FunctionCall') -> Optional[T]:
        for arg in node.arguments:
            arg.accept(self)
        return None

    def visit_array_literal(self, node: 'ArrayLiteral') -> Optional[T]:
        for element in node.elements:
            element.accept(self)
        return None

    def visit_unary_expression(self, node: 'UnaryExpression') -> Optional[T]:
        node.operand.accept(self)
        return None

    def visit_binary_expression(self, node: 'BinaryExpression') -> Optional[T]:
        node.left.accept(self)
        node.right.accept(self)
        return None

    def visit_cast_expression(self, node: 'CastExpression') -> Optional[T]:
        node.expr.accept(self)
        return None
