"""
Width Resolution Pass

Literal context resolver: decides the storage width of every float literal
from its surroundings, so the lint pass never looks at call sites itself.

Precedence for one literal:
1. its own suffix (``1.5f32``);
2. the type expected by its context - const/static/let annotation, array
   element type under an annotated array, parameter type of a call to a
   function defined in the same file, the function return type for a body's
   tail expression. Unary minus, parentheses and arithmetic operands pass the
   expected type through; a cast clears it.

No suffix and no expected float type means no width: the literal is not
checked.
"""

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional, Tuple

from .base import BasePass, LintContext
from ..analysis.digits import width_from_suffix
from ..shared.ast_visitor import ASTVisitor
from ..shared.nodes import (
    Program, FunctionDefinition, ConstDeclaration, VariableDeclaration, ExpressionStatement,
    FloatLiteral, Literal, Identifier, FunctionCall, ArrayLiteral, CastExpression,
)
from ..shared.types import FloatWidth, Type, ArrayType

logger = logging.getLogger(__name__)


class WidthResolver:
    """Resolved width per float literal occurrence (keyed by node identity)"""

    def __init__(self):
        self._widths: Dict[int, Optional[FloatWidth]] = {}
        self._literals: List[FloatLiteral] = []

    def record(self, literal: FloatLiteral, width: Optional[FloatWidth]) -> None:
        if id(literal) not in self._widths:
            self._literals.append(literal)
        self._widths[id(literal)] = width

    def resolve(self, literal: FloatLiteral) -> Optional[FloatWidth]:
        return self._widths.get(id(literal))

    def __iter__(self) -> Iterator[Tuple[FloatLiteral, Optional[FloatWidth]]]:
        for literal in self._literals:
            yield literal, self._widths[id(literal)]

    def __len__(self) -> int:
        return len(self._literals)


class WidthResolutionVisitor(ASTVisitor[None]):
    """Walks the AST carrying the type expected of the current expression"""

    def __init__(self, signatures: Dict[str, FunctionDefinition]):
        self.signatures = signatures
        self.expected: Optional[Type] = None
        self.resolver = WidthResolver()

    @contextmanager
    def _expecting(self, ty: Optional[Type]):
        saved = self.expected
        self.expected = ty
        try:
            yield
        finally:
            self.expected = saved

    # Leaves
    def visit_float_literal(self, node: FloatLiteral) -> None:
        width = width_from_suffix(node.text)
        if width is None and self.expected is not None:
            width = self.expected.float_width()
        self.resolver.record(node, width)

    def visit_literal(self, node: Literal) -> None:
        pass

    def visit_identifier(self, node: Identifier) -> None:
        pass

    # Contexts that set the expected type
    def visit_const_declaration(self, node: ConstDeclaration) -> None:
        with self._expecting(node.type_annotation):
            node.value.accept(self)

    def visit_variable_declaration(self, node: VariableDeclaration) -> None:
        if node.value is None:
            return
        with self._expecting(node.type_annotation):
            node.value.accept(self)

    def visit_expression_statement(self, node: ExpressionStatement) -> None:
        with self._expecting(None):
            node.expr.accept(self)

    def visit_function_definition(self, node: FunctionDefinition) -> None:
        body = node.body
        for stmt in body.statements:
            with self._expecting(None):
                stmt.accept(self)
        if body.final_expr is not None:
            with self._expecting(node.return_type):
                body.final_expr.accept(self)

    def visit_function_call(self, node: FunctionCall) -> None:
        callee = self.signatures.get(node.function_name)
        params = callee.parameters if callee is not None else []
        for i, arg in enumerate(node.arguments):
            with self._expecting(params[i].param_type if i < len(params) else None):
                arg.accept(self)

    def visit_array_literal(self, node: ArrayLiteral) -> None:
        element_type = self.expected.element_type if isinstance(self.expected, ArrayType) else None
        with self._expecting(element_type):
            for element in node.elements:
                element.accept(self)

    def visit_cast_expression(self, node: CastExpression) -> None:
        with self._expecting(None):
            node.expr.accept(self)

    # Unary and binary expressions keep the expected type (default traversal)


class WidthResolutionPass(BasePass):
    """
    Resolve the float width of every literal occurrence.

    Result (``cx.get_analysis(WidthResolutionPass)``): a WidthResolver.
    """
    requires = []

    def run(self, program: Program, cx: LintContext) -> None:
        signatures = {fn.name: fn for fn in program.functions()}
        visitor = WidthResolutionVisitor(signatures)
        program.accept(visitor)

        resolver = visitor.resolver
        unresolved = sum(1 for _, width in resolver if width is None)
        logger.debug(
            f"Resolved widths for {len(resolver) - unresolved}/{len(resolver)} float literals "
            f"in {cx.source_file}"
        )
        cx.set_analysis(WidthResolutionPass, resolver)
