"""
Type System

Rust Pattern: rustc_middle::ty::Ty

Only what the lint needs: primitive types written in annotations, fixed-size
and unsized array types, and the float storage width of a literal.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import numpy as np


class FloatWidth(Enum):
    """
    Floating-point storage width of a literal.

    Values are the suffix/type spelling, so ``FloatWidth("f32")`` resolves a
    suffix or annotation directly.
    """
    SINGLE = "f32"
    DOUBLE = "f64"

    @property
    def dtype(self) -> type:
        """numpy scalar type used to materialize a value of this width"""
        return _WIDTH_DTYPES[self]

    @property
    def capacity(self) -> int:
        """Decimal digits this width represents exactly (f32::DIGITS / f64::DIGITS)"""
        return CAPACITY[self]

    @classmethod
    def from_name(cls, name: str) -> Optional["FloatWidth"]:
        try:
            return cls(name)
        except ValueError:
            return None


_WIDTH_DTYPES: Dict[FloatWidth, type] = {
    FloatWidth.SINGLE: np.float32,
    FloatWidth.DOUBLE: np.float64,
}

# Fixed at import: 6 for f32, 15 for f64
CAPACITY: Dict[FloatWidth, int] = {
    width: int(np.finfo(dtype).precision) for width, dtype in _WIDTH_DTYPES.items()
}


class TypeKind(Enum):
    """
    Type kind (Rust pattern: rustc_middle::ty::TyKind).
    """
    PRIMITIVE = "primitive"  # i32, f32, bool, etc.
    ARRAY = "array"          # [T; N] and [T]


@dataclass(frozen=True)
class Type:
    """Type representation (immutable, hashable)"""
    kind: TypeKind

    def float_width(self) -> Optional[FloatWidth]:
        """Width of a float value of this type; None when not a float type"""
        return None


@dataclass(frozen=True)
class PrimitiveType(Type):
    """Primitive type (i32, f32, bool, etc.)"""
    name: str

    def __init__(self, name: str):
        super().__init__(kind=TypeKind.PRIMITIVE)
        object.__setattr__(self, 'name', name)

    def __str__(self) -> str:
        return self.name

    def float_width(self) -> Optional[FloatWidth]:
        return FloatWidth.from_name(self.name)


@dataclass(frozen=True)
class ArrayType(Type):
    """
    Array type: ``[T; N]`` (length known) or ``[T]`` (slice).

    Literals in an array literal under this type take the element width.
    """
    element_type: Type
    length: Optional[int] = None

    def __init__(self, element_type: Type, length: Optional[int] = None):
        super().__init__(kind=TypeKind.ARRAY)
        object.__setattr__(self, 'element_type', element_type)
        object.__setattr__(self, 'length', length)

    def __str__(self) -> str:
        if self.length is None:
            return f"[{self.element_type}]"
        return f"[{self.element_type}; {self.length}]"


# Common primitive types
F32 = PrimitiveType("f32")
F64 = PrimitiveType("f64")
