from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Optional

from typing_extensions import assert_never

from .graph import ListTypeRef, NamedTypeRef, NullableTypeRef, TypeKind, TypeRef
from .models import ModelBinding
from .typescript import (
    ANY,
    BOOLEAN,
    NULL,
    NUMBER,
    STRING,
    UNDEFINED,
    UNKNOWN,
    ArrayType,
    TypeExpr,
    TypeName,
    union,
)

__all__ = [
    "BUILTIN_SCALARS",
    "Position",
    "resolve_named_type",
    "resolve_type_ref",
]

BUILTIN_SCALARS: Mapping[str, TypeExpr] = {
    "ID": STRING,
    "String": STRING,
    "Int": NUMBER,
    "Float": NUMBER,
    "Boolean": BOOLEAN,
}


class Position(enum.Enum):
    """Where a type reference appears in a resolver signature."""

    ARGUMENT = "argument"
    RETURN = "return"

    @property
    def absent(self) -> TypeExpr:
        return UNDEFINED if self is Position.ARGUMENT else NULL


def resolve_named_type(
    ref: NamedTypeRef,
    binding: ModelBinding,
    *,
    scalars: Optional[Mapping[str, str]] = None,
) -> TypeExpr:
    if ref.kind is TypeKind.SCALAR:
        if scalars and ref.name in scalars:
            return TypeName(scalars[ref.name])
        return BUILTIN_SCALARS.get(ref.name, ANY)
    if ref.kind is TypeKind.ENUM or ref.kind is TypeKind.INPUT:
        return TypeName(ref.name)
    if (
        ref.kind is TypeKind.OBJECT
        or ref.kind is TypeKind.INTERFACE
        or ref.kind is TypeKind.UNION
    ):
        model = binding.get(ref.name)
        return TypeName(model.name) if model is not None else UNKNOWN

    assert_never(ref.kind)


def resolve_type_ref(
    ref: TypeRef,
    binding: ModelBinding,
    *,
    position: Position,
    scalars: Optional[Mapping[str, str]] = None,
) -> TypeExpr:
    """Resolve a schema type reference into a TypeScript type.

    Wrappers are applied innermost out: lists become `Array<T>` and nullable
    references are joined with the absent marker of `position`
    (`null` for results, `undefined` for arguments and input fields).
    """
    if isinstance(ref, NamedTypeRef):
        return resolve_named_type(ref, binding, scalars=scalars)
    if isinstance(ref, ListTypeRef):
        return ArrayType(
            resolve_type_ref(ref.of_type, binding, position=position, scalars=scalars),
        )
    if isinstance(ref, NullableTypeRef):
        inner = resolve_type_ref(
            ref.of_type,
            binding,
            position=position,
            scalars=scalars,
        )
        return union([inner, position.absent])

    assert_never(ref)
