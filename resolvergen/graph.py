"""Immutable schema graph consumed by the declaration compiler.

Every value here is built once per generation run (see
:mod:`resolvergen.introspection`) and never mutated afterwards.
"""

from __future__ import annotations

import dataclasses
import enum
from typing import Optional, Union

from typing_extensions import TypeAlias

__all__ = [
    "ArgumentDef",
    "EnumTypeDef",
    "FieldDef",
    "InputTypeDef",
    "InterfaceTypeDef",
    "ListTypeRef",
    "NamedTypeRef",
    "NullableTypeRef",
    "ObjectTypeDef",
    "SchemaGraph",
    "TypeKind",
    "TypeRef",
    "UnionTypeDef",
    "unwrap_type_ref",
]


class TypeKind(enum.Enum):
    SCALAR = "scalar"
    ENUM = "enum"
    OBJECT = "object"
    INTERFACE = "interface"
    UNION = "union"
    INPUT = "input"


@dataclasses.dataclass(frozen=True)
class NamedTypeRef:
    kind: TypeKind
    name: str


@dataclasses.dataclass(frozen=True)
class ListTypeRef:
    of_type: TypeRef


@dataclasses.dataclass(frozen=True)
class NullableTypeRef:
    of_type: TypeRef


TypeRef: TypeAlias = Union[NamedTypeRef, ListTypeRef, NullableTypeRef]


def unwrap_type_ref(ref: TypeRef) -> NamedTypeRef:
    while not isinstance(ref, NamedTypeRef):
        ref = ref.of_type

    return ref


@dataclasses.dataclass(frozen=True)
class ArgumentDef:
    name: str
    type: TypeRef


@dataclasses.dataclass(frozen=True)
class FieldDef:
    name: str
    type: TypeRef
    arguments: tuple[ArgumentDef, ...] = ()


@dataclasses.dataclass(frozen=True)
class ObjectTypeDef:
    name: str
    fields: tuple[FieldDef, ...] = ()
    implements: tuple[str, ...] = ()
    is_subscription: bool = False


@dataclasses.dataclass(frozen=True)
class InterfaceTypeDef:
    name: str
    fields: tuple[FieldDef, ...] = ()


@dataclasses.dataclass(frozen=True)
class UnionTypeDef:
    name: str
    types: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class InputTypeDef:
    name: str
    fields: tuple[FieldDef, ...] = ()


@dataclasses.dataclass(frozen=True)
class EnumTypeDef:
    name: str
    values: tuple[str, ...] = ()


@dataclasses.dataclass(frozen=True)
class SchemaGraph:
    """All declared types of a schema, in declaration order."""

    objects: tuple[ObjectTypeDef, ...] = ()
    interfaces: tuple[InterfaceTypeDef, ...] = ()
    unions: tuple[UnionTypeDef, ...] = ()
    inputs: tuple[InputTypeDef, ...] = ()
    enums: tuple[EnumTypeDef, ...] = ()

    def get_object(self, name: str) -> Optional[ObjectTypeDef]:
        return next((o for o in self.objects if o.name == name), None)

    def get_input(self, name: str) -> Optional[InputTypeDef]:
        return next((i for i in self.inputs if i.name == name), None)

    @property
    def enum_names(self) -> frozenset[str]:
        return frozenset(e.name for e in self.enums)

    @property
    def resolver_type_names(self) -> tuple[str, ...]:
        """Names of every type that gets a resolver declaration group."""
        return (
            *(o.name for o in self.objects),
            *(i.name for i in self.interfaces),
            *(u.name for u in self.unions),
        )
