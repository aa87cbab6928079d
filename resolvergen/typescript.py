"""TypeScript declaration nodes.

The compiler never concatenates TypeScript source directly: resolvers build
these nodes and :mod:`resolvergen.render` turns them into text in one pass.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable
from typing import Union

from typing_extensions import TypeAlias

__all__ = [
    "ANY",
    "BOOLEAN",
    "EMPTY_OBJECT",
    "NEVER",
    "NULL",
    "NUMBER",
    "STRING",
    "UNDEFINED",
    "UNKNOWN",
    "ArrayType",
    "ArrowProperty",
    "Comment",
    "ConstDeclaration",
    "Declaration",
    "FunctionType",
    "GenericType",
    "ImportDeclaration",
    "InterfaceDeclaration",
    "Member",
    "Namespace",
    "ObjectType",
    "Parameter",
    "StringLiteral",
    "TypeAliasDeclaration",
    "TypeExpr",
    "TypeName",
    "UnionType",
    "promise_or_value",
    "union",
]


@dataclasses.dataclass(frozen=True)
class TypeName:
    name: str


@dataclasses.dataclass(frozen=True)
class StringLiteral:
    value: str


@dataclasses.dataclass(frozen=True)
class UnionType:
    members: tuple[TypeExpr, ...]


@dataclasses.dataclass(frozen=True)
class ArrayType:
    of_type: TypeExpr


@dataclasses.dataclass(frozen=True)
class GenericType:
    name: str
    arguments: tuple[TypeExpr, ...]


@dataclasses.dataclass(frozen=True)
class Parameter:
    name: str
    type: TypeExpr


@dataclasses.dataclass(frozen=True)
class FunctionType:
    parameters: tuple[Parameter, ...]
    returns: TypeExpr


@dataclasses.dataclass(frozen=True)
class Member:
    name: str
    type: TypeExpr
    optional: bool = False


@dataclasses.dataclass(frozen=True)
class ObjectType:
    members: tuple[Member, ...] = ()


TypeExpr: TypeAlias = Union[
    TypeName,
    StringLiteral,
    UnionType,
    ArrayType,
    GenericType,
    FunctionType,
    ObjectType,
]

ANY = TypeName("any")
BOOLEAN = TypeName("boolean")
NEVER = TypeName("never")
NULL = TypeName("null")
NUMBER = TypeName("number")
STRING = TypeName("string")
UNDEFINED = TypeName("undefined")
UNKNOWN = TypeName("unknown")
EMPTY_OBJECT = ObjectType()


def union(members: Iterable[TypeExpr]) -> TypeExpr:
    """Build a flattened, duplicate-free union.

    A single member is returned as is and an empty union is `never`.
    """
    flat: list[TypeExpr] = []
    for member in members:
        nested = member.members if isinstance(member, UnionType) else (member,)
        flat.extend(m for m in nested if m not in flat)

    if not flat:
        return NEVER
    if len(flat) == 1:
        return flat[0]
    return UnionType(tuple(flat))


def promise_or_value(type_: TypeExpr) -> TypeExpr:
    """Widen `type_` so it can be returned either directly or as a promise."""
    return union([type_, GenericType("Promise", (type_,))])


@dataclasses.dataclass(frozen=True)
class Comment:
    text: str


@dataclasses.dataclass(frozen=True)
class ImportDeclaration:
    names: tuple[str, ...]
    path: str


@dataclasses.dataclass(frozen=True)
class TypeAliasDeclaration:
    name: str
    type: TypeExpr
    exported: bool = True


@dataclasses.dataclass(frozen=True)
class InterfaceDeclaration:
    name: str
    members: tuple[Member, ...] = ()


@dataclasses.dataclass(frozen=True)
class ArrowProperty:
    name: str
    parameters: tuple[Parameter, ...]
    body: str


@dataclasses.dataclass(frozen=True)
class ConstDeclaration:
    name: str
    properties: tuple[ArrowProperty, ...] = ()


@dataclasses.dataclass(frozen=True)
class Namespace:
    name: str
    body: tuple[Declaration, ...] = ()


Declaration: TypeAlias = Union[
    Comment,
    ImportDeclaration,
    TypeAliasDeclaration,
    InterfaceDeclaration,
    ConstDeclaration,
    Namespace,
]
