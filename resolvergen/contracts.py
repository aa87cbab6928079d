"""Resolver contracts for fields and abstract types."""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from typing_extensions import TypeAlias, assert_never

from .graph import (
    ArgumentDef,
    FieldDef,
    InterfaceTypeDef,
    ObjectTypeDef,
    UnionTypeDef,
)
from .indexes import SchemaIndexes
from .models import ModelBinding
from .typeref import Position, resolve_type_ref
from .typescript import (
    EMPTY_OBJECT,
    STRING,
    UNDEFINED,
    UNKNOWN,
    FunctionType,
    GenericType,
    Member,
    ObjectType,
    Parameter,
    StringLiteral,
    TypeExpr,
    TypeName,
    promise_or_value,
    union,
)
from .utils.pyutils import unique, upper_first

__all__ = [
    "GRAPHQL_RESOLVE_INFO",
    "AbstractType",
    "ContractBuilder",
    "FieldOwner",
    "args_type_name",
    "resolver_type_name",
]

GRAPHQL_RESOLVE_INFO = TypeName("GraphQLResolveInfo")

FieldOwner: TypeAlias = Union[ObjectTypeDef, InterfaceTypeDef]
AbstractType: TypeAlias = Union[InterfaceTypeDef, UnionTypeDef]


def args_type_name(field: FieldDef) -> str:
    return f"Args{upper_first(field.name)}"


def resolver_type_name(field: FieldDef) -> str:
    return f"{upper_first(field.name)}Resolver"


@dataclasses.dataclass(frozen=True)
class ContractBuilder:
    """Build the TypeScript shapes resolvers of a schema must satisfy.

    Holds everything shared by every contract of one generation run: the
    schema indexes, the model binding and the context type name.
    """

    indexes: SchemaIndexes
    binding: ModelBinding
    context: TypeExpr
    scalars: Mapping[str, str] = dataclasses.field(
        default_factory=lambda: types.MappingProxyType({}),
    )

    def model_type(self, type_name: str, fallback: TypeExpr = UNKNOWN) -> TypeExpr:
        model = self.binding.get(type_name)
        return TypeName(model.name) if model is not None else fallback

    def models_union(
        self,
        objects: Iterable[ObjectTypeDef],
        fallback: TypeExpr = UNKNOWN,
    ) -> TypeExpr:
        return union(self.model_type(o.name, fallback) for o in objects)

    def argument_members(
        self,
        fields: Iterable[Union[FieldDef, ArgumentDef]],
    ) -> tuple[Member, ...]:
        """Members of an argument record or input type, in argument position."""
        return tuple(
            Member(
                field.name,
                resolve_type_ref(
                    field.type,
                    self.binding,
                    position=Position.ARGUMENT,
                    scalars=self.scalars,
                ),
            )
            for field in fields
        )

    def parent_type(self, owner: FieldOwner) -> TypeExpr:
        if isinstance(owner, InterfaceTypeDef):
            return self.models_union(
                self.indexes.implementors.get(owner.name, ()),
                UNDEFINED,
            )
        if isinstance(owner, ObjectTypeDef):
            return self.model_type(owner.name, UNDEFINED)

        assert_never(owner)

    def args_type(self, field: FieldDef) -> TypeExpr:
        if not field.arguments:
            return EMPTY_OBJECT
        return TypeName(args_type_name(field))

    def result_type(self, field: FieldDef) -> TypeExpr:
        return resolve_type_ref(
            field.type,
            self.binding,
            position=Position.RETURN,
            scalars=self.scalars,
        )

    def parameters(self, owner: FieldOwner, field: FieldDef) -> tuple[Parameter, ...]:
        return (
            Parameter("parent", self.parent_type(owner)),
            Parameter("args", self.args_type(field)),
            Parameter("ctx", self.context),
            Parameter("info", GRAPHQL_RESOLVE_INFO),
        )

    def field_contract(self, owner: FieldOwner, field: FieldDef) -> TypeExpr:
        """Contract of the resolver for `field` declared on `owner`.

        Fields of the subscription root type get a `subscribe`/`resolve`
        record. Every other field accepts either a plain resolver function or
        a delegated `{fragment, resolver}` record with the same signature.
        """
        parameters = self.parameters(owner, field)
        result = self.result_type(field)

        if isinstance(owner, ObjectTypeDef) and owner.is_subscription:
            return ObjectType(
                (
                    Member(
                        "subscribe",
                        FunctionType(
                            parameters,
                            promise_or_value(GenericType("AsyncIterator", (result,))),
                        ),
                    ),
                    Member(
                        "resolve",
                        FunctionType(parameters, promise_or_value(result)),
                        optional=True,
                    ),
                ),
            )

        func = FunctionType(parameters, promise_or_value(result))
        delegated = ObjectType(
            (
                Member("fragment", STRING),
                Member("resolver", func),
            ),
        )
        return union([func, delegated])

    def resolve_type_contract(self, abstract: AbstractType) -> FunctionType:
        """Signature of `__resolveType` for an interface or a union."""
        possible = self.indexes.possible_types(abstract.name)
        return FunctionType(
            (
                Parameter("value", self.models_union(possible)),
                Parameter("context", self.context),
                Parameter("info", GRAPHQL_RESOLVE_INFO),
            ),
            promise_or_value(union(StringLiteral(o.name) for o in possible)),
        )

    def possible_types(self, owner: FieldOwner) -> tuple[ObjectTypeDef, ...]:
        """Object types a value of `owner` may be discriminated against."""
        candidates: list[ObjectTypeDef] = []
        if isinstance(owner, ObjectTypeDef):
            for interface_name in owner.implements:
                candidates.extend(self.indexes.implementors.get(interface_name, ()))

        for members in self.indexes.members.values():
            if any(m.name == owner.name for m in members):
                candidates.extend(members)

        return tuple(unique(candidates, key=lambda o: o.name))

    def is_type_of_contract(self, owner: FieldOwner) -> Optional[TypeExpr]:
        possible = self.possible_types(owner)
        if not possible:
            return None
        return GenericType(
            "GraphQLIsTypeOfFn",
            (self.models_union(possible), self.context),
        )

