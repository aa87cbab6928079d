"""Declaration groups, one TypeScript namespace per schema type.

Within a group the order of declarations is fixed: input types and argument
records come before the resolver aliases that reference them, and the
aggregate `Type` interface comes last.
"""

from __future__ import annotations

from typing import Optional

from .contracts import (
    ContractBuilder,
    FieldOwner,
    args_type_name,
    resolver_type_name,
)
from .graph import (
    FieldDef,
    InterfaceTypeDef,
    NullableTypeRef,
    ObjectTypeDef,
    UnionTypeDef,
)
from .typescript import (
    ArrowProperty,
    ConstDeclaration,
    Declaration,
    InterfaceDeclaration,
    Member,
    Namespace,
    Parameter,
    TypeAliasDeclaration,
    TypeName,
)

__all__ = [
    "emit_interface_group",
    "emit_object_group",
    "emit_union_group",
    "group_name",
]


def group_name(type_name: str) -> str:
    return f"{type_name}Resolvers"


def _default_resolvers(
    obj: ObjectTypeDef,
    builder: ContractBuilder,
) -> Optional[ConstDeclaration]:
    model = builder.binding.get(obj.name)
    if model is None or not model.fields:
        return None

    properties = []
    for field in obj.fields:
        if field.arguments or field.name not in model.fields:
            continue

        body = f"parent.{field.name}"
        if isinstance(field.type, NullableTypeRef):
            body = f"{body} === undefined ? null : {body}"
        properties.append(
            ArrowProperty(
                field.name,
                (Parameter("parent", TypeName(model.name)),),
                body,
            ),
        )

    if not properties:
        return None
    return ConstDeclaration("defaultResolvers", tuple(properties))


def _input_type_declarations(
    obj: ObjectTypeDef,
    builder: ContractBuilder,
) -> list[Declaration]:
    indexes = builder.indexes
    return [
        InterfaceDeclaration(
            name,
            builder.argument_members(indexes.input_types[name].fields),
        )
        for name in indexes.type_inputs.get(obj.name, ())
    ]


def _args_declarations(
    fields: tuple[FieldDef, ...],
    builder: ContractBuilder,
) -> list[Declaration]:
    return [
        InterfaceDeclaration(
            args_type_name(field),
            builder.argument_members(field.arguments),
        )
        for field in fields
        if field.arguments
    ]


def _is_type_of_members(
    owner: FieldOwner,
    builder: ContractBuilder,
) -> list[Member]:
    is_type_of = builder.is_type_of_contract(owner)
    if is_type_of is None:
        return []
    return [Member("__isTypeOf", is_type_of, optional=True)]


def emit_object_group(
    obj: ObjectTypeDef,
    builder: ContractBuilder,
    *,
    default_resolvers: bool = False,
) -> Namespace:
    body: list[Declaration] = []

    if default_resolvers and (defaults := _default_resolvers(obj, builder)):
        body.append(defaults)

    body.extend(_input_type_declarations(obj, builder))
    body.extend(_args_declarations(obj.fields, builder))
    body.extend(
        TypeAliasDeclaration(
            resolver_type_name(field),
            builder.field_contract(obj, field),
        )
        for field in obj.fields
    )
    body.append(
        InterfaceDeclaration(
            "Type",
            (
                *(
                    Member(field.name, TypeName(resolver_type_name(field)))
                    for field in obj.fields
                ),
                *_is_type_of_members(obj, builder),
            ),
        ),
    )

    return Namespace(group_name(obj.name), tuple(body))


def emit_interface_group(
    interface: InterfaceTypeDef,
    builder: ContractBuilder,
) -> Namespace:
    body: list[Declaration] = _args_declarations(interface.fields, builder)
    body.append(
        InterfaceDeclaration(
            "Type",
            (
                Member("__resolveType", builder.resolve_type_contract(interface)),
                *_is_type_of_members(interface, builder),
            ),
        ),
    )
    return Namespace(group_name(interface.name), tuple(body))


def emit_union_group(union: UnionTypeDef, builder: ContractBuilder) -> Namespace:
    return Namespace(
        group_name(union.name),
        (
            InterfaceDeclaration(
                "Type",
                (
                    Member(
                        "__resolveType",
                        builder.resolve_type_contract(union),
                        optional=True,
                    ),
                ),
            ),
        ),
    )
