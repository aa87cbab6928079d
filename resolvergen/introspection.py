"""Build a :class:`~resolvergen.graph.SchemaGraph` from a GraphQL schema.

Schemas can come from SDL text, from a `.graphql` file, from a
`graphql-core` schema or from a `strawberry.Schema`.
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Optional, Union

import strawberry
from graphql import (
    GraphQLArgument,
    GraphQLError,
    GraphQLField,
    GraphQLInputField,
    GraphQLNamedType,
    GraphQLSchema,
    GraphQLType,
    build_schema,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_introspection_type,
    is_list_type,
    is_non_null_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
    validate_schema,
)

from .exceptions import SchemaLoadError
from .graph import (
    ArgumentDef,
    EnumTypeDef,
    FieldDef,
    InputTypeDef,
    InterfaceTypeDef,
    ListTypeRef,
    NamedTypeRef,
    NullableTypeRef,
    ObjectTypeDef,
    SchemaGraph,
    TypeKind,
    TypeRef,
    UnionTypeDef,
)
from .logging import get_logger

__all__ = [
    "SDL_EXTENSIONS",
    "load_schema_graph",
    "schema_graph_from_schema",
    "schema_graph_from_sdl",
]

logger = get_logger(__name__)

SDL_EXTENSIONS = (".graphql", ".graphqls", ".gql")
DEFAULT_SCHEMA_SYMBOL = "schema"


def _type_kind(type_: GraphQLNamedType) -> TypeKind:
    if is_scalar_type(type_):
        return TypeKind.SCALAR
    if is_enum_type(type_):
        return TypeKind.ENUM
    if is_object_type(type_):
        return TypeKind.OBJECT
    if is_interface_type(type_):
        return TypeKind.INTERFACE
    if is_union_type(type_):
        return TypeKind.UNION
    if is_input_object_type(type_):
        return TypeKind.INPUT

    raise TypeError(f"Unexpected GraphQL type {type_!r}")


def _type_ref(type_: GraphQLType, *, nullable: bool = True) -> TypeRef:
    ref: TypeRef
    if is_non_null_type(type_):
        return _type_ref(type_.of_type, nullable=False)  # type: ignore
    if is_list_type(type_):
        ref = ListTypeRef(_type_ref(type_.of_type))  # type: ignore
    else:
        ref = NamedTypeRef(_type_kind(type_), type_.name)  # type: ignore

    return NullableTypeRef(ref) if nullable else ref


def _field(name: str, field: Union[GraphQLField, GraphQLInputField]) -> FieldDef:
    arguments: dict[str, GraphQLArgument] = getattr(field, "args", None) or {}
    return FieldDef(
        name=name,
        type=_type_ref(field.type),
        arguments=tuple(
            ArgumentDef(name=arg_name, type=_type_ref(arg.type))
            for arg_name, arg in arguments.items()
        ),
    )


def schema_graph_from_schema(
    schema: Union[GraphQLSchema, strawberry.Schema],
) -> SchemaGraph:
    if isinstance(schema, strawberry.Schema):
        schema = schema._schema

    subscription = schema.subscription_type
    objects: list[ObjectTypeDef] = []
    interfaces: list[InterfaceTypeDef] = []
    unions: list[UnionTypeDef] = []
    inputs: list[InputTypeDef] = []
    enums: list[EnumTypeDef] = []

    for type_ in schema.type_map.values():
        if is_introspection_type(type_):
            continue

        if is_object_type(type_):
            objects.append(
                ObjectTypeDef(
                    name=type_.name,
                    fields=tuple(_field(n, f) for n, f in type_.fields.items()),
                    implements=tuple(i.name for i in type_.interfaces),
                    is_subscription=type_ is subscription,
                ),
            )
        elif is_interface_type(type_):
            interfaces.append(
                InterfaceTypeDef(
                    name=type_.name,
                    fields=tuple(_field(n, f) for n, f in type_.fields.items()),
                ),
            )
        elif is_union_type(type_):
            unions.append(
                UnionTypeDef(
                    name=type_.name,
                    types=tuple(t.name for t in type_.types),
                ),
            )
        elif is_input_object_type(type_):
            inputs.append(
                InputTypeDef(
                    name=type_.name,
                    fields=tuple(_field(n, f) for n, f in type_.fields.items()),
                ),
            )
        elif is_enum_type(type_):
            enums.append(EnumTypeDef(name=type_.name, values=tuple(type_.values)))

    return SchemaGraph(
        objects=tuple(objects),
        interfaces=tuple(interfaces),
        unions=tuple(unions),
        inputs=tuple(inputs),
        enums=tuple(enums),
    )


def schema_graph_from_sdl(sdl: str, *, source: str = "<sdl>") -> SchemaGraph:
    try:
        schema = build_schema(sdl)
    except (GraphQLError, TypeError) as e:
        raise SchemaLoadError(source, str(e)) from e

    errors = validate_schema(schema)
    if errors:
        raise SchemaLoadError(source, "; ".join(e.message for e in errors))

    return schema_graph_from_schema(schema)


def _import_schema(selector: str) -> Union[GraphQLSchema, strawberry.Schema]:
    module_name, _, symbol = selector.partition(":")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise SchemaLoadError(selector, str(e)) from e

    symbol = symbol or DEFAULT_SCHEMA_SYMBOL
    try:
        schema = getattr(module, symbol)
    except AttributeError as e:
        raise SchemaLoadError(
            selector,
            f'module "{module_name}" has no attribute "{symbol}"',
        ) from e

    if not isinstance(schema, (GraphQLSchema, strawberry.Schema)):
        raise SchemaLoadError(
            selector,
            f"expected a schema, got {type(schema).__name__}",
        )
    return schema


def load_schema_graph(source: str, *, base_dir: Optional[Path] = None) -> SchemaGraph:
    """Load the schema graph from a SDL file or a `module:symbol` import path."""
    path = Path(source)
    if path.suffix in SDL_EXTENSIONS:
        if base_dir is not None and not path.is_absolute():
            path = base_dir / path
        try:
            sdl = path.read_text(encoding="utf-8")
        except OSError as e:
            raise SchemaLoadError(source, e.strerror or str(e)) from e

        logger.debug("Loading schema from SDL file", path=str(path))
        return schema_graph_from_sdl(sdl, source=source)

    logger.debug("Importing schema", selector=source)
    return schema_graph_from_schema(_import_schema(source))
