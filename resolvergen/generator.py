from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from .contracts import ContractBuilder
from .emitter import (
    emit_interface_group,
    emit_object_group,
    emit_union_group,
    group_name,
)
from .graph import SchemaGraph
from .indexes import SchemaIndexes, build_indexes
from .logging import get_logger
from .models import ContextDefinition, ModelBinding, import_specifier
from .render import render_module
from .typescript import (
    ANY,
    Comment,
    Declaration,
    ImportDeclaration,
    InterfaceDeclaration,
    Member,
    StringLiteral,
    TypeAliasDeclaration,
    TypeExpr,
    TypeName,
    union,
)

__all__ = [
    "HEADER_COMMENT",
    "GenerateArgs",
    "generate",
    "generate_declarations",
]

logger = get_logger(__name__)

HEADER_COMMENT = "Code generated by resolvergen, DO NOT EDIT."
DEFAULT_CONTEXT_NAME = "Context"


@dataclasses.dataclass(frozen=True)
class GenerateArgs:
    graph: SchemaGraph
    models: ModelBinding = dataclasses.field(default_factory=ModelBinding)
    context: Optional[ContextDefinition] = None
    default_resolvers: bool = True
    #: Custom scalar name -> TypeScript type
    scalars: Mapping[str, str] = dataclasses.field(
        default_factory=lambda: types.MappingProxyType({}),
    )
    #: Where the generated file will be written, for relative model imports
    output: Optional[Path] = None

    @property
    def context_type(self) -> TypeExpr:
        if self.context is None:
            return TypeName(DEFAULT_CONTEXT_NAME)
        return TypeName(self.context.name)


def _has_polymorphic_types(indexes: SchemaIndexes) -> bool:
    return bool(indexes.implementors or indexes.members)


def header_declarations(
    args: GenerateArgs,
    indexes: SchemaIndexes,
) -> list[Declaration]:
    graphql_imports = ["GraphQLResolveInfo"]
    if _has_polymorphic_types(indexes):
        graphql_imports.append("GraphQLIsTypeOfFn")

    header: list[Declaration] = [
        Comment(HEADER_COMMENT),
        ImportDeclaration(tuple(graphql_imports), "graphql"),
    ]

    enum_names = args.graph.enum_names
    by_specifier: dict[str, list[str]] = {}
    for type_name, model in args.models.models.items():
        if model.path is None or type_name in enum_names:
            continue
        specifier = import_specifier(model.path, args.output)
        names = by_specifier.setdefault(specifier, [])
        if model.name not in names:
            names.append(model.name)

    if args.context is not None and args.context.path is not None:
        names = by_specifier.setdefault(
            import_specifier(args.context.path, args.output),
            [],
        )
        if args.context.name not in names:
            names.append(args.context.name)

    header.extend(
        ImportDeclaration(tuple(names), specifier)
        for specifier, names in by_specifier.items()
    )

    if args.context is None:
        header.append(
            TypeAliasDeclaration(DEFAULT_CONTEXT_NAME, ANY, exported=False),
        )

    return header


def enum_declarations(graph: SchemaGraph) -> list[Declaration]:
    return [
        TypeAliasDeclaration(
            enum.name,
            union(StringLiteral(value) for value in enum.values),
        )
        for enum in graph.enums
    ]


def resolvers_declaration(graph: SchemaGraph) -> InterfaceDeclaration:
    def entry(name: str, *, optional: bool) -> Member:
        return Member(name, TypeName(f"{group_name(name)}.Type"), optional=optional)

    return InterfaceDeclaration(
        "Resolvers",
        (
            *(entry(o.name, optional=False) for o in graph.objects),
            *(entry(i.name, optional=True) for i in graph.interfaces),
            *(entry(u.name, optional=True) for u in graph.unions),
        ),
    )


def generate_declarations(args: GenerateArgs) -> list[Declaration]:
    """Build every top level declaration for `args.graph`, in output order."""
    graph = args.graph
    indexes = build_indexes(graph)
    builder = ContractBuilder(
        indexes=indexes,
        binding=args.models,
        context=args.context_type,
        scalars=args.scalars,
    )

    unbound = args.models.unbound(graph.resolver_type_names)
    if unbound:
        logger.warning("Schema types without a backing model", types=unbound)

    return [
        *header_declarations(args, indexes),
        *enum_declarations(graph),
        *(
            emit_object_group(o, builder, default_resolvers=args.default_resolvers)
            for o in graph.objects
        ),
        *(emit_interface_group(i, builder) for i in graph.interfaces),
        *(emit_union_group(u, builder) for u in graph.unions),
        resolvers_declaration(graph),
    ]


def generate(args: GenerateArgs) -> str:
    return render_module(generate_declarations(args))
