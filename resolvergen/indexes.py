"""Lookup structures derived from the schema graph.

Each index is built by its own fold over the graph into a fresh mapping,
which is frozen before being handed out.
"""

from __future__ import annotations

import dataclasses
import types
from collections.abc import Mapping

from .graph import (
    InputTypeDef,
    ObjectTypeDef,
    SchemaGraph,
    TypeKind,
    unwrap_type_ref,
)

__all__ = [
    "SchemaIndexes",
    "build_abstract_membership",
    "build_indexes",
    "build_input_type_registry",
    "build_type_input_association",
]


@dataclasses.dataclass(frozen=True)
class SchemaIndexes:
    #: Input type name -> definition, for every input used by an argument
    input_types: Mapping[str, InputTypeDef]
    #: Object type name -> input type names its fields' arguments reference
    type_inputs: Mapping[str, tuple[str, ...]]
    #: Interface name -> implementing object types, in schema order
    implementors: Mapping[str, tuple[ObjectTypeDef, ...]]
    #: Union name -> member object types, in declared order
    members: Mapping[str, tuple[ObjectTypeDef, ...]]

    def possible_types(self, abstract_name: str) -> tuple[ObjectTypeDef, ...]:
        if abstract_name in self.implementors:
            return self.implementors[abstract_name]
        return self.members.get(abstract_name, ())


def _argument_input_names(obj: ObjectTypeDef) -> tuple[str, ...]:
    names: dict[str, None] = {}
    for field in obj.fields:
        for argument in field.arguments:
            named = unwrap_type_ref(argument.type)
            if named.kind is TypeKind.INPUT:
                names.setdefault(named.name)
    return tuple(names)


def build_input_type_registry(graph: SchemaGraph) -> Mapping[str, InputTypeDef]:
    registry: dict[str, InputTypeDef] = {}
    for obj in graph.objects:
        for name in _argument_input_names(obj):
            if name in registry:
                continue
            input_type = graph.get_input(name)
            assert input_type is not None
            registry[name] = input_type
    return types.MappingProxyType(registry)


def build_type_input_association(
    graph: SchemaGraph,
) -> Mapping[str, tuple[str, ...]]:
    association = {
        obj.name: names
        for obj in graph.objects
        if (names := _argument_input_names(obj))
    }
    return types.MappingProxyType(association)


def build_abstract_membership(
    graph: SchemaGraph,
) -> tuple[
    Mapping[str, tuple[ObjectTypeDef, ...]],
    Mapping[str, tuple[ObjectTypeDef, ...]],
]:
    objects_by_name = {o.name: o for o in graph.objects}
    implementors = {
        interface.name: tuple(
            obj for obj in graph.objects if interface.name in obj.implements
        )
        for interface in graph.interfaces
    }
    members = {
        union.name: tuple(objects_by_name[name] for name in union.types)
        for union in graph.unions
    }
    return types.MappingProxyType(implementors), types.MappingProxyType(members)


def build_indexes(graph: SchemaGraph) -> SchemaIndexes:
    implementors, members = build_abstract_membership(graph)
    return SchemaIndexes(
        input_types=build_input_type_registry(graph),
        type_inputs=build_type_input_association(graph),
        implementors=implementors,
        members=members,
    )
