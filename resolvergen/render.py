from __future__ import annotations

import json
from collections.abc import Iterable

from typing_extensions import assert_never

from .typescript import (
    ArrayType,
    ArrowProperty,
    Comment,
    ConstDeclaration,
    Declaration,
    FunctionType,
    GenericType,
    ImportDeclaration,
    InterfaceDeclaration,
    Member,
    Namespace,
    ObjectType,
    Parameter,
    StringLiteral,
    TypeAliasDeclaration,
    TypeExpr,
    TypeName,
    UnionType,
)

__all__ = [
    "render_declaration",
    "render_module",
    "render_type",
]

INDENT = "  "


def render_type(type_: TypeExpr) -> str:
    if isinstance(type_, TypeName):
        return type_.name
    if isinstance(type_, StringLiteral):
        return json.dumps(type_.value)
    if isinstance(type_, UnionType):
        return " | ".join(
            f"({render_type(m)})" if isinstance(m, FunctionType) else render_type(m)
            for m in type_.members
        )
    if isinstance(type_, ArrayType):
        return f"Array<{render_type(type_.of_type)}>"
    if isinstance(type_, GenericType):
        arguments = ", ".join(render_type(a) for a in type_.arguments)
        return f"{type_.name}<{arguments}>"
    if isinstance(type_, FunctionType):
        return (
            f"({_render_parameters(type_.parameters)}) => "
            f"{render_type(type_.returns)}"
        )
    if isinstance(type_, ObjectType):
        if not type_.members:
            return "{}"
        return "{ " + "; ".join(_render_member(m) for m in type_.members) + " }"

    assert_never(type_)


def _render_parameters(parameters: Iterable[Parameter]) -> str:
    return ", ".join(f"{p.name}: {render_type(p.type)}" for p in parameters)


def _render_member(member: Member) -> str:
    optional = "?" if member.optional else ""
    return f"{member.name}{optional}: {render_type(member.type)}"


def _render_property(prop: ArrowProperty) -> str:
    return f"{prop.name}: ({_render_parameters(prop.parameters)}) => {prop.body},"


def _block(header: str, lines: list[str], level: int) -> list[str]:
    prefix = INDENT * level
    if not lines:
        return [f"{prefix}{header} {{}}"]
    return [f"{prefix}{header} {{", *lines, f"{prefix}}}"]


def _declaration_lines(declaration: Declaration, level: int) -> list[str]:
    prefix = INDENT * level
    inner = INDENT * (level + 1)

    if isinstance(declaration, Comment):
        return [f"{prefix}// {declaration.text}"]
    if isinstance(declaration, ImportDeclaration):
        names = ", ".join(declaration.names)
        return [f"{prefix}import {{ {names} }} from {json.dumps(declaration.path)}"]
    if isinstance(declaration, TypeAliasDeclaration):
        export = "export " if declaration.exported else ""
        return [
            f"{prefix}{export}type {declaration.name} = "
            f"{render_type(declaration.type)}",
        ]
    if isinstance(declaration, InterfaceDeclaration):
        return _block(
            f"export interface {declaration.name}",
            [f"{inner}{_render_member(m)}" for m in declaration.members],
            level,
        )
    if isinstance(declaration, ConstDeclaration):
        lines = [f"{inner}{_render_property(p)}" for p in declaration.properties]
        return _block(f"export const {declaration.name} =", lines, level)
    if isinstance(declaration, Namespace):
        body: list[str] = []
        for i, child in enumerate(declaration.body):
            if i:
                body.append("")
            body.extend(_declaration_lines(child, level + 1))
        return _block(f"export namespace {declaration.name}", body, level)

    assert_never(declaration)


def render_declaration(declaration: Declaration, level: int = 0) -> str:
    return "\n".join(_declaration_lines(declaration, level))


def render_module(declarations: Iterable[Declaration]) -> str:
    """Render top level declarations, separated by blank lines."""
    return "\n\n".join(render_declaration(d) for d in declarations) + "\n"
