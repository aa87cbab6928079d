from resolvergen.render import render_declaration, render_module, render_type
from resolvergen.typescript import (
    EMPTY_OBJECT,
    NEVER,
    NULL,
    NUMBER,
    STRING,
    ArrayType,
    ArrowProperty,
    Comment,
    ConstDeclaration,
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
    TypeName,
    UnionType,
    promise_or_value,
    union,
)


def test_union_flattens_and_dedupes():
    assert union([]) == NEVER
    assert union([STRING]) == STRING
    assert union([STRING, union([NUMBER, STRING]), NULL]) == UnionType(
        (STRING, NUMBER, NULL),
    )


def test_render_types():
    assert render_type(StringLiteral('say "hi"')) == '"say \\"hi\\""'
    assert render_type(ArrayType(union([STRING, NULL]))) == "Array<string | null>"
    assert render_type(promise_or_value(NUMBER)) == "number | Promise<number>"
    assert render_type(GenericType("Map", (STRING, NUMBER))) == "Map<string, number>"
    assert render_type(EMPTY_OBJECT) == "{}"
    assert (
        render_type(ObjectType((Member("a", STRING), Member("b", NUMBER, True))))
        == "{ a: string; b?: number }"
    )


def test_render_function_in_union_is_parenthesized():
    func = FunctionType((Parameter("x", NUMBER),), STRING)
    assert render_type(func) == "(x: number) => string"
    assert render_type(union([func, NULL])) == "((x: number) => string) | null"


def test_render_declarations():
    assert render_declaration(Comment("hello")) == "// hello"
    assert (
        render_declaration(ImportDeclaration(("A", "B"), "./models"))
        == 'import { A, B } from "./models"'
    )
    assert render_declaration(TypeAliasDeclaration("Id", STRING)) == (
        "export type Id = string"
    )
    assert render_declaration(TypeAliasDeclaration("Id", STRING, exported=False)) == (
        "type Id = string"
    )
    assert render_declaration(InterfaceDeclaration("Empty")) == (
        "export interface Empty {}"
    )


def test_render_nested_namespace():
    namespace = Namespace(
        "UserResolvers",
        (
            ConstDeclaration(
                "defaultResolvers",
                (ArrowProperty("id", (Parameter("parent", TypeName("M")),), "parent.id"),),
            ),
            InterfaceDeclaration("Type", (Member("id", STRING),)),
        ),
    )

    assert render_declaration(namespace) == (
        "export namespace UserResolvers {\n"
        "  export const defaultResolvers = {\n"
        "    id: (parent: M) => parent.id,\n"
        "  }\n"
        "\n"
        "  export interface Type {\n"
        "    id: string\n"
        "  }\n"
        "}"
    )


def test_render_module():
    assert render_module(
        [Comment("header"), TypeAliasDeclaration("Id", STRING)],
    ) == ("// header\n\nexport type Id = string\n")
