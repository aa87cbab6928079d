from resolvergen.graph import (
    ArgumentDef,
    FieldDef,
    InputTypeDef,
    InterfaceTypeDef,
    ListTypeRef,
    NamedTypeRef,
    NullableTypeRef,
    ObjectTypeDef,
    SchemaGraph,
    TypeKind,
    UnionTypeDef,
)
from resolvergen.indexes import (
    build_abstract_membership,
    build_indexes,
    build_input_type_registry,
    build_type_input_association,
)

from .utils import ID, INT

FILTER = NamedTypeRef(TypeKind.INPUT, "Filter")
ORDER = NamedTypeRef(TypeKind.INPUT, "Order")


def _inputs_graph() -> SchemaGraph:
    return SchemaGraph(
        objects=(
            ObjectTypeDef(
                "Query",
                (
                    FieldDef(
                        "users",
                        ListTypeRef(NamedTypeRef(TypeKind.OBJECT, "User")),
                        (
                            ArgumentDef("where", NullableTypeRef(FILTER)),
                            ArgumentDef("orderBy", ListTypeRef(ORDER)),
                        ),
                    ),
                    FieldDef(
                        "posts",
                        ListTypeRef(NamedTypeRef(TypeKind.OBJECT, "Post")),
                        (ArgumentDef("where", FILTER),),
                    ),
                ),
            ),
            ObjectTypeDef("User", (FieldDef("id", ID),)),
            ObjectTypeDef(
                "Post",
                (FieldDef("id", ID, (ArgumentDef("first", NullableTypeRef(INT)),)),),
            ),
        ),
        inputs=(
            InputTypeDef("Filter", (FieldDef("nested", NullableTypeRef(ORDER)),)),
            InputTypeDef("Order", (FieldDef("field", ID),)),
            InputTypeDef("Unused", (FieldDef("value", INT),)),
        ),
    )


def test_input_type_registry():
    graph = _inputs_graph()
    registry = build_input_type_registry(graph)

    assert list(registry) == ["Filter", "Order"]
    assert registry["Filter"] is graph.get_input("Filter")


def test_type_input_association_is_direct_and_distinct():
    association = build_type_input_association(_inputs_graph())

    # `Order` nested in `Filter` is only listed because `orderBy` uses it directly
    assert dict(association) == {"Query": ("Filter", "Order")}


def test_type_input_association_skips_nested_inputs():
    graph = SchemaGraph(
        objects=(
            ObjectTypeDef(
                "Query",
                (FieldDef("users", ID, (ArgumentDef("where", FILTER),)),),
            ),
        ),
        inputs=(
            InputTypeDef("Filter", (FieldDef("nested", NullableTypeRef(ORDER)),)),
            InputTypeDef("Order", (FieldDef("field", ID),)),
        ),
    )

    assert dict(build_type_input_association(graph)) == {"Query": ("Filter",)}
    assert list(build_input_type_registry(graph)) == ["Filter"]


def test_abstract_membership(graph: SchemaGraph):
    implementors, members = build_abstract_membership(graph)

    assert {k: [o.name for o in v] for k, v in implementors.items()} == {
        "Node": ["User", "Post"],
    }
    assert {k: [o.name for o in v] for k, v in members.items()} == {
        "SearchResult": ["User", "Post"],
    }


def test_abstract_membership_without_implementors():
    graph = SchemaGraph(
        objects=(ObjectTypeDef("Query", (FieldDef("id", ID),)),),
        interfaces=(InterfaceTypeDef("Lonely", (FieldDef("id", ID),)),),
        unions=(UnionTypeDef("Nothing", ()),),
    )
    indexes = build_indexes(graph)

    assert indexes.implementors["Lonely"] == ()
    assert indexes.members["Nothing"] == ()
    assert indexes.possible_types("Lonely") == ()
    assert indexes.possible_types("Nothing") == ()


def test_blog_indexes(blog_graph: SchemaGraph):
    indexes = build_indexes(blog_graph)

    assert list(indexes.input_types) == ["PostFilter"]
    assert dict(indexes.type_inputs) == {"User": ("PostFilter",)}
    assert sorted(o.name for o in indexes.possible_types("Node")) == ["Post", "User"]
    assert [o.name for o in indexes.possible_types("SearchResult")] == [
        "User",
        "Post",
    ]


def test_indexes_are_deterministic(blog_graph: SchemaGraph):
    assert build_indexes(blog_graph) == build_indexes(blog_graph)
