import pytest

from resolvergen.contracts import ContractBuilder
from resolvergen.graph import (
    ArgumentDef,
    FieldDef,
    InterfaceTypeDef,
    ListTypeRef,
    NamedTypeRef,
    NullableTypeRef,
    ObjectTypeDef,
    SchemaGraph,
    TypeKind,
    UnionTypeDef,
)
from resolvergen.indexes import build_indexes
from resolvergen.introspection import schema_graph_from_sdl
from resolvergen.models import ModelBinding
from resolvergen.typescript import TypeName

from .utils import BLOG_SDL, ID, INT, STRING


@pytest.fixture
def blog_graph() -> SchemaGraph:
    return schema_graph_from_sdl(BLOG_SDL)


@pytest.fixture
def graph() -> SchemaGraph:
    """A hand built graph, so declaration order is fully under test control."""
    user = ObjectTypeDef(
        name="User",
        fields=(
            FieldDef("id", ID),
            FieldDef(
                "posts",
                ListTypeRef(NamedTypeRef(TypeKind.OBJECT, "Post")),
                (ArgumentDef("limit", NullableTypeRef(INT)),),
            ),
        ),
        implements=("Node",),
    )
    post = ObjectTypeDef(
        name="Post",
        fields=(
            FieldDef("id", ID),
            FieldDef("title", NullableTypeRef(STRING)),
        ),
        implements=("Node",),
    )
    query = ObjectTypeDef(
        name="Query",
        fields=(
            FieldDef(
                "node",
                NullableTypeRef(NamedTypeRef(TypeKind.INTERFACE, "Node")),
                (ArgumentDef("id", ID),),
            ),
        ),
    )
    subscription = ObjectTypeDef(
        name="Subscription",
        fields=(FieldDef("postAdded", NamedTypeRef(TypeKind.OBJECT, "Post")),),
        is_subscription=True,
    )
    return SchemaGraph(
        objects=(query, subscription, user, post),
        interfaces=(InterfaceTypeDef("Node", (FieldDef("id", ID),)),),
        unions=(UnionTypeDef("SearchResult", ("User", "Post")),),
    )


@pytest.fixture
def binding() -> ModelBinding:
    return ModelBinding.from_mapping({"User": "UserModel"})


@pytest.fixture
def builder(graph: SchemaGraph, binding: ModelBinding) -> ContractBuilder:
    return ContractBuilder(
        indexes=build_indexes(graph),
        binding=binding,
        context=TypeName("Context"),
    )
