import pytest
from graphql import GraphQLID, GraphQLString

from graphql_schema_utils.exceptions import SchemaLoadError
from graphql_schema_utils.graph import (
    FieldDef,
    SchemaGraph,
    TypeDef,
    TypeKind,
    TypeRef,
    load_schema,
    print_graph,
    to_graphql_schema,
)
from graphql_schema_utils.graph.printer import STANDARD_SCALARS
from graphql_schema_utils.merge import merge_schema

RICH_SCHEMA = '''
"""Entry point"""
type Query {
    items(first: Int = 10, color: Color = RED): [Item!]!
    search(filter: Filter): SearchResult
}
interface Node {
    id: ID!
}
type Item implements Node {
    id: ID!
    "Display name"
    name: String
}
type Tag {
    label: String
}
union SearchResult = Item | Tag
enum Color {
    RED
    BLUE @deprecated(reason: "use RED")
}
input Filter {
    term: String = "all"
    colors: [Color!]
}
scalar DateTime
'''


@pytest.mark.unit
def test_print_graph_round_trips():
    graph = load_schema(RICH_SCHEMA)

    printed = print_graph(graph)

    assert "type Item implements Node" in printed
    assert "union SearchResult = Item | Tag" in printed
    assert 'BLUE @deprecated(reason: "use RED")' in printed
    assert graph.diff(load_schema(printed)) == []


@pytest.mark.unit
def test_merged_graph_prints_as_sdl(pet_sdl):
    other = load_schema(pet_sdl.replace("union Pet = Cat | Dog", "union Pet = Fish"))

    printed = print_graph(merge_schema(load_schema(pet_sdl), other))

    assert "union Pet = Cat | Dog | Fish" in printed


@pytest.mark.unit
def test_to_graphql_schema_sets_root_types(cms_schema):
    schema = to_graphql_schema(cms_schema)

    assert schema.query_type.name == "Query"
    assert "FieldOption" in schema.type_map


@pytest.mark.unit
def test_dangling_reference_raises():
    graph = SchemaGraph(
        types={
            "Query": TypeDef(
                name="Query",
                kind=TypeKind.OBJECT,
                fields={"a": FieldDef(name="a", type=TypeRef(kind=TypeKind.OBJECT, name="Missing"))},
            )
        },
        query_type="Query",
    )

    with pytest.raises(SchemaLoadError):
        to_graphql_schema(graph)


@pytest.mark.unit
def test_non_object_root_raises():
    graph = SchemaGraph(types={"Query": TypeDef(name="Query", kind=TypeKind.SCALAR)}, query_type="Query")

    with pytest.raises(SchemaLoadError):
        to_graphql_schema(graph)


@pytest.mark.unit
def test_standard_scalars_are_keyed_by_name():
    assert set(STANDARD_SCALARS) == {"Int", "Float", "String", "Boolean", "ID"}
    assert STANDARD_SCALARS["String"] is GraphQLString
    assert STANDARD_SCALARS["ID"] is GraphQLID


@pytest.mark.unit
def test_standard_scalars_are_reused_when_building():
    schema = to_graphql_schema(load_schema("type Query { id: ID, name: String }"))

    assert schema.type_map["ID"] is GraphQLID
    assert schema.query_type.fields["name"].type is GraphQLString
