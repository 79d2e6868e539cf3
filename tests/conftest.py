import pytest

from graphql_schema_utils.graph import load_schema

CMS_SCHEMA = """
type Query {
    FieldOption(contentId: ID!): FieldOption
}
type Tag {
    type: String!
    value: String!
    displayName: String
}
interface CmsItem {
    contentId: ID!
    type: String!
    tags: [Tag!]
}
type FieldOption implements CmsItem {
    contentId: ID!
    type: String!
    tags: [Tag!]
    displayName: String
    value: String
}
"""

PET_SCHEMA = """
type Query {
    Pet(name: String): Pet
}
type Cat {
    name: String
    catNip: String
    scratchingPost: String
}
type Fish {
    name: String
    bowl: String
}
type Dog {
    name: String
    bone: String
    leash: String
}
union Pet = Cat | Dog
"""


@pytest.fixture
def cms_schema():
    return load_schema(CMS_SCHEMA)


@pytest.fixture
def pet_schema():
    return load_schema(PET_SCHEMA)


@pytest.fixture
def cms_sdl():
    return CMS_SCHEMA


@pytest.fixture
def pet_sdl():
    return PET_SCHEMA
