"""Shared fixtures for the test suite."""

import pytest
from graphql import build_schema, get_introspection_query, graphql_sync, parse

from gql_tsgen.core.parser import SchemaParser

SAMPLE_SDL = """
type Query {
  now: String
  user(id: ID!): User
  users(ids: [ID!]!, limit: Int): [User!]!
  foo: Foo
}

type Mutation {
  addUser(name: String!, tags: [String]): User
}

type User {
  id: ID!
  name: String
  role: Role
  friends: [User]
  profile: Profile
}

type Profile {
  bio: String
  owner: User!
}

type Foo {
  id: ID!
  bar: Bar
}

type Bar {
  baz: String
}

enum Role {
  ADMIN
  MEMBER
}
"""


@pytest.fixture
def sample_sdl():
    return SAMPLE_SDL


@pytest.fixture
def sample_document():
    return parse(SAMPLE_SDL)


@pytest.fixture
def sample_ir(sample_document):
    return SchemaParser(sample_document).parse()


@pytest.fixture
def introspection_data():
    """Introspection result ('data' portion) for the sample schema."""
    result = graphql_sync(build_schema(SAMPLE_SDL), get_introspection_query())
    assert result.errors is None
    return result.data


@pytest.fixture
def find_operation(sample_ir):
    """Look up a sample operation by name."""
    def find(name):
        return next(op for op in sample_ir.operations if op.name == name)
    return find
