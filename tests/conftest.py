"""Shared fixtures for graphql_bindgen tests."""

import pytest
from graphql import build_schema

from graphql_bindgen.codegen.languages.typescript import TypescriptGenerator

USER_SDL = '''
"""A person using the service"""
type User implements Node {
  id: ID!
  name: String
  tags: [String!]
  role: Role!
}

interface Node {
  id: ID!
}

enum Role {
  ADMIN
  USER
}

input UserInput {
  name: String!
  tags: [String!]
  friendIds: [ID!]!
}

union SearchResult = User | Post

type Post implements Node {
  id: ID!
  title: String!
  createdAt: DateTime
}

scalar DateTime

scalar JSON

type Query {
  user(id: ID!): User
  users: [User!]!
  search(term: String!): [SearchResult!]!
}

type Mutation {
  createUser(input: UserInput!): User!
  deleteUser(id: ID!): Boolean
}
'''

HELLO_SDL = """
type Query {
  hello: String
}
"""


@pytest.fixture
def user_schema():
    return build_schema(USER_SDL)


@pytest.fixture
def hello_schema():
    return build_schema(HELLO_SDL)


@pytest.fixture
def generator():
    return TypescriptGenerator()


@pytest.fixture
def sdl_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(USER_SDL, encoding="utf-8")
    return path
