import pytest

from gql_typegen import plugin

BASIC_SDL = """
scalar DateTime

interface Node {
  id: ID!
}

enum Role {
  ADMIN
  MEMBER
}

type User implements Node {
  id: ID!
  name: String
  role: Role!
  createdAt: DateTime
  friends: [User!]!
}

type Post implements Node {
  id: ID!
  title: String!
  tags: [String]
}

union SearchResult = User | Post

input UserFilter {
  query: String
  limit: Int = 10
  roles: [Role!]
}

type Query {
  node(id: ID!): Node
  search(term: String!, first: Int = 20): [SearchResult!]!
  users(filter: UserFilter): [User]
}
"""


def normalize(text):
    """Collapse all whitespace runs so blocks compare independent of layout."""
    return " ".join(text.split())


@pytest.fixture
def basic_sdl():
    return BASIC_SDL


@pytest.fixture
def generate():
    """Run the plugin and return the merged file text."""

    def _generate(sdl, **config):
        return plugin(sdl, [], config).merged()

    return _generate


@pytest.fixture
def assert_block():
    """Assert that a block occurs in the output, ignoring layout."""

    def _assert_block(output, block):
        assert normalize(block) in normalize(output), output

    return _assert_block


@pytest.fixture
def refute_block():
    def _refute_block(output, block):
        assert normalize(block) not in normalize(output), output

    return _refute_block
