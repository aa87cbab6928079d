from resolvergen.graph import NamedTypeRef, TypeKind

BLOG_SDL = """
interface Node {
  id: ID!
}

type User implements Node {
  id: ID!
  name: String
  role: Role!
  posts(limit: Int, filter: PostFilter): [Post!]!
}

type Post implements Node {
  id: ID!
  title: String!
  author: User!
  tags: [String]
}

union SearchResult = User | Post

enum Role {
  ADMIN
  EDITOR
}

input PostFilter {
  title: String
  role: Role
}

input UnusedInput {
  value: Int
}

type Query {
  node(id: ID!): Node
  search(text: String!): [SearchResult!]!
  me: User
}

type Subscription {
  postAdded(authorId: ID): Post!
}
"""

ID = NamedTypeRef(TypeKind.SCALAR, "ID")
INT = NamedTypeRef(TypeKind.SCALAR, "Int")
STRING = NamedTypeRef(TypeKind.SCALAR, "String")
