"""
GraphQL documents for the Author/Post schema, ready to hand to
`QueryExecutor.execute` or `MockHarness.mock`.
"""

POSTS_AND_AUTHORS = '''
query {
  posts {
    title
    body
    author {
      name
    }
  }

  authors {
    name
    posts {
      title
      body
    }
  }
}
'''

POST = '''
query($id: ID!) {
  post(id: $id) {
    title
    body
    author {
      name
    }
  }
}
'''

POSTS = '''
query {
  posts {
    title
    body
    author {
      name
    }
  }
}
'''

AUTHOR = '''
query($id: ID!) {
  author(id: $id) {
    name
    posts {
      title
      body
    }
  }
}
'''

AUTHORS = '''
query {
  authors {
    name
    posts {
      title
      body
    }
  }
}
'''

CREATE_AUTHOR = '''
mutation($name: String!) {
  createAuthor(name: $name) {
    id
    name
  }
}
'''

UPDATE_AUTHOR = '''
mutation($id: ID!, $name: String) {
  updateAuthor(id: $id, name: $name) {
    id
    name
  }
}
'''

DELETE_AUTHOR = '''
mutation($id: ID!) {
  deleteAuthor(id: $id) {
    name
  }
}
'''

CREATE_POST = '''
mutation($title: String!, $body: String!, $author: ID!) {
  createPost(title: $title, body: $body, author: $author) {
    id
    title
    body
    author {
      name
    }
  }
}
'''

UPDATE_POST = '''
mutation($id: ID!, $title: String, $body: String, $author: ID) {
  updatePost(id: $id, title: $title, body: $body, author: $author) {
    id
    title
    body
    author {
      name
    }
  }
}
'''

DELETE_POST = '''
mutation($id: ID!) {
  deletePost(id: $id) {
    title
  }
}
'''
