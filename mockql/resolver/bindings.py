from typing import Callable, Dict, List, Text, Tuple

from graphql import GraphQLSchema, GraphQLObjectType

from mockql.util.loggers import console
from mockql.util.misc_functions import random_id
from mockql.exceptions import ReferentialIntegrityError, SchemaBindingError
from mockql.query.predicate import Field
from mockql.constants import ID, COLLECTION


AUTHORS = COLLECTION.AUTHORS
POSTS = COLLECTION.POSTS


def resolver(type_name: Text, field_name: Text):
    """
    Mark a ResolverBindings method as the resolver of `type_name.field_name`
    in the GraphQL schema. Methods bound to Query and Mutation fields receive
    the field arguments as keyword arguments; methods bound to object type
    fields receive the parent record.
    """
    def decorator(func):
        func.graphql_field = (type_name, field_name)
        return func
    return decorator


class ResolverBindings(object):
    """
    Maps the Query, Mutation, Author and Post fields of the schema onto
    RelationalStore operations.
    """

    ROOT_TYPE_NAMES = frozenset({'Query', 'Mutation'})

    def __init__(self, store: 'RelationalStore', id_factory: Callable[[], Text] = None):
        self._store = store
        self._id_factory = id_factory or random_id

    @property
    def store(self) -> 'RelationalStore':
        return self._store

    @classmethod
    def fields(cls) -> Dict[Tuple[Text, Text], Text]:
        """
        Return a mapping from (type name, field name) to method name.
        """
        fields = {}
        for name in dir(cls):
            func = getattr(cls, name)
            graphql_field = getattr(func, 'graphql_field', None)
            if graphql_field is not None:
                fields[graphql_field] = name
        return fields

    def bind_to_schema(self, schema: GraphQLSchema) -> GraphQLSchema:
        """
        Install this object's resolvers on the fields of the schema.
        """
        for (type_name, field_name), method_name in self.fields().items():
            graphql_type = schema.get_type(type_name)
            if not isinstance(graphql_type, GraphQLObjectType):
                raise SchemaBindingError(
                    f'schema has no object type {type_name}',
                    data={'type': type_name},
                )
            graphql_field = graphql_type.fields.get(field_name)
            if graphql_field is None:
                raise SchemaBindingError(
                    f'schema has no field {type_name}.{field_name}',
                    data={'type': type_name, 'field': field_name},
                )

            func = getattr(self, method_name)
            if type_name in self.ROOT_TYPE_NAMES:
                graphql_field.resolve = self._build_root_resolver(func)
            else:
                graphql_field.resolve = self._build_field_resolver(func)

            console.debug(f'bound {type_name}.{field_name} to {method_name}')

        return schema

    @staticmethod
    def _build_root_resolver(func: Callable) -> Callable:
        def resolve(parent, info, **arguments):
            return func(**arguments)
        return resolve

    @staticmethod
    def _build_field_resolver(func: Callable) -> Callable:
        def resolve(parent, info, **arguments):
            return func(parent)
        return resolve

    @resolver('Query', 'author')
    def author(self, id) -> Dict:
        return self._store.find(AUTHORS, Field(ID) == id)

    @resolver('Query', 'authors')
    def authors(self) -> List[Dict]:
        return self._store.filter(AUTHORS)

    @resolver('Query', 'post')
    def post(self, id) -> Dict:
        return self._store.find(POSTS, Field(ID) == id)

    @resolver('Query', 'posts')
    def posts(self) -> List[Dict]:
        return self._store.filter(POSTS)

    @resolver('Mutation', 'createAuthor')
    def create_author(self, **fields) -> Dict:
        record = dict(self._prune(fields), **{ID: self._id_factory()})
        return self._store.insert(AUTHORS, record)

    @resolver('Mutation', 'updateAuthor')
    def update_author(self, id, **fields) -> Dict:
        return self._store.update(AUTHORS, Field(ID) == id, self._prune(fields))

    @resolver('Mutation', 'deleteAuthor')
    def delete_author(self, id) -> Dict:
        author = self._store.find(AUTHORS, Field(ID) == id)
        if author is None:
            return None

        self._store.remove(AUTHORS, Field(ID) == id)
        removed_posts = self._store.remove(
            POSTS, Field('author') == id, many=True
        )
        console.debug(
            f'deleted author {id} and {len(removed_posts)} post(s)'
        )
        return author

    @resolver('Mutation', 'createPost')
    def create_post(self, **fields) -> Dict:
        fields = self._prune(fields)
        self._ensure_author_exists(fields.get('author'))
        record = dict(fields, **{ID: self._id_factory()})
        return self._store.insert(POSTS, record)

    @resolver('Mutation', 'updatePost')
    def update_post(self, id, **fields) -> Dict:
        fields = self._prune(fields)
        if 'author' in fields:
            self._ensure_author_exists(fields['author'])
        return self._store.update(POSTS, Field(ID) == id, fields)

    @resolver('Mutation', 'deletePost')
    def delete_post(self, id) -> Dict:
        post = self._store.find(POSTS, Field(ID) == id)
        if post is not None:
            self._store.remove(POSTS, Field(ID) == id)
        return post

    @resolver('Author', 'posts')
    def author_posts(self, author: Dict) -> List[Dict]:
        # live view of the post collection, not the generation-time snapshot
        return self._store.filter(POSTS, Field('author') == author[ID])

    @resolver('Post', 'author')
    def post_author(self, post: Dict) -> Dict:
        return self._store.find(AUTHORS, Field(ID) == post.get('author'))

    @staticmethod
    def _prune(fields: Dict) -> Dict:
        """
        Drop the id and any null values from mutation arguments.
        """
        return {
            k: v for k, v in fields.items()
            if k != ID and v is not None
        }

    def _ensure_author_exists(self, author_id):
        if self._store.find(AUTHORS, Field(ID) == author_id) is None:
            console.warning(f'post references unknown author {author_id}')
            raise ReferentialIntegrityError(
                f'author does not exist: {author_id}',
                data={'author': author_id},
            )
