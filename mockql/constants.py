from appyratus.env import Environment
from appyratus.enum import Enum


ENV = Environment()

# logging:
CONSOLE_LOG_LEVEL = ENV.get('MOCKQL_CONSOLE_LOG_LEVEL', 'INFO')

# fixture generation:
FIXTURE_SEED = 666
AUTHOR_COUNT = 2
POSTS_PER_AUTHOR = 4

# network interception:
MOCK_URL_PATTERN = r'.*'
MOCK_METHODS = ('GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'HEAD', 'OPTIONS')


# field name constants:
ID = 'id'


# collection names
COLLECTION = Enum(
    AUTHORS='authors',
    POSTS='posts',
)

# fields that a record in each collection may carry
KNOWN_FIELDS = {
    COLLECTION.AUTHORS: frozenset({ID, 'name', 'posts'}),
    COLLECTION.POSTS: frozenset({ID, 'title', 'body', 'author'}),
}


# op codes for Predicate objects
OP_CODE = Enum(
    EQ='eq',
    AND='and',
)
