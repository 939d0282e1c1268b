from mockql.store import RelationalStore
from mockql.query import Predicate, Field, where
from mockql.fixtures import FixtureGenerator, build_store
from mockql.resolver import ResolverBindings
from mockql.executor import QueryExecutor, Request
from mockql.mock import MockHarness
from mockql.exceptions import (
    MockqlError,
    StoreError,
    ValidationError,
    ReferentialIntegrityError,
    SchemaBindingError,
)
from mockql.logging import ConsoleLoggerInterface
