import pytest

from pytest import fixture

from mockql import (
    RelationalStore,
    FixtureGenerator,
    ResolverBindings,
    QueryExecutor,
    MockHarness,
)
from mockql.test.plugin import mockql_store, mockql_executor, mockql_harness


@fixture(scope='function')
def empty_store():
    return RelationalStore()


@fixture(scope='function')
def store():
    return FixtureGenerator(seed=666).generate(RelationalStore())


@fixture(scope='function')
def bindings(store):
    return ResolverBindings(store)


@fixture(scope='function')
def executor(store):
    return QueryExecutor(store)


@pytest.fixture(scope='function')
def harness(executor):
    with MockHarness(executor) as harness:
        yield harness


@fixture(scope='function')
def author_ids(store):
    return [author['id'] for author in store.filter('authors')]
