"""
pytest fixtures for code under test that talks to a GraphQL API over HTTP.
Enable with `pytest_plugins = ['mockql.test.plugin']` in a conftest.py.
"""

import pytest

from mockql.fixtures import build_store
from mockql.executor import QueryExecutor
from mockql.mock import MockHarness


@pytest.fixture(scope='function')
def mockql_store():
    return build_store()


@pytest.fixture(scope='function')
def mockql_executor(mockql_store):
    return QueryExecutor(mockql_store)


@pytest.fixture(scope='function')
def mockql_harness(mockql_executor):
    with MockHarness(mockql_executor) as harness:
        yield harness
