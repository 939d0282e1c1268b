from typing import Dict, Text

from graphql import ExecutionResult, GraphQLSchema, build_schema, graphql_sync

from mockql.util.loggers import console
from mockql.schema import load_type_defs
from mockql.resolver import ResolverBindings


class Request(object):
    """
    A GraphQL request: a document plus its variable values.
    """

    def __init__(
        self,
        query: Text,
        variables: Dict = None,
        operation_name: Text = None,
    ):
        self.query = query
        self.variables = variables or {}
        self.operation_name = operation_name

    def __repr__(self):
        return f'Request(variables={self.variables})'

    @classmethod
    def load(cls, request) -> 'Request':
        """
        Build a Request from a Request, a dict with `query`, `variables` and
        `operationName` keys, or a bare document string.
        """
        if isinstance(request, Request):
            return request
        if isinstance(request, str):
            return cls(request)
        if isinstance(request, dict):
            return cls(
                query=request['query'],
                variables=request.get('variables'),
                operation_name=(
                    request.get('operationName') or
                    request.get('operation_name')
                ),
            )
        raise ValueError(f'unrecognized request: {request!r}')

    def dump(self) -> Dict:
        data = {'query': self.query, 'variables': self.variables}
        if self.operation_name:
            data['operationName'] = self.operation_name
        return data


class QueryExecutor(object):
    """
    Executes GraphQL documents against a RelationalStore through graphql-core.
    Results are returned exactly as graphql-core produces them.
    """

    def __init__(
        self,
        store: 'RelationalStore',
        type_defs: Text = None,
        bindings: ResolverBindings = None,
    ):
        self._store = store
        self._bindings = bindings or ResolverBindings(store)
        self._schema = self._bindings.bind_to_schema(
            build_schema(type_defs or load_type_defs())
        )

    @property
    def store(self) -> 'RelationalStore':
        return self._store

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    @property
    def bindings(self) -> ResolverBindings:
        return self._bindings

    def execute(self, request=None, **kwargs) -> ExecutionResult:
        """
        Execute a request, given either as a Request-like object or as
        `query`, `variables` and `operation_name` keyword arguments.
        """
        request = Request.load(request if request is not None else kwargs)

        result = graphql_sync(
            self._schema,
            request.query,
            variable_values=request.variables,
            operation_name=request.operation_name,
        )

        if result.errors:
            console.debug(
                f'executed request with {len(result.errors)} error(s)',
                data={'errors': [str(err) for err in result.errors]}
            )

        return result
