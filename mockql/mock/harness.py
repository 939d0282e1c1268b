import re

from typing import Dict, Text, Tuple

import responses

from mockql.util.loggers import console
from mockql.constants import MOCK_URL_PATTERN, MOCK_METHODS
from mockql.executor import QueryExecutor, Request


class MockHarness(object):
    """
    Executes GraphQL requests against a QueryExecutor and installs the result
    as the fixed reply to every outbound HTTP call made through `requests`.

    Each call to `mock` replaces whatever reply the previous call installed.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        requests_mock: responses.RequestsMock = None,
        url_pattern: Text = None,
        methods: Tuple[Text] = None,
    ):
        self._executor = executor
        self._requests_mock = requests_mock or responses.RequestsMock(
            assert_all_requests_are_fired=False
        )
        self._url_pattern = re.compile(url_pattern or MOCK_URL_PATTERN)
        self._methods = tuple(methods or MOCK_METHODS)
        self._is_started = False

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.stop()

    @property
    def executor(self) -> QueryExecutor:
        return self._executor

    @property
    def requests_mock(self) -> responses.RequestsMock:
        return self._requests_mock

    @property
    def is_started(self) -> bool:
        return self._is_started

    @property
    def calls(self):
        """
        Calls intercepted since the last `mock` or `reset`.
        """
        return self._requests_mock.calls

    def start(self):
        """
        Begin intercepting outbound calls. Does nothing if already started.
        """
        if not self._is_started:
            self._requests_mock.start()
            self._is_started = True
            console.debug('started intercepting outbound requests')

    def stop(self):
        """
        Stop intercepting outbound calls and drop all registered replies.
        """
        if self._is_started:
            self._requests_mock.stop(allow_assert=False)
            self._is_started = False
            console.debug('stopped intercepting outbound requests')
        self._requests_mock.reset()

    def reset(self):
        """
        Drop all registered replies and recorded calls.
        """
        self._requests_mock.reset()

    def mock(self, request) -> Dict:
        """
        Execute the request and register its response as the reply to any
        subsequent outbound call, returning the response. Execution errors are
        part of the response, not raised.
        """
        self.reset()
        self.start()

        request = Request.load(request)
        response = self._executor.execute(request).formatted

        for method in self._methods:
            self._requests_mock.add(
                method, self._url_pattern, json=response, status=200
            )

        console.debug(
            f'registered mock response for {len(self._methods)} methods '
            f'on "{self._url_pattern.pattern}"',
            data={'errors': response['errors']} if 'errors' in response else None
        )

        return response

