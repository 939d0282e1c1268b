import pytest
import requests
import responses

from mock import MagicMock

from mockql import MockHarness, Request
from mockql import documents


URL = 'http://api.example.com/graphql'


class TestMockHarness:
    def test_mock_returns_formatted_result(self, harness):
        response = harness.mock({'query': documents.AUTHORS})
        assert response['data']['authors']
        assert 'errors' not in response

    def test_outbound_call_receives_response(self, harness):
        response = harness.mock({'query': documents.POSTS_AND_AUTHORS})
        reply = requests.post(URL, json={'query': 'anything'})
        assert reply.status_code == 200
        assert reply.json() == response

    def test_any_method_and_url(self, harness):
        response = harness.mock({'query': documents.POSTS})
        assert requests.get('https://elsewhere.test/any/path?x=1').json() == response
        assert requests.put(URL).json() == response
        assert requests.delete(URL).json() == response

    def test_second_mock_replaces_first(self, harness):
        first = harness.mock({'query': documents.AUTHORS})
        second = harness.mock({'query': documents.POSTS})
        assert first != second

        for _ in range(2):
            assert requests.post(URL).json() == second

    def test_errors_are_mocked_as_data(self, harness):
        response = harness.mock({'query': '{ authors { nope } }'})
        assert response['data'] is None
        assert response['errors']
        assert requests.post(URL).json() == response

    def test_mutations_change_later_mocks(self, harness, author_ids):
        harness.mock({
            'query': documents.DELETE_AUTHOR,
            'variables': {'id': author_ids[0]},
        })
        response = harness.mock({'query': documents.POSTS})
        assert len(response['data']['posts']) == 4
        assert requests.post(URL).json() == response

    def test_calls_are_recorded(self, harness):
        harness.mock({'query': documents.POSTS})
        requests.post(URL, json={'query': 'x'})
        assert len(harness.calls) == 1
        assert harness.calls[0].request.url == URL

    def test_url_pattern(self, executor):
        with MockHarness(executor, url_pattern=r'https://api\.example\.com/.*') as harness:
            response = harness.mock({'query': documents.AUTHORS})
            assert requests.post('https://api.example.com/graphql').json() == response
            with pytest.raises(requests.exceptions.ConnectionError):
                requests.post('https://other.example.com/graphql')

    def test_stop_ends_interception(self, executor):
        harness = MockHarness(executor)
        harness.mock({'query': documents.AUTHORS})
        assert harness.is_started
        harness.stop()
        assert not harness.is_started
        harness.stop()

    def test_executes_before_registering(self):
        requests_mock = responses.RequestsMock(assert_all_requests_are_fired=False)
        requests_mock.add = MagicMock(wraps=requests_mock.add)
        executor = MagicMock()
        executor.execute.return_value.formatted = {'data': {'ok': True}}

        parent = MagicMock()
        parent.attach_mock(executor.execute, 'execute')
        parent.attach_mock(requests_mock.add, 'add')

        harness = MockHarness(executor, requests_mock=requests_mock, methods=['POST', 'GET'])
        try:
            assert harness.mock('{ authors { id } }') == {'data': {'ok': True}}
            assert requests.post(URL).json() == {'data': {'ok': True}}
        finally:
            harness.stop()

        order = [
            name for name, args, kwargs in parent.mock_calls
            if name in ('execute', 'add')
        ]
        assert order == ['execute', 'add', 'add']

        request = executor.execute.call_args[0][0]
        assert isinstance(request, Request)
        assert request.query == '{ authors { id } }'


class TestPytestPlugin:
    def test_plugin_fixtures(self, mockql_store, mockql_harness):
        assert mockql_harness.executor.store is mockql_store
        assert mockql_harness.is_started
        response = mockql_harness.mock({'query': documents.AUTHORS})
        assert len(response['data']['authors']) == 2
