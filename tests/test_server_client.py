from unittest.mock import MagicMock, patch

import pytest
import requests

from quotebox.storage.models import Quote
from quotebox.sync.server_client import (
    QuoteServerClient,
    SyncError,
    SyncFailure,
    map_remote_record,
)


def _make_response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response


def test_map_remote_record_fallback_chain():
    assert map_remote_record({"title": "T", "body": "B"}, 5).text == "T"
    assert map_remote_record({"title": "", "body": "B"}, 5).text == "B"
    assert map_remote_record({"id": 1}, 5) == Quote("Untitled", "Server", 5)


def test_fetch_remote_maps_and_limits_records():
    payload = [{"title": f"post {i}", "body": "..."} for i in range(15)]

    with patch('requests.Session.get', return_value=_make_response(payload)) as mock_get:
        client = QuoteServerClient("https://example.test/posts", clock=lambda: 777)
        quotes = client.fetch_remote()

    assert len(quotes) == 10
    assert quotes[0] == Quote("post 0", "Server", 777)
    assert all(q.category == "Server" and q.timestamp == 777 for q in quotes)
    assert mock_get.call_args.kwargs['timeout'] == 10


def test_fetch_remote_http_error_raises_sync_error():
    with patch('requests.Session.get', return_value=_make_response([], status_code=500)):
        client = QuoteServerClient("https://example.test/posts")
        with pytest.raises(SyncError) as info:
            client.fetch_remote()

    assert info.value.reason is SyncFailure.NETWORK_FAILURE


def test_fetch_remote_connection_error_raises_sync_error():
    with patch('requests.Session.get', side_effect=requests.ConnectionError("refused")):
        client = QuoteServerClient("https://example.test/posts")
        with pytest.raises(SyncError):
            client.fetch_remote()


def test_fetch_remote_rejects_non_list_payload():
    with patch('requests.Session.get', return_value=_make_response({"posts": []})):
        client = QuoteServerClient("https://example.test/posts")
        with pytest.raises(SyncError):
            client.fetch_remote()


def test_push_local_posts_quote_json():
    with patch('requests.Session.post', return_value=_make_response({"id": 101})) as mock_post:
        client = QuoteServerClient("https://example.test/posts")
        result = client.push_local(Quote("A", "X", 100))

    assert result == {"id": 101}
    assert mock_post.call_args.kwargs['json'] == {"text": "A", "category": "X", "timestamp": 100}


def test_push_local_failure_raises():
    with patch('requests.Session.post', return_value=_make_response({}, status_code=404)):
        client = QuoteServerClient("https://example.test/posts")
        with pytest.raises(SyncError):
            client.push_local(Quote("A", "X", 100))


def test_dry_run_makes_no_requests(capsys):
    with patch('requests.Session.get') as mock_get, patch('requests.Session.post') as mock_post:
        client = QuoteServerClient("https://example.test/posts", dry_run=True)
        assert client.fetch_remote() == []
        assert client.push_local(Quote("A", "X", 1)) is None

    mock_get.assert_not_called()
    mock_post.assert_not_called()
    assert "Would post quote" in capsys.readouterr().out


def test_map_remote_record_skips_blank_and_non_string_fields():
    assert map_remote_record({"title": "   ", "body": "B"}, 5).text == "B"
    assert map_remote_record({"title": 5, "body": "B"}, 5).text == "B"
    assert map_remote_record({"title": "\n", "body": " "}, 5).text == "Untitled"
    assert map_remote_record("not a record", 5).text == "Untitled"
