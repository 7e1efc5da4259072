"""
Tests for RequestsPageFetcher
"""

from unittest.mock import Mock, patch

import pytest
import requests

from bsl_lookup.adapters.http_fetcher import RequestsPageFetcher, encode_word
from bsl_lookup.domain.models import FetchFailure, FetchSuccess


def mock_response(status_code=200, text="<html></html>", url="https://www.signbsl.com/sign/black"):
    response = Mock()
    response.status_code = status_code
    response.url = url
    response.text = text
    response.content = text.encode("utf-8")
    return response


class TestRequestsPageFetcher:

    @pytest.fixture
    def fetcher(self):
        return RequestsPageFetcher(
            url_template="https://www.signbsl.com/sign/{word}",
            user_agent="TestBrowser/1.0",
            timeout=5,
            retries=0,
        )

    def test_url_for_percent_encodes_word(self, fetcher):
        assert fetcher.url_for("black") == "https://www.signbsl.com/sign/black"
        assert fetcher.url_for("café") == "https://www.signbsl.com/sign/caf%C3%A9"
        assert fetcher.url_for("a/b?c") == "https://www.signbsl.com/sign/a%2Fb%3Fc"

    def test_encode_word_matches_uri_component_rules(self):
        assert encode_word("don't") == "don't"
        assert encode_word("rock&roll") == "rock%26roll"
        assert encode_word("a-b_c.d~e!(f)*") == "a-b_c.d~e!(f)*"

    def test_request_headers(self, fetcher):
        headers = fetcher.headers
        assert headers["User-Agent"] == "TestBrowser/1.0"
        assert headers["Cache-Control"] == "no-cache"
        assert headers["Pragma"] == "no-cache"

    def test_success(self, fetcher):
        with patch.object(fetcher, "session") as mock_session:
            mock_session.get.return_value = mock_response(200, "<video></video>")
            result = fetcher.fetch("black")

            mock_session.get.assert_called_once_with(
                "https://www.signbsl.com/sign/black", headers=fetcher.headers, timeout=5
            )

        assert result == FetchSuccess(
            word="black",
            url="https://www.signbsl.com/sign/black",
            markup="<video></video>",
            status=200,
        )
        assert result.ok

    @pytest.mark.parametrize("status", [301, 403, 404, 500, 503])
    def test_non_success_status_is_failure(self, fetcher, status):
        with patch.object(fetcher, "session") as mock_session:
            mock_session.get.return_value = mock_response(status, "denied")
            result = fetcher.fetch("black")

        assert isinstance(result, FetchFailure)
        assert result.status == status
        assert result.word == "black"
        assert result.reason == f"HTTP {status}"
        assert not result.ok
        assert result.markup == "denied"

    def test_redirect_reports_final_url(self, fetcher):
        with patch.object(fetcher, "session") as mock_session:
            mock_session.get.return_value = mock_response(
                200, "<video></video>", url="https://www.signbsl.com/sign/black/1"
            )
            result = fetcher.fetch("black")

        assert result.url == "https://www.signbsl.com/sign/black/1"

    def test_timeout_capped_by_caller(self, fetcher):
        with patch.object(fetcher, "session") as mock_session:
            mock_session.get.return_value = mock_response(200)
            fetcher.fetch("black", timeout=2.5)
            fetcher.fetch("black", timeout=60)

        timeouts = [c.kwargs["timeout"] for c in mock_session.get.call_args_list]
        assert timeouts == [2.5, 5]

    def test_caller_session_is_not_modified(self):
        session = requests.Session()
        before = dict(session.headers)
        adapter = session.get_adapter("https://www.signbsl.com/")

        fetcher = RequestsPageFetcher(user_agent="TestBrowser/1.0", retries=3, session=session)

        assert fetcher.session is session
        assert dict(session.headers) == before
        assert session.get_adapter("https://www.signbsl.com/") is adapter

    def test_connection_error_is_failure(self, fetcher):
        with patch.object(fetcher, "session") as mock_session:
            mock_session.get.side_effect = requests.exceptions.ConnectionError("refused")
            result = fetcher.fetch("hat")

        assert isinstance(result, FetchFailure)
        assert result.status is None
        assert "refused" in result.cause

    def test_timeout_is_failure(self, fetcher):
        with patch.object(fetcher, "session") as mock_session:
            mock_session.get.side_effect = requests.exceptions.Timeout("slow")
            result = fetcher.fetch("hat")

        assert isinstance(result, FetchFailure)
        assert result.cause.startswith("timeout")

    def test_logs_status_and_length(self, fetcher, caplog):
        with patch.object(fetcher, "session") as mock_session:
            mock_session.get.return_value = mock_response(200, "12345")
            with caplog.at_level("INFO", logger="bsl_lookup.adapters.http_fetcher"):
                fetcher.fetch("black")

        assert "status=200 bytes=5" in caplog.text

    def test_retries_mount_adapter(self):
        fetcher = RequestsPageFetcher(retries=2)
        adapter = fetcher.session.get_adapter("https://www.signbsl.com/sign/black")

        assert adapter.max_retries.total == 2
        assert 503 in adapter.max_retries.status_forcelist

    def test_defaults_from_config(self):
        from bsl_lookup import config

        fetcher = RequestsPageFetcher()
        assert fetcher.url_template == config.SIGN_SOURCE_URL_TEMPLATE
        assert fetcher.timeout == config.FETCH_TIMEOUT
        assert fetcher.headers["User-Agent"] == config.SIGN_USER_AGENT
