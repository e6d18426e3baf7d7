"""Tests for the shared HTTP session and dataset download."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
import requests
from urllib3.util.retry import Retry

from seoul_bike_explorer.datasources.seoul_bike.download import fetch_dataset_csv
from seoul_bike_explorer.services.http import (
    DEFAULT_RETRY,
    DEFAULT_TIMEOUT,
    USER_AGENT,
    create_session,
    session,
)


class TestDefaultRetry:
    """Verify the retry strategy."""

    def test_retry_budget(self) -> None:
        assert DEFAULT_RETRY.total == 3
        assert DEFAULT_RETRY.backoff_factor == 1

    def test_retries_on_throttling_and_server_errors(self) -> None:
        for status in (429, 500, 502, 503, 504):
            assert status in DEFAULT_RETRY.status_forcelist
        assert 404 not in DEFAULT_RETRY.status_forcelist

    def test_only_idempotent_methods(self) -> None:
        allowed = DEFAULT_RETRY.allowed_methods
        assert "GET" in allowed
        assert "POST" not in allowed


class TestCreateSession:
    """Verify the session factory."""

    def test_mounts_retry_adapters(self) -> None:
        s = create_session()
        for url in ("https://example.com", "http://example.com"):
            adapter = s.get_adapter(url)
            assert isinstance(adapter, requests.adapters.HTTPAdapter)
            assert adapter.max_retries.total == 3

    def test_custom_retry(self) -> None:
        s = create_session(retry=Retry(total=7))
        assert s.get_adapter("https://example.com").max_retries.total == 7

    def test_user_agent_header(self) -> None:
        assert create_session().headers["User-Agent"] == USER_AGENT
        assert USER_AGENT.startswith("seoul-bike-explorer/")

    def test_default_timeout_injected(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 42

    def test_explicit_timeout_not_overridden(self) -> None:
        s = create_session(timeout=42)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(
            requests.adapters.HTTPAdapter, "send", return_value=requests.Response()
        ) as mock_send:
            s.send(prep, timeout=5)
            _, kwargs = mock_send.call_args
            assert kwargs.get("timeout") == 5

    def test_module_session_default_timeout(self) -> None:
        assert DEFAULT_TIMEOUT == 60
        assert session.get_adapter("https://example.com").max_retries.total == 3


class TestFetchDatasetCsv:
    """Verify the dataset download."""

    @patch("seoul_bike_explorer.datasources.seoul_bike.download.session")
    def test_returns_body(self, mock_session: MagicMock) -> None:
        mock_session.get.return_value.content = b"Date,Hour\n"
        assert fetch_dataset_csv("https://example.com/data.csv") == b"Date,Hour\n"
        mock_session.get.assert_called_once_with("https://example.com/data.csv")

    @patch("seoul_bike_explorer.datasources.seoul_bike.download.session")
    def test_http_error_raised(self, mock_session: MagicMock) -> None:
        mock_session.get.return_value.raise_for_status.side_effect = requests.HTTPError("404")
        with pytest.raises(requests.HTTPError):
            fetch_dataset_csv("https://example.com/missing.csv")
