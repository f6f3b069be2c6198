"""Tests for importmap_manifest.http (no network access)."""

import pytest
import requests

from importmap_manifest import http
from importmap_manifest.errors import PackageResolutionError


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload if payload is not None else {}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)

    def json(self):
        return self._payload


@pytest.fixture
def no_sleep(monkeypatch):
    monkeypatch.setattr(http.time, "sleep", lambda seconds: None)


def _fake_get(responses, calls):
    """Return a requests.get replacement serving *responses* in order."""
    def get(url, params=None, headers=None, timeout=None):
        calls.append((url, params))
        result = responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result
    return get


# -- request_with_retry ----------------------------------------------------

class TestRequestWithRetry:
    def test_retries_connection_errors(self, monkeypatch, no_sleep):
        calls = []
        monkeypatch.setattr(http.requests, "get", _fake_get(
            [requests.ConnectionError("boom"), FakeResponse(payload={"ok": True})],
            calls,
        ))
        resp = http.request_with_retry("https://example.test/x")
        assert resp.json() == {"ok": True}
        assert len(calls) == 2

    def test_gives_up_after_max_retries(self, monkeypatch, no_sleep):
        calls = []
        monkeypatch.setattr(http.requests, "get", _fake_get(
            [FakeResponse(503) for _ in range(http.MAX_RETRIES)], calls,
        ))
        with pytest.raises(requests.HTTPError):
            http.request_with_retry("https://example.test/x")
        assert len(calls) == http.MAX_RETRIES

    def test_client_error_not_retried(self, monkeypatch, no_sleep):
        calls = []
        monkeypatch.setattr(http.requests, "get", _fake_get([FakeResponse(404)], calls))
        with pytest.raises(requests.HTTPError):
            http.request_with_retry("https://example.test/x")
        assert len(calls) == 1


# -- resolve_version -------------------------------------------------------

class TestResolveVersion:
    def test_resolves_constraint(self, monkeypatch):
        calls = []
        monkeypatch.setattr(http.requests, "get", _fake_get(
            [FakeResponse(payload={"version": "4.17.21"})], calls,
        ))
        assert http.resolve_version("lodash", "^4.15") == "4.17.21"
        url, params = calls[0]
        assert url == "https://data.jsdelivr.com/v1/packages/npm/lodash/resolved"
        assert params == {"specifier": "^4.15"}

    def test_defaults_to_latest_and_strips_subpath(self, monkeypatch):
        calls = []
        monkeypatch.setattr(http.requests, "get", _fake_get(
            [FakeResponse(payload={"version": "4.4.0"})], calls,
        ))
        assert http.resolve_version("chart.js/auto") == "4.4.0"
        url, params = calls[0]
        assert url.endswith("/npm/chart.js/resolved")
        assert params == {"specifier": "latest"}

    def test_no_matching_version(self, monkeypatch):
        monkeypatch.setattr(http.requests, "get", _fake_get(
            [FakeResponse(payload={"version": None})], [],
        ))
        with pytest.raises(PackageResolutionError, match="No version"):
            http.resolve_version("lodash", "^99")

    def test_http_failure_wrapped(self, monkeypatch):
        monkeypatch.setattr(http.requests, "get", _fake_get([FakeResponse(404)], []))
        with pytest.raises(PackageResolutionError, match='"not-a-package@latest"'):
            http.resolve_version("not-a-package")
