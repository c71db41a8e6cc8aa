import pytest
import requests
from fastapi.testclient import TestClient

from brewroute.main import create_app
from brewroute.services.http_client import reset_http_session


class FakeResponse:
    def __init__(self, payload, status_code=200):
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        return self._payload


class FakeSession:
    """Records GET calls and answers with a canned response"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_session():
    """Factory for a stand-in requests session: fake_session(payload, status_code=200, error=None)"""
    def make(payload=None, status_code=200, error=None):
        return FakeSession(FakeResponse(payload, status_code), error)
    return make


@pytest.fixture
def client():
    with TestClient(create_app()) as test_client:
        yield test_client
    reset_http_session()
