"""Pytest configuration and fixtures."""

import json
import os

import pytest
import requests
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from aztec_node.config import AztecSettings, reset_settings
from aztec_node.transport.client import AztecClient


MASTER_SECRET = "0x" + "1" * 64


class FakeResponse:
    """Minimal stand-in for :class:`requests.Response`."""

    def __init__(self, payload=None, status_code=200, content=None):
        self.status_code = status_code
        self._payload = payload
        if content is not None:
            self.content = content
        elif payload is None:
            self.content = b""
        else:
            self.content = json.dumps(payload).encode("utf-8")

    def json(self):
        return json.loads(self.content)

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)


class FakeSession:
    """Records requests and replays queued responses in order."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def queue(self, payload=None, status_code=200, content=None):
        self.responses.append(FakeResponse(payload, status_code, content))

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if not self.responses:
            return FakeResponse({})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True

    @property
    def last_call(self):
        return self.calls[-1]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from AZTEC_* variables and cached settings."""
    for name in list(os.environ):
        if name.startswith("AZTEC_"):
            monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def settings():
    """Settings pointing at a local custom endpoint."""
    return AztecSettings(
        network="custom",
        rpc_endpoint="http://aztec.test/",
        account_address="0x" + "ab" * 32,
        spending_key="0x" + "cd" * 32,
        _env_file=None,
    )


@pytest.fixture
def session():
    """Fake HTTP session."""
    return FakeSession()


@pytest.fixture
def client(settings, session):
    """Client wired to the fake session."""
    return AztecClient(settings=settings, session=session)


@pytest.fixture(scope="session")
def test_data():
    """Fixture providing test data."""
    return {
        "master_secret": MASTER_SECRET,
        "token_address": "0x" + "22" * 32,
        "owner": "0x" + "33" * 32,
        "randomness": "0x" + "44" * 32,
    }
