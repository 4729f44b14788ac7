"""
Shared fixtures for hippo test suite.
"""

import json
from unittest.mock import MagicMock

import pytest

from hippo.client import HippoClient


def make_response(status_code=200, body=b""):
    """A stand-in for requests.Response with just what the client reads."""
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    resp = MagicMock()
    resp.status_code = status_code
    resp.content = body
    return resp


# ── Connection fixtures ─────────────────────────────────────

@pytest.fixture
def base_url():
    return "https://hippo.example.com/"


@pytest.fixture
def token():
    return "abc123"


@pytest.fixture
def mock_session():
    return MagicMock()


@pytest.fixture
def client(mock_session, base_url, token):
    return HippoClient(mock_session, base_url, token)


# ── Mock response factories ──────────────────────────────────

@pytest.fixture
def token_response_body(token):
    """Body of a successful account/createtoken call."""
    return {"token": token, "expiration": "2099-01-01"}


@pytest.fixture
def login_response(token_response_body):
    return make_response(200, token_response_body)


@pytest.fixture
def created_response():
    return make_response(201)
