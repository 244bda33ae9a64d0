"""Shared fixtures for the client tests."""

import pytest

from twitter_exchange.auth import Credentials
from twitter_exchange.oauth import OAuth1Signer
from twitter_exchange.transport import TransportResponse

class MockTransport:
    """Stand-in for RequestsTransport that records every call."""

    def __init__(self, status_code=200, body='{"data": {"id": "1"}}'):
        self.status_code = status_code
        self.body = body
        self.calls = []

    def send(self, method, url, headers, body=None):
        self.calls.append((method, url, headers, body))
        return TransportResponse(status_code=self.status_code, body=self.body)


@pytest.fixture
def credentials():
    return Credentials(
        consumer_key="ck",
        consumer_secret="cs",
        access_token="at",
        access_token_secret="ats",
    )


@pytest.fixture
def fixed_signer(credentials):
    return OAuth1Signer(credentials, nonce_factory=lambda: "1", clock=lambda: 1000000000)


@pytest.fixture
def transport():
    return MockTransport()
