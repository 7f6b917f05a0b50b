"""
Shared fixtures.

Requests never leave the process: a recording adapter is mounted on the
client's session and answers every request with a queued response.
"""

import json

import pytest
import requests
from requests.adapters import HTTPAdapter

from dribbble_api_client import DribbbleClient


class RecordingAdapter(HTTPAdapter):
    """Transport spy returning canned responses."""

    def __init__(self):
        super().__init__()
        self.requests = []
        self.send_kwargs = []
        self._queue = []
        self.error = None

    def queue(self, status=200, body=None, content_type="application/json"):
        """Queue the next response. ``body`` may be JSON-able, str or bytes."""
        if body is None:
            raw = b""
        elif isinstance(body, bytes):
            raw = body
        elif isinstance(body, str):
            raw = body.encode("utf-8")
        else:
            raw = json.dumps(body).encode("utf-8")
        self._queue.append((status, raw, content_type))

    def send(self, request, **kwargs):
        self.requests.append(request)
        self.send_kwargs.append(kwargs)
        if self.error is not None:
            raise self.error

        status, raw, content_type = (
            self._queue.pop(0) if self._queue else (200, b"{}", "application/json")
        )
        response = requests.Response()
        response.status_code = status
        response._content = raw
        response.headers["Content-Type"] = content_type
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        return response

    @property
    def last(self):
        return self.requests[-1]


@pytest.fixture
def transport():
    """Create a recording transport."""
    return RecordingAdapter()


@pytest.fixture
def client(transport):
    """Create a client without an access token."""
    c = DribbbleClient(client_id="my-id", client_secret="my-secret", scope="public")
    c.session.mount("https://", transport)
    yield c
    c.close()


@pytest.fixture
def authorized_client(client):
    """Create a client with an access token installed."""
    client.set_access_token("abc123")
    return client
