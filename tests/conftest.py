"""Shared fixtures for Klara API client tests."""

import json
from collections.abc import Callable

import httpx
import pytest

from klara_client.klaraapi import client


class RecordingHandler:
    """httpx.MockTransport handler that records requests.

    Returns ``response`` (or the result of calling it with the request)
    for every request.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response: httpx.Response | Callable[[httpx.Request], httpx.Response] = (
            httpx.Response(200, json={"data": None})
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if callable(self.response):
            return self.response(request)
        return self.response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last_request.content)


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def api_client(handler: RecordingHandler) -> client.KlaraApiClient:
    """KlaraApiClient wired to the recording handler instead of the network."""
    return client.KlaraApiClient(transport=httpx.MockTransport(handler))
