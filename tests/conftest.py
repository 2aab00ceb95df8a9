"""Shared fixtures: an app client and a fake upstream behind httpx.MockTransport."""

import httpx
import pytest
from fastapi.testclient import TestClient

from Core import proxy_FastAPI
from Public.API.Libs import upstream as upstream_module


class FakeUpstream:
    """Records every upstream request and answers with a configurable handler."""

    def __init__(self):
        self.requests = []
        self.handler = lambda request: httpx.Response(404)

    def respond(self, handler):
        self.handler = handler

    def __call__(self, request):
        self.requests.append(request)
        return self.handler(request)


@pytest.fixture
def fake_upstream(monkeypatch):
    fake = FakeUpstream()

    def session():
        return httpx.AsyncClient(transport=httpx.MockTransport(fake), follow_redirects=True)

    monkeypatch.setattr(upstream_module, "upstream_session", session)
    return fake


@pytest.fixture
def client(fake_upstream):
    return TestClient(proxy_FastAPI)
