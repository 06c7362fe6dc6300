"""Pytest configuration and fixtures for http-probe tests."""

import pytest
import httpx
from typing import Callable, Iterator, List

from http_probe.core.client import build_client
from http_probe.core.config import Options


def make_response(
    status_code: int,
    headers: dict = None,
    body: bytes = b"",
) -> httpx.Response:
    """Build a response without the Content-Length httpx adds for `content=`."""
    return httpx.Response(
        status_code,
        headers=headers or {},
        stream=httpx.ByteStream(body),
    )


@pytest.fixture
def default_options() -> Options:
    """Options with short timeout and redirects not followed."""
    return Options(timeout=5.0)


@pytest.fixture
def mock_client() -> Iterator[Callable[..., httpx.Client]]:
    """Factory building clients backed by an ``httpx.MockTransport``."""
    clients: List[httpx.Client] = []

    def factory(options: Options, handler: Callable, **kwargs) -> httpx.Client:
        client = build_client(options, transport=httpx.MockTransport(handler), **kwargs)
        clients.append(client)
        return client

    yield factory

    for client in clients:
        client.close()


@pytest.fixture
def no_sleep(monkeypatch) -> List[float]:
    """Record retry waits instead of sleeping."""
    waits: List[float] = []
    monkeypatch.setattr("http_probe.core.client.time.sleep", waits.append)
    return waits
