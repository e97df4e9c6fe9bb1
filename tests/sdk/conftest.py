"""SDK test fixtures ensuring isolation from real services."""

from typing import Callable, List

import httpx
import pytest

from workflows_sdk.workflow_client import MockWorkflowTransport, WorkflowService

# Captured before the autouse fixture below replaces the class.
_RealAsyncClient = httpx.AsyncClient

BASE_URL = "https://workflows.test/v1"


class _BlockedHttpClient:  # pragma: no cover - constructor raises immediately
    def __init__(self, *args, **kwargs):
        raise RuntimeError(
            "HTTP clients are blocked in SDK tests; inject a stub client instead."
        )


@pytest.fixture(autouse=True)
def block_http_clients(monkeypatch):
    """Force SDK tests to inject their HTTP clients."""

    monkeypatch.setattr(
        "workflows_sdk.workflow_client.transport.httpx.AsyncClient",
        _BlockedHttpClient,
    )


@pytest.fixture
async def http_client_factory():
    """Build AsyncClients whose requests are answered by a handler function."""

    clients: List[httpx.AsyncClient] = []

    def _factory(handler: Callable) -> httpx.AsyncClient:
        client = _RealAsyncClient(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _factory

    for client in clients:
        await client.aclose()


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def mock_transport() -> MockWorkflowTransport:
    return MockWorkflowTransport()


@pytest.fixture
def service(mock_transport: MockWorkflowTransport) -> WorkflowService:
    return WorkflowService(transport=mock_transport, base_url=BASE_URL)
