"""Factories that wire settings, transports and the workflow service together."""

from functools import lru_cache
from typing import Optional, Union

from .config import WorkflowClientSettings
from .workflow_client import (
    HttpxTransport,
    MockWorkflowTransport,
    TransportProtocol,
    WorkflowService,
)

# ============================================================================
# Configuration Providers
# ============================================================================


@lru_cache()
def get_client_settings() -> WorkflowClientSettings:
    """Get the client settings singleton."""
    return WorkflowClientSettings()


# ============================================================================
# Transport and Service Providers
# ============================================================================


def get_transport(
    settings: WorkflowClientSettings,
) -> Union[HttpxTransport, MockWorkflowTransport]:
    """Return the transport selected by the settings toggles."""
    if settings.use_mock_transport:
        return MockWorkflowTransport()
    return HttpxTransport(
        timeout=settings.timeout_seconds,
        api_key=settings.api_key,
    )


def get_workflow_service(
    settings: Optional[WorkflowClientSettings] = None,
    transport: Optional[TransportProtocol] = None,
) -> WorkflowService:
    """Build a workflow service, defaulting to the cached settings."""
    settings = settings or get_client_settings()
    return WorkflowService(
        transport=transport or get_transport(settings),
        base_url=str(settings.backend_url),
    )
