"""Python SDK for the workflows REST API."""

from .config import WorkflowClientSettings
from .dependencies import get_client_settings, get_transport, get_workflow_service
from .workflow_client import (
    CreateWorkflowRequest,
    HttpxTransport,
    JsonResponse,
    MockWorkflowTransport,
    RequestTimeoutError,
    TransportError,
    TransportProtocol,
    UpdateWorkflowRequest,
    WorkflowService,
    WorkflowServiceProtocol,
    WorkflowStatus,
)

__all__ = [
    "WorkflowService",
    "HttpxTransport",
    "MockWorkflowTransport",
    "TransportProtocol",
    "WorkflowServiceProtocol",
    "TransportError",
    "RequestTimeoutError",
    "CreateWorkflowRequest",
    "UpdateWorkflowRequest",
    "WorkflowStatus",
    "JsonResponse",
    "WorkflowClientSettings",
    "get_client_settings",
    "get_transport",
    "get_workflow_service",
]
