"""Workflow resource client exports."""

from .client import WorkflowService
from .errors import RequestTimeoutError, TransportError
from .mock import MockWorkflowTransport
from .protocol import TransportProtocol, WorkflowServiceProtocol
from .schemas import (
    CreateWorkflowRequest,
    JsonResponse,
    UpdateWorkflowRequest,
    WorkflowCreatePayload,
    WorkflowStatus,
    WorkflowStatusUpdatePayload,
    WorkflowUpdatePayload,
)
from .transport import HttpxTransport, encode_body

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
    "WorkflowCreatePayload",
    "WorkflowUpdatePayload",
    "WorkflowStatusUpdatePayload",
    "JsonResponse",
    "encode_body",
]
