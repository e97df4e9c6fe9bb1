"""Service wrapping the workflows REST resource."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Final, Mapping, Optional, Union
from urllib.parse import quote, urlencode

from pydantic import BaseModel

from .schemas import (
    CreateWorkflowRequest,
    JsonResponse,
    UpdateWorkflowRequest,
    WorkflowCreatePayload,
    WorkflowStatus,
    WorkflowStatusUpdatePayload,
    WorkflowUpdatePayload,
)

if TYPE_CHECKING:
    from .protocol import TransportProtocol, WorkflowServiceProtocol

logger = logging.getLogger(__name__)

WORKFLOWS_PATH: Final[str] = "workflows"


def _quote_segment(segment: str) -> str:
    """Percent-escape one path segment, dot segments included."""
    if segment in {".", ".."}:
        return "%2E" * len(segment)
    return quote(segment, safe="")


def _as_record(workflow: Any) -> Any:
    """Keep request models as they are and copy plain mappings untouched."""
    if isinstance(workflow, BaseModel):
        return workflow
    return dict(workflow)


class WorkflowService:
    """CRUD operations against ``<base_url>/workflows``.

    The service only shapes requests: responses and transport errors are
    passed back to the caller untouched, and nothing is retried. Cancel the
    awaiting task (or pass ``timeout``) to abort an in-flight request.
    """

    def __init__(self, transport: "TransportProtocol", base_url: str) -> None:
        self._transport: Final["TransportProtocol"] = transport
        self._base_url: Final[str] = str(base_url).rstrip("/")

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, *segments: str, query: Optional[Mapping[str, str]] = None) -> str:
        path = "/".join(_quote_segment(segment) for segment in segments)
        url = f"{self._base_url}/{path}"
        if query:
            url = f"{url}?{urlencode(query)}"
        return url

    async def _send(
        self, method: str, url: str, body: Any, timeout: Optional[float]
    ) -> JsonResponse:
        logger.debug("Sending %s %s", method, url)
        return await self._transport.request(method, url, body, timeout=timeout)

    async def aclose(self) -> None:
        """Close the transport when it holds resources of its own."""

        close = getattr(self._transport, "aclose", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "WorkflowService":
        return self

    async def __aexit__(self, exc_type, exc_value, traceback) -> None:
        await self.aclose()

    async def create_workflow(
        self,
        workflow: Union[CreateWorkflowRequest, Mapping[str, Any]],
        *,
        timeout: Optional[float] = None,
    ) -> JsonResponse:
        """Create a workflow from the given definition."""

        payload = WorkflowCreatePayload(data=_as_record(workflow))
        return await self._send("POST", self._url(WORKFLOWS_PATH), payload, timeout)

    async def update_workflow(
        self,
        identifier: str,
        workflow: Union[UpdateWorkflowRequest, Mapping[str, Any]],
        *,
        timeout: Optional[float] = None,
    ) -> JsonResponse:
        """Replace fields of the workflow named by ``identifier``."""

        payload = WorkflowUpdatePayload(data=_as_record(workflow))
        url = self._url(WORKFLOWS_PATH, identifier)
        return await self._send("PUT", url, payload, timeout)

    async def update_workflow_status(
        self, identifier: str, active: bool, *, timeout: Optional[float] = None
    ) -> JsonResponse:
        """Enable or disable the workflow named by ``identifier``."""

        payload = WorkflowStatusUpdatePayload(data=WorkflowStatus(active=active))
        url = self._url(WORKFLOWS_PATH, identifier)
        return await self._send("PUT", url, payload, timeout)

    async def get_workflows(
        self, page: int, limit: int, *, timeout: Optional[float] = None
    ) -> JsonResponse:
        """Fetch one page of workflows.

        ``page`` and ``limit`` are sent as given; range checks belong to the
        backend.
        """

        url = self._url(
            WORKFLOWS_PATH, query={"page": str(page), "limit": str(limit)}
        )
        return await self._send("GET", url, None, timeout)

    async def get_workflow(
        self, identifier: str, *, timeout: Optional[float] = None
    ) -> JsonResponse:
        """Fetch a single workflow."""

        url = self._url(WORKFLOWS_PATH, identifier)
        return await self._send("GET", url, None, timeout)

    async def delete_workflow(
        self, identifier: str, *, timeout: Optional[float] = None
    ) -> JsonResponse:
        url = self._url(WORKFLOWS_PATH, identifier)
        return await self._send("DELETE", url, None, timeout)


if TYPE_CHECKING:
    # Static interface check to guarantee protocol compatibility during type checking
    _: WorkflowServiceProtocol = WorkflowService(transport=..., base_url="")
