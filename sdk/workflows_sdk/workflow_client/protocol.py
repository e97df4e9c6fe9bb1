"""Protocol definitions for the workflows SDK."""

from typing import Any, Mapping, Optional, Protocol, Union

from .schemas import CreateWorkflowRequest, JsonResponse, UpdateWorkflowRequest


class TransportProtocol(Protocol):
    """Performs one HTTP exchange and decodes the JSON response."""

    async def request(
        self,
        method: str,
        url: str,
        body: Any = None,
        *,
        timeout: Optional[float] = None,
    ) -> JsonResponse:
        """Send ``body`` to ``url`` and return the decoded response.

        Raises:
            TransportError: On network failures, error statuses or bad JSON.
        """
        ...


class WorkflowServiceProtocol(Protocol):
    """Typed interface for workflow resource clients."""

    async def create_workflow(
        self,
        workflow: Union[CreateWorkflowRequest, Mapping[str, Any]],
        *,
        timeout: Optional[float] = None,
    ) -> JsonResponse: ...

    async def update_workflow(
        self,
        identifier: str,
        workflow: Union[UpdateWorkflowRequest, Mapping[str, Any]],
        *,
        timeout: Optional[float] = None,
    ) -> JsonResponse: ...

    async def update_workflow_status(
        self, identifier: str, active: bool, *, timeout: Optional[float] = None
    ) -> JsonResponse: ...

    async def get_workflows(
        self, page: int, limit: int, *, timeout: Optional[float] = None
    ) -> JsonResponse: ...

    async def get_workflow(
        self, identifier: str, *, timeout: Optional[float] = None
    ) -> JsonResponse: ...

    async def delete_workflow(
        self, identifier: str, *, timeout: Optional[float] = None
    ) -> JsonResponse: ...
