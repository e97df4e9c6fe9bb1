"""Pydantic models used by the workflows SDK."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class _WorkflowRecord(BaseModel):
    """Fields shared by workflow create and update requests.

    The backend owns the workflow schema, so unknown keys are kept and sent
    through as given.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: Optional[str] = Field(None, description="Display name of the workflow.")
    notification_group_id: Optional[str] = Field(
        None,
        alias="notificationGroupId",
        description="Notification group the workflow belongs to.",
    )
    tags: Optional[List[str]] = Field(None, description="Free-form workflow tags.")
    description: Optional[str] = Field(None, description="Human readable summary.")
    steps: Optional[List[Dict[str, Any]]] = Field(
        None, description="Ordered step definitions executed by the workflow."
    )
    active: Optional[bool] = Field(None, description="Whether the workflow is enabled.")
    critical: Optional[bool] = Field(
        None, description="Critical workflows bypass subscriber preferences."
    )
    preference_settings: Optional[Dict[str, Any]] = Field(
        None,
        alias="preferenceSettings",
        description="Per-channel default preferences.",
    )
    data: Optional[Dict[str, Any]] = Field(
        None, description="Arbitrary metadata stored alongside the workflow."
    )


class CreateWorkflowRequest(_WorkflowRecord):
    """Definition of a workflow to create."""


class UpdateWorkflowRequest(_WorkflowRecord):
    """Partial or full replacement of an existing workflow definition."""


class WorkflowStatus(BaseModel):
    """Body used to enable or disable a workflow."""

    active: bool


class WorkflowCreatePayload(BaseModel):
    """Request envelope for workflow creation."""

    data: Union[Dict[str, Any], CreateWorkflowRequest] = Field(
        ..., union_mode="left_to_right", description="Mappings are sent as given."
    )


class WorkflowUpdatePayload(BaseModel):
    """Request envelope for workflow updates."""

    data: Union[Dict[str, Any], UpdateWorkflowRequest] = Field(
        ..., union_mode="left_to_right", description="Mappings are sent as given."
    )


class WorkflowStatusUpdatePayload(BaseModel):
    """Request envelope for workflow status changes."""

    data: WorkflowStatus


class JsonResponse(BaseModel):
    """Decoded JSON body returned by the backend, with its status metadata."""

    status_code: int = Field(..., description="HTTP status code of the response.")
    body: Any = Field(
        None, description="Decoded JSON body, or None when the response was empty."
    )
    headers: Dict[str, str] = Field(default_factory=dict)

    @property
    def data(self) -> Any:
        """Return the ``data`` member of the body when the backend wrapped it."""
        if isinstance(self.body, dict) and "data" in self.body:
            return self.body["data"]
        return self.body
