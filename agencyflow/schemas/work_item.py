"""Work item and workflow transition API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from agencyflow.application.dtos.work_item import (
    TransitionResult,
    WorkItemAssignmentUpdate,
    WorkItemCreate,
    WorkItemView,
)
from agencyflow.schemas.notification import NotificationResponse


class WorkItemCreateRequest(BaseModel):
    """Request body for creating a work item in a department."""

    title: str = Field(..., min_length=1, max_length=500)
    responsible_user_id: str = Field(..., min_length=1)
    info_type: str = Field(default="task", description="task, campaign, calendar_event, ...")
    accountable_user_id: str | None = None
    consulted_user_ids: list[str] = Field(default_factory=list)
    informed_user_ids: list[str] = Field(default_factory=list)
    description: str | None = None
    priority: str = "medium"
    due_date: datetime | None = None
    client_id: str | None = None
    metadata: dict[str, Any] | None = None

    def to_dto(self) -> WorkItemCreate:
        return WorkItemCreate(**self.model_dump())


class WorkItemUpdateRequest(BaseModel):
    """Partial update of a work item's description and RACI assignment.

    Send accountable_user_id: null to remove the accountable user; omit it to
    leave it unchanged.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    description: str | None = None
    priority: str | None = None
    due_date: datetime | None = None
    responsible_user_id: str | None = Field(default=None, min_length=1)
    accountable_user_id: str | None = None
    consulted_user_ids: list[str] | None = None
    informed_user_ids: list[str] | None = None

    def to_dto(self) -> WorkItemAssignmentUpdate:
        data = self.model_dump(exclude_unset=True)
        clear_accountable = (
            "accountable_user_id" in data and data["accountable_user_id"] is None
        )
        return WorkItemAssignmentUpdate(**data, clear_accountable=clear_accountable)


class ContentRequest(BaseModel):
    """Body for complete and consult: the role's written contribution."""

    content: str = Field(..., max_length=20000)


class FeedbackRequest(BaseModel):
    """Body for request-correction: what the responsible user must fix."""

    feedback: str = Field(..., max_length=20000)


class WorkItemResponse(BaseModel):
    """Work item with the caller's RACI roles and available actions."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    department: str
    info_type: str
    title: str
    description: str | None
    priority: str
    due_date: datetime | None
    client_id: str | None
    metadata: dict[str, Any] | None
    responsible_user_id: str
    accountable_user_id: str | None
    consulted_user_ids: list[str]
    informed_user_ids: list[str]
    status: str
    completion_content: str | None
    correction_feedback: str | None
    consulted_content: str | None
    created_by: str | None
    completed_by: str | None
    reviewed_by: str | None
    consulted_by: str | None
    created_at: datetime
    updated_at: datetime
    completed_at: datetime | None
    reviewed_at: datetime | None
    correction_requested_at: datetime | None
    consulted_at: datetime | None
    roles: list[str] = Field(default_factory=list, description="Caller's RACI roles")
    primary_action: str = Field(..., description="complete, review, consult or view")
    allowed_operations: list[str] = Field(default_factory=list)

    @classmethod
    def from_view(cls, view: WorkItemView) -> WorkItemResponse:
        item = view.item
        return cls(
            id=item.id,
            department=item.department,
            info_type=item.info_type,
            title=item.title,
            description=item.description,
            priority=item.priority,
            due_date=item.due_date,
            client_id=item.client_id,
            metadata=item.metadata,
            responsible_user_id=item.responsible_user_id,
            accountable_user_id=item.accountable_user_id,
            consulted_user_ids=item.consulted_user_ids,
            informed_user_ids=item.informed_user_ids,
            status=item.status,
            completion_content=item.completion_content,
            correction_feedback=item.correction_feedback,
            consulted_content=item.consulted_content,
            created_by=item.created_by,
            completed_by=item.completed_by,
            reviewed_by=item.reviewed_by,
            consulted_by=item.consulted_by,
            created_at=item.created_at,
            updated_at=item.updated_at,
            completed_at=item.completed_at,
            reviewed_at=item.reviewed_at,
            correction_requested_at=item.correction_requested_at,
            consulted_at=item.consulted_at,
            roles=sorted(r.value for r in view.roles),
            primary_action=view.primary_action.value,
            allowed_operations=sorted(op.value for op in view.allowed_operations),
        )


class TransitionResponse(BaseModel):
    """Result of a workflow operation: the updated item and notifications created."""

    operation: str
    item: WorkItemResponse
    notifications_sent: int
    notifications: list[NotificationResponse] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: TransitionResult, view: WorkItemView) -> TransitionResponse:
        return cls(
            operation=result.operation.value,
            item=WorkItemResponse.from_view(view),
            notifications_sent=len(result.notifications),
            notifications=[
                NotificationResponse.model_validate(n) for n in result.notifications
            ],
        )
