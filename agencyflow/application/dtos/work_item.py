"""DTOs for department work items and workflow transitions (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from agencyflow.application.dtos.notification import NotificationResult
from agencyflow.domain.entities.work_item import RaciAssignment
from agencyflow.domain.enums import (
    InfoType,
    Priority,
    PrimaryAction,
    RaciRole,
    TransitionOperation,
)


@dataclass(frozen=True)
class WorkItemResult:
    """Work item read-model: RACI assignment, status, role content and audit fields."""

    id: str
    tenant_id: str
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
    completed_at: datetime | None = None
    reviewed_at: datetime | None = None
    correction_requested_at: datetime | None = None
    consulted_at: datetime | None = None

    @property
    def raci(self) -> RaciAssignment:
        return RaciAssignment(
            responsible_user_id=self.responsible_user_id,
            accountable_user_id=self.accountable_user_id,
            consulted_user_ids=tuple(self.consulted_user_ids),
            informed_user_ids=tuple(self.informed_user_ids),
        )


@dataclass
class WorkItemCreate:
    """Input for creating a work item in a department."""

    title: str
    responsible_user_id: str
    info_type: str = InfoType.TASK.value
    accountable_user_id: str | None = None
    consulted_user_ids: list[str] = field(default_factory=list)
    informed_user_ids: list[str] = field(default_factory=list)
    description: str | None = None
    priority: str = Priority.MEDIUM.value
    due_date: datetime | None = None
    client_id: str | None = None
    metadata: dict[str, Any] | None = None


@dataclass
class WorkItemAssignmentUpdate:
    """Partial update of descriptive and RACI fields. None means unchanged.

    clear_accountable removes the accountable user (None cannot express that).
    """

    title: str | None = None
    description: str | None = None
    priority: str | None = None
    due_date: datetime | None = None
    responsible_user_id: str | None = None
    accountable_user_id: str | None = None
    clear_accountable: bool = False
    consulted_user_ids: list[str] | None = None
    informed_user_ids: list[str] | None = None


@dataclass(frozen=True)
class WorkItemView:
    """Work item as seen by one user: their role set and the actions open to them."""

    item: WorkItemResult
    roles: frozenset[RaciRole]
    primary_action: PrimaryAction
    allowed_operations: frozenset[TransitionOperation]


@dataclass(frozen=True)
class TransitionResult:
    """Outcome of a workflow operation: the updated item and notifications actually persisted."""

    operation: TransitionOperation
    item: WorkItemResult
    notifications: list[NotificationResult] = field(default_factory=list)
