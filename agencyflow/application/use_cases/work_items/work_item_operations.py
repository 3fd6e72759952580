"""Work item operations: create, get (with the caller's RACI view), list, reassign."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from agencyflow.application.dtos.user import UserResult
from agencyflow.application.dtos.work_item import (
    WorkItemAssignmentUpdate,
    WorkItemCreate,
    WorkItemResult,
    WorkItemView,
)
from agencyflow.application.interfaces.repositories import (
    IClientRepository,
    IUserRepository,
    IWorkItemRepository,
)
from agencyflow.application.services.raci import build_view
from agencyflow.domain.entities.work_item import RaciAssignment
from agencyflow.domain.enums import (
    Department,
    InfoType,
    Priority,
    RaciRole,
    TaskStatus,
)
from agencyflow.domain.exceptions import (
    AuthorizationException,
    InvalidTransitionException,
    ResourceNotFoundException,
    TransitionConflictException,
    ValidationException,
)
from agencyflow.shared.telemetry.logging import get_logger
from agencyflow.shared.utils.datetime import ensure_utc

logger = get_logger(__name__)

_EDITABLE_STATUSES = [s for s in TaskStatus.values() if s != TaskStatus.COMPLETED.value]


def _enum_value(enum_cls: type, value: str, field: str) -> str:
    """Return the canonical enum value or raise ValidationException naming the field."""
    try:
        return enum_cls(value).value
    except ValueError as e:
        raise ValidationException(
            f"Invalid {field} '{value}'; expected one of {enum_cls.values()}",
            field=field,
        ) from e


def _unique_ids(ids: Iterable[str]) -> list[str]:
    """Drop blanks and duplicates, keeping first-seen order."""
    seen: dict[str, None] = {}
    for user_id in ids:
        user_id = (user_id or "").strip()
        if user_id:
            seen.setdefault(user_id, None)
    return list(seen)


class WorkItemService:
    """Create and query department work items (tenant-scoped via the actor)."""

    def __init__(
        self,
        work_item_repo: IWorkItemRepository,
        user_repo: IUserRepository,
        client_repo: IClientRepository,
    ) -> None:
        self.work_item_repo = work_item_repo
        self.user_repo = user_repo
        self.client_repo = client_repo

    async def _validate_assignment(self, tenant_id: str, raci: RaciAssignment) -> None:
        """Responsible required, never informed; every referenced user must exist in the tenant."""
        if not raci.responsible_user_id:
            raise ValidationException(
                "responsible_user_id is required", field="responsible_user_id"
            )
        if raci.responsible_user_id in raci.informed_user_ids:
            raise ValidationException(
                "The responsible user cannot also be informed",
                field="informed_user_ids",
            )
        referenced = raci.user_ids()
        existing = await self.user_repo.get_existing_ids(tenant_id, referenced)
        missing = sorted(referenced - existing)
        if missing:
            raise ValidationException(
                f"Unknown user(s) in assignment: {', '.join(missing)}",
                field="assignment",
            )

    async def create_work_item(
        self, actor: UserResult, department: str, data: WorkItemCreate
    ) -> WorkItemResult:
        """Create a pending work item; created_by is the actor.

        client_id, when given, must name a client of the actor's tenant.
        """
        department = _enum_value(Department, department, "department")
        title = (data.title or "").strip()
        if not title:
            raise ValidationException("title must not be empty", field="title")
        data.title = title
        data.info_type = _enum_value(InfoType, data.info_type, "info_type")
        data.priority = _enum_value(Priority, data.priority, "priority")
        data.responsible_user_id = (data.responsible_user_id or "").strip()
        data.accountable_user_id = (data.accountable_user_id or "").strip() or None
        data.consulted_user_ids = _unique_ids(data.consulted_user_ids)
        data.informed_user_ids = _unique_ids(data.informed_user_ids)
        data.due_date = ensure_utc(data.due_date)
        data.client_id = (data.client_id or "").strip() or None
        if data.client_id is not None:
            client = await self.client_repo.get_by_id(actor.tenant_id, data.client_id)
            if client is None:
                raise ValidationException(
                    f"Unknown client '{data.client_id}'", field="client_id"
                )
        await self._validate_assignment(
            actor.tenant_id,
            RaciAssignment(
                responsible_user_id=data.responsible_user_id,
                accountable_user_id=data.accountable_user_id,
                consulted_user_ids=tuple(data.consulted_user_ids),
                informed_user_ids=tuple(data.informed_user_ids),
            ),
        )
        item = await self.work_item_repo.create(
            actor.tenant_id, department, data, created_by=actor.id
        )
        logger.info(
            "Work item created: tenant=%s department=%s work_item=%s by user=%s",
            actor.tenant_id,
            department,
            item.id,
            actor.id,
        )
        return item

    async def get_work_item(
        self, actor: UserResult, department: str, item_id: str
    ) -> WorkItemView:
        """Return the work item with the actor's role set and available actions."""
        department = _enum_value(Department, department, "department")
        item = await self.work_item_repo.get_by_id(actor.tenant_id, department, item_id)
        if item is None:
            raise ResourceNotFoundException("work_item", item_id)
        return build_view(actor.id, item)

    async def list_work_items(
        self,
        actor: UserResult,
        department: str,
        status: str | None = None,
        info_type: str | None = None,
        client_id: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[WorkItemView]:
        """Return the department's work items (newest first) as seen by the actor."""
        department = _enum_value(Department, department, "department")
        if status is not None:
            status = _enum_value(TaskStatus, status, "status")
        if info_type is not None:
            info_type = _enum_value(InfoType, info_type, "info_type")
        items = await self.work_item_repo.list_items(
            actor.tenant_id,
            department,
            status=status,
            info_type=info_type,
            client_id=client_id,
            skip=skip,
            limit=limit,
        )
        return [build_view(actor.id, item) for item in items]

    async def list_my_work_items(
        self,
        actor: UserResult,
        role: str | None = None,
        status: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[WorkItemView]:
        """Return work items across departments where the actor holds any (or the given) RACI role."""
        if role is not None:
            role = _enum_value(RaciRole, role, "role")
        if status is not None:
            status = _enum_value(TaskStatus, status, "status")
        items = await self.work_item_repo.list_for_user(
            actor.tenant_id, actor.id, role=role, status=status, skip=skip, limit=limit
        )
        return [build_view(actor.id, item) for item in items]

    async def update_assignment(
        self,
        actor: UserResult,
        department: str,
        item_id: str,
        changes: WorkItemAssignmentUpdate,
    ) -> WorkItemView:
        """Edit descriptive and RACI fields. Admins or the creator only; not once completed."""
        department = _enum_value(Department, department, "department")
        item = await self.work_item_repo.get_by_id(actor.tenant_id, department, item_id)
        if item is None:
            raise ResourceNotFoundException("work_item", item_id)
        if not actor.is_admin and actor.id != item.created_by:
            raise AuthorizationException(resource="work_item", action="update")
        if item.status == TaskStatus.COMPLETED.value:
            raise InvalidTransitionException(
                "update_assignment", item.status, _EDITABLE_STATUSES
            )

        values: dict[str, Any] = {}
        if changes.title is not None:
            title = changes.title.strip()
            if not title:
                raise ValidationException("title must not be empty", field="title")
            values["title"] = title
        if changes.description is not None:
            values["description"] = changes.description
        if changes.priority is not None:
            values["priority"] = _enum_value(Priority, changes.priority, "priority")
        if changes.due_date is not None:
            values["due_date"] = ensure_utc(changes.due_date)
        if changes.responsible_user_id is not None:
            values["responsible_user_id"] = changes.responsible_user_id.strip()
        if changes.clear_accountable:
            values["accountable_user_id"] = None
        elif changes.accountable_user_id is not None:
            values["accountable_user_id"] = changes.accountable_user_id.strip() or None
        if changes.consulted_user_ids is not None:
            values["consulted_user_ids"] = _unique_ids(changes.consulted_user_ids)
        if changes.informed_user_ids is not None:
            values["informed_user_ids"] = _unique_ids(changes.informed_user_ids)
        if not values:
            return build_view(actor.id, item)

        await self._validate_assignment(
            actor.tenant_id,
            RaciAssignment(
                responsible_user_id=values.get(
                    "responsible_user_id", item.responsible_user_id
                ),
                accountable_user_id=values.get(
                    "accountable_user_id", item.accountable_user_id
                ),
                consulted_user_ids=tuple(
                    values.get("consulted_user_ids", item.consulted_user_ids)
                ),
                informed_user_ids=tuple(
                    values.get("informed_user_ids", item.informed_user_ids)
                ),
            ),
        )
        updated = await self.work_item_repo.update_if_status(
            actor.tenant_id, department, item_id, _EDITABLE_STATUSES, values
        )
        if updated is None:
            raise TransitionConflictException(item_id, "update_assignment")
        logger.info(
            "Work item updated: work_item=%s fields=%s by user=%s",
            item_id,
            sorted(values),
            actor.id,
        )
        return build_view(actor.id, updated)
