"""Work item repository. Status transitions use a conditional UPDATE ... RETURNING."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from sqlalchemy import or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from agencyflow.application.dtos.work_item import WorkItemCreate, WorkItemResult
from agencyflow.domain.enums import RaciRole, TaskStatus
from agencyflow.infrastructure.persistence.models.work_item import WorkItem
from agencyflow.infrastructure.persistence.repositories.base import BaseRepository
from agencyflow.shared.utils.datetime import utc_now

# DTO field name -> ORM attribute name where they differ
_ATTRIBUTE_NAMES = {"metadata": "item_metadata"}


def _to_result(w: WorkItem) -> WorkItemResult:
    """Map WorkItem ORM to WorkItemResult DTO."""
    return WorkItemResult(
        id=w.id,
        tenant_id=w.tenant_id,
        department=w.department,
        info_type=w.info_type,
        title=w.title,
        description=w.description,
        priority=w.priority,
        due_date=w.due_date,
        client_id=w.client_id,
        metadata=w.item_metadata,
        responsible_user_id=w.responsible_user_id,
        accountable_user_id=w.accountable_user_id,
        consulted_user_ids=list(w.consulted_user_ids or []),
        informed_user_ids=list(w.informed_user_ids or []),
        status=w.status,
        completion_content=w.completion_content,
        correction_feedback=w.correction_feedback,
        consulted_content=w.consulted_content,
        created_by=w.created_by,
        completed_by=w.completed_by,
        reviewed_by=w.reviewed_by,
        consulted_by=w.consulted_by,
        created_at=w.created_at,
        updated_at=w.updated_at,
        completed_at=w.completed_at,
        reviewed_at=w.reviewed_at,
        correction_requested_at=w.correction_requested_at,
        consulted_at=w.consulted_at,
    )


def _orm_values(values: dict[str, Any]) -> dict[Any, Any]:
    """Key update values by mapped attribute; stamps updated_at unless given."""
    names = {_ATTRIBUTE_NAMES.get(k, k): v for k, v in values.items()}
    names.setdefault("updated_at", utc_now())
    return {getattr(WorkItem, k): v for k, v in names.items()}


class WorkItemRepository(BaseRepository[WorkItem]):
    """Work item repository. Implements IWorkItemRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, WorkItem)

    def _scope(self, tenant_id: str, department: str, item_id: str) -> list[Any]:
        return [
            WorkItem.id == item_id,
            WorkItem.tenant_id == tenant_id,
            WorkItem.department == department,
        ]

    async def get_by_id(
        self, tenant_id: str, department: str, item_id: str
    ) -> WorkItemResult | None:
        result = await self.db.execute(
            select(WorkItem).where(*self._scope(tenant_id, department, item_id))
        )
        item = result.scalar_one_or_none()
        return _to_result(item) if item else None

    async def list_items(
        self,
        tenant_id: str,
        department: str,
        *,
        status: str | None = None,
        info_type: str | None = None,
        client_id: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[WorkItemResult]:
        q = select(WorkItem).where(
            WorkItem.tenant_id == tenant_id, WorkItem.department == department
        )
        if status is not None:
            q = q.where(WorkItem.status == status)
        if info_type is not None:
            q = q.where(WorkItem.info_type == info_type)
        if client_id is not None:
            q = q.where(WorkItem.client_id == client_id)
        q = q.order_by(WorkItem.created_at.desc(), WorkItem.id).offset(skip).limit(limit)
        result = await self.db.execute(q)
        return [_to_result(w) for w in result.scalars().all()]

    async def list_for_user(
        self,
        tenant_id: str,
        user_id: str,
        *,
        role: str | None = None,
        status: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[WorkItemResult]:
        by_role = {
            RaciRole.RESPONSIBLE.value: WorkItem.responsible_user_id == user_id,
            RaciRole.ACCOUNTABLE.value: WorkItem.accountable_user_id == user_id,
            RaciRole.CONSULTED.value: WorkItem.consulted_user_ids.any(user_id),
            RaciRole.INFORMED.value: WorkItem.informed_user_ids.any(user_id),
        }
        membership = by_role[role] if role is not None else or_(*by_role.values())
        q = select(WorkItem).where(WorkItem.tenant_id == tenant_id, membership)
        if status is not None:
            q = q.where(WorkItem.status == status)
        q = q.order_by(WorkItem.updated_at.desc(), WorkItem.id).offset(skip).limit(limit)
        result = await self.db.execute(q)
        return [_to_result(w) for w in result.scalars().all()]

    async def create(
        self,
        tenant_id: str,
        department: str,
        data: WorkItemCreate,
        created_by: str,
    ) -> WorkItemResult:
        item = WorkItem(
            tenant_id=tenant_id,
            department=department,
            info_type=data.info_type,
            title=data.title,
            description=data.description,
            priority=data.priority,
            due_date=data.due_date,
            client_id=data.client_id,
            item_metadata=data.metadata,
            responsible_user_id=data.responsible_user_id,
            accountable_user_id=data.accountable_user_id,
            consulted_user_ids=list(data.consulted_user_ids),
            informed_user_ids=list(data.informed_user_ids),
            status=TaskStatus.PENDING.value,
            created_by=created_by,
        )
        item = await self.add(item)
        return _to_result(item)

    async def update_fields(
        self,
        tenant_id: str,
        department: str,
        item_id: str,
        values: dict[str, Any],
    ) -> WorkItemResult | None:
        return await self.update_if_status(tenant_id, department, item_id, None, values)

    async def update_if_status(
        self,
        tenant_id: str,
        department: str,
        item_id: str,
        expected_statuses: Iterable[str] | None,
        values: dict[str, Any],
    ) -> WorkItemResult | None:
        """Single-statement compare-and-swap on status.

        A concurrent writer that moved the status first makes this match zero
        rows, so the stale caller gets None instead of overwriting.
        """
        conditions = self._scope(tenant_id, department, item_id)
        if expected_statuses is not None:
            conditions.append(WorkItem.status.in_(list(expected_statuses)))
        stmt = (
            update(WorkItem)
            .where(*conditions)
            .values(_orm_values(values))
            .returning(WorkItem)
            .execution_options(populate_existing=True)
        )
        result = await self.db.execute(stmt)
        item = result.scalar_one_or_none()
        return _to_result(item) if item else None
