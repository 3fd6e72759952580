"""RACI task-status workflow: complete, approve, request correction, consulted input.

Every operation checks, in order: the department is known, the work item exists, the actor holds the
required role, required content is non-blank, the current status allows the
operation. Only then is a single compare-and-swap update issued (guarded on the
status read), followed by best-effort notification fan-out. A failed check
writes nothing and notifies no one.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from agencyflow.application.dtos.user import UserResult
from agencyflow.application.dtos.work_item import TransitionResult
from agencyflow.application.interfaces.repositories import IWorkItemRepository
from agencyflow.application.services.notification_fanout import (
    NotificationFanoutService,
)
from agencyflow.application.services.raci import determine_roles
from agencyflow.domain.entities.work_item import TRANSITION_RULES, TransitionRule
from agencyflow.domain.enums import Department, TransitionOperation
from agencyflow.domain.exceptions import (
    AuthorizationException,
    InvalidTransitionException,
    ResourceNotFoundException,
    TransitionConflictException,
    ValidationException,
)
from agencyflow.shared.telemetry.logging import get_logger
from agencyflow.shared.utils.datetime import utc_now

logger = get_logger(__name__)

# Name of the request field carrying the operation's free text (for validation errors).
_CONTENT_FIELD: dict[TransitionOperation, str] = {
    TransitionOperation.COMPLETE: "content",
    TransitionOperation.REQUEST_CORRECTION: "feedback",
    TransitionOperation.SUBMIT_CONSULTED_INPUT: "content",
}


def _transition_values(
    rule: TransitionRule,
    actor_id: str,
    text: str | None,
    now: datetime,
) -> dict[str, Any]:
    """Columns written by one operation (status, role content, actor, timestamps) in a single update.

    The new status is the rule's target_status; a rule without one leaves status alone.
    """
    operation = rule.operation
    if operation == TransitionOperation.COMPLETE:
        values: dict[str, Any] = {
            "completion_content": text,
            "completed_by": actor_id,
            "completed_at": now,
        }
    elif operation == TransitionOperation.APPROVE:
        values = {"reviewed_by": actor_id, "reviewed_at": now}
    elif operation == TransitionOperation.REQUEST_CORRECTION:
        values = {
            "correction_feedback": text,
            "correction_requested_at": now,
            "reviewed_by": actor_id,
            "reviewed_at": now,
        }
    else:
        values = {
            "consulted_content": text,
            "consulted_by": actor_id,
            "consulted_at": now,
        }
    if rule.target_status is not None:
        values["status"] = rule.target_status.value
    return values


class TaskWorkflowService:
    """Guarded status transitions for department work items (tenant-scoped via the actor)."""

    def __init__(
        self,
        work_item_repo: IWorkItemRepository,
        fanout: NotificationFanoutService,
    ) -> None:
        self.work_item_repo = work_item_repo
        self.fanout = fanout

    async def complete_task(
        self, actor: UserResult, department: str, item_id: str, content: str
    ) -> TransitionResult:
        """Responsible party submits the work: pending/correction_needed -> in_review."""
        return await self._transition(
            actor, department, item_id, TransitionOperation.COMPLETE, content
        )

    async def approve_task(
        self, actor: UserResult, department: str, item_id: str
    ) -> TransitionResult:
        """Accountable party approves: in_review -> completed (terminal)."""
        return await self._transition(
            actor, department, item_id, TransitionOperation.APPROVE
        )

    async def request_correction(
        self, actor: UserResult, department: str, item_id: str, feedback: str
    ) -> TransitionResult:
        """Accountable party rejects: in_review -> correction_needed (back to the responsible party)."""
        return await self._transition(
            actor,
            department,
            item_id,
            TransitionOperation.REQUEST_CORRECTION,
            feedback,
        )

    async def submit_consulted_input(
        self, actor: UserResult, department: str, item_id: str, content: str
    ) -> TransitionResult:
        """Consulted party records advisory input at any status; status is unchanged."""
        return await self._transition(
            actor,
            department,
            item_id,
            TransitionOperation.SUBMIT_CONSULTED_INPUT,
            content,
        )

    async def _transition(
        self,
        actor: UserResult,
        department: str,
        item_id: str,
        operation: TransitionOperation,
        content: str | None = None,
    ) -> TransitionResult:
        rule = TRANSITION_RULES[operation]
        try:
            department = Department(department).value
        except ValueError as e:
            raise ValidationException(str(e), field="department") from e

        item = await self.work_item_repo.get_by_id(actor.tenant_id, department, item_id)
        if item is None:
            raise ResourceNotFoundException("work_item", item_id)

        if rule.required_role not in determine_roles(actor.id, item):
            logger.info(
                "Rejected %s on work_item=%s: user=%s is not %s",
                operation.value,
                item_id,
                actor.id,
                rule.required_role.value,
            )
            raise AuthorizationException(
                resource="work_item",
                action=operation.value,
                details_extra={"required_role": rule.required_role.value},
            )

        text: str | None = None
        if rule.requires_content:
            text = (content or "").strip()
            if not text:
                field = _CONTENT_FIELD[operation]
                raise ValidationException(f"{field} must not be empty", field=field)

        if not rule.allows_status(item.status):
            logger.info(
                "Rejected %s on work_item=%s: status=%s",
                operation.value,
                item_id,
                item.status,
            )
            raise InvalidTransitionException(
                operation.value, item.status, rule.source_status_values()
            )

        expected = (
            rule.source_status_values() if rule.source_statuses is not None else None
        )
        updated = await self.work_item_repo.update_if_status(
            actor.tenant_id,
            department,
            item_id,
            expected,
            _transition_values(rule, actor.id, text, utc_now()),
        )
        if updated is None:
            if expected is None:
                raise ResourceNotFoundException("work_item", item_id)
            logger.info(
                "Conflict on %s for work_item=%s: status changed from %s concurrently",
                operation.value,
                item_id,
                item.status,
            )
            raise TransitionConflictException(item_id, operation.value)

        logger.info(
            "Work item %s: tenant=%s department=%s work_item=%s user=%s status %s -> %s",
            operation.value,
            actor.tenant_id,
            department,
            item_id,
            actor.id,
            item.status,
            updated.status,
        )
        notifications = await self.fanout.dispatch(operation, updated)
        return TransitionResult(
            operation=operation, item=updated, notifications=notifications
        )
