"""RACI role resolution for a user and a work item.

All functions are pure. A user may hold several roles at once (e.g. accountable
and consulted); callers receive the full set and never assume exclusivity.
"""

from __future__ import annotations

from collections.abc import Set as AbstractSet

from agencyflow.application.dtos.work_item import WorkItemResult, WorkItemView
from agencyflow.domain.entities.work_item import TRANSITION_RULES
from agencyflow.domain.enums import (
    PrimaryAction,
    RaciRole,
    TaskStatus,
    TransitionOperation,
)


def determine_roles(user_id: str, item: WorkItemResult) -> frozenset[RaciRole]:
    """Return every RACI role user_id holds on item (empty when unrelated)."""
    return item.raci.roles_of(user_id)


def primary_action(roles: AbstractSet[RaciRole], status: str) -> PrimaryAction:
    """Pick the action to surface first.

    Priority: responsible with pending/correction_needed (complete) >
    accountable with in_review (review) > consulted (consult) > view.
    """
    if RaciRole.RESPONSIBLE in roles and status in (
        TaskStatus.PENDING.value,
        TaskStatus.CORRECTION_NEEDED.value,
    ):
        return PrimaryAction.COMPLETE
    if RaciRole.ACCOUNTABLE in roles and status == TaskStatus.IN_REVIEW.value:
        return PrimaryAction.REVIEW
    if RaciRole.CONSULTED in roles:
        return PrimaryAction.CONSULT
    return PrimaryAction.VIEW


def allowed_operations(
    roles: AbstractSet[RaciRole], status: str
) -> frozenset[TransitionOperation]:
    """Return every transition the role set permits from status."""
    return frozenset(
        op
        for op, rule in TRANSITION_RULES.items()
        if rule.required_role in roles and rule.allows_status(status)
    )


def build_view(user_id: str, item: WorkItemResult) -> WorkItemView:
    """Work item plus the user's roles, primary action and allowed operations."""
    roles = determine_roles(user_id, item)
    return WorkItemView(
        item=item,
        roles=roles,
        primary_action=primary_action(roles, item.status),
        allowed_operations=allowed_operations(roles, item.status),
    )
