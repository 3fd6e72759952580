"""Work item RACI assignment and the task-status transition rules.

A work item moves pending/correction_needed -> in_review -> completed or
correction_needed. completed is terminal. Consulted input is orthogonal and
never changes status.
"""

from dataclasses import dataclass

from agencyflow.domain.enums import RaciRole, TaskStatus, TransitionOperation


@dataclass(frozen=True)
class RaciAssignment:
    """Who does (responsible), approves (accountable), advises (consulted) and observes (informed)."""

    responsible_user_id: str
    accountable_user_id: str | None = None
    consulted_user_ids: tuple[str, ...] = ()
    informed_user_ids: tuple[str, ...] = ()

    def roles_of(self, user_id: str) -> frozenset[RaciRole]:
        """Return every role the user holds on this assignment (may be several or none)."""
        roles: set[RaciRole] = set()
        if not user_id:
            return frozenset()
        if user_id == self.responsible_user_id:
            roles.add(RaciRole.RESPONSIBLE)
        if self.accountable_user_id is not None and user_id == self.accountable_user_id:
            roles.add(RaciRole.ACCOUNTABLE)
        if user_id in self.consulted_user_ids:
            roles.add(RaciRole.CONSULTED)
        if user_id in self.informed_user_ids:
            roles.add(RaciRole.INFORMED)
        return frozenset(roles)

    def user_ids(self) -> set[str]:
        """Return all distinct user ids referenced by the assignment."""
        ids = {self.responsible_user_id, *self.consulted_user_ids, *self.informed_user_ids}
        if self.accountable_user_id:
            ids.add(self.accountable_user_id)
        return ids


@dataclass(frozen=True)
class TransitionRule:
    """Role gate, legal source statuses and target status for one operation.

    source_statuses None means the operation is legal from any status;
    target_status None means the operation does not change status.
    """

    operation: TransitionOperation
    required_role: RaciRole
    source_statuses: frozenset[TaskStatus] | None
    target_status: TaskStatus | None
    requires_content: bool

    def allows_status(self, status: str) -> bool:
        """Return whether the operation may run from the given status."""
        if self.source_statuses is None:
            return True
        return status in {s.value for s in self.source_statuses}

    def source_status_values(self) -> list[str]:
        """Legal source statuses as sorted strings; all statuses when unrestricted."""
        if self.source_statuses is None:
            return sorted(TaskStatus.values())
        return sorted(s.value for s in self.source_statuses)


TRANSITION_RULES: dict[TransitionOperation, TransitionRule] = {
    TransitionOperation.COMPLETE: TransitionRule(
        operation=TransitionOperation.COMPLETE,
        required_role=RaciRole.RESPONSIBLE,
        source_statuses=frozenset({TaskStatus.PENDING, TaskStatus.CORRECTION_NEEDED}),
        target_status=TaskStatus.IN_REVIEW,
        requires_content=True,
    ),
    TransitionOperation.APPROVE: TransitionRule(
        operation=TransitionOperation.APPROVE,
        required_role=RaciRole.ACCOUNTABLE,
        source_statuses=frozenset({TaskStatus.IN_REVIEW}),
        target_status=TaskStatus.COMPLETED,
        requires_content=False,
    ),
    TransitionOperation.REQUEST_CORRECTION: TransitionRule(
        operation=TransitionOperation.REQUEST_CORRECTION,
        required_role=RaciRole.ACCOUNTABLE,
        source_statuses=frozenset({TaskStatus.IN_REVIEW}),
        target_status=TaskStatus.CORRECTION_NEEDED,
        requires_content=True,
    ),
    TransitionOperation.SUBMIT_CONSULTED_INPUT: TransitionRule(
        operation=TransitionOperation.SUBMIT_CONSULTED_INPUT,
        required_role=RaciRole.CONSULTED,
        source_statuses=None,
        target_status=None,
        requires_content=True,
    ),
}
