"""Domain entities and workflow rules."""

from agencyflow.domain.entities.work_item import (
    RaciAssignment,
    TransitionRule,
    TRANSITION_RULES,
)

__all__ = ["RaciAssignment", "TransitionRule", "TRANSITION_RULES"]
