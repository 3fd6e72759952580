"""Domain enumerations for agencyflow.

Enums represent fixed sets of domain values (departments, task status, RACI roles).
"""

from enum import Enum


class _ValuesMixin:
    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings (e.g. for CHECK constraints)."""
        return [member.value for member in cls]  # type: ignore[attr-defined]


class TenantStatus(_ValuesMixin, str, Enum):
    """Tenant (agency) lifecycle status."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    ARCHIVED = "archived"


class UserRole(_ValuesMixin, str, Enum):
    """Application role of a user profile."""

    ADMIN = "admin"
    USER = "user"


class Department(_ValuesMixin, str, Enum):
    """Agency department owning a work item. Selects the work item collection."""

    MARKETING = "marketing"
    BRANDING = "branding"
    COMMUNITY = "community"


class InfoType(_ValuesMixin, str, Enum):
    """Work item subtype sharing the same collection."""

    TASK = "task"
    CAMPAIGN = "campaign"
    CALENDAR_EVENT = "calendar_event"
    CONTENT_WEEK = "content_week"
    BRAND_ELEMENT = "brand_element"


class ClientStatus(_ValuesMixin, str, Enum):
    """Delivery state of a client project, shown on the client board."""

    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    DELAYED = "delayed"


class Priority(_ValuesMixin, str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class TaskStatus(_ValuesMixin, str, Enum):
    """Workflow state of a work item.

    pending/correction_needed -> in_review -> completed | correction_needed.
    completed is terminal. in_progress is a legal stored value that no
    transition produces or accepts.
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    IN_REVIEW = "in_review"
    COMPLETED = "completed"
    CORRECTION_NEEDED = "correction_needed"


class RaciRole(_ValuesMixin, str, Enum):
    """Relationship of a user to a work item. A user may hold several."""

    RESPONSIBLE = "responsible"
    ACCOUNTABLE = "accountable"
    CONSULTED = "consulted"
    INFORMED = "informed"


class TransitionOperation(_ValuesMixin, str, Enum):
    """The four state-changing workflow operations."""

    COMPLETE = "complete"
    APPROVE = "approve"
    REQUEST_CORRECTION = "request_correction"
    SUBMIT_CONSULTED_INPUT = "submit_consulted_input"


class PrimaryAction(_ValuesMixin, str, Enum):
    """The single action a client should surface first for a user and work item."""

    COMPLETE = "complete"
    REVIEW = "review"
    CONSULT = "consult"
    VIEW = "view"


class NotificationType(_ValuesMixin, str, Enum):
    TASK_COMPLETED = "task_completed"
    TASK_APPROVED = "task_approved"
    CORRECTION_REQUESTED = "correction_requested"
    CONSULTED_ACTION = "consulted_action"
    TASK_UPDATED = "task_updated"
