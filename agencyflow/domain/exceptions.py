"""Errors raised by the RACI workflow and its surrounding operations.

Each carries a stable error_code that API clients switch on and a details
dict with the context needed to act on it (field, required_role,
current_status, ...). The HTTP status for each code lives in
agencyflow.core.exception_handlers.
"""

from typing import Any


class AgencyFlowException(Exception):
    """Root of every agencyflow error.

    Attributes:
        message: Text safe to show to the user.
        error_code: Stable machine-readable code (class name when not given).
        details: Structured context; serialized as-is in the error body.
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or type(self).__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error_code, "message": self.message, "details": self.details}


class ValidationException(AgencyFlowException):
    """Bad input: blank content or feedback, unknown department, enum or user id."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, "VALIDATION_ERROR", {"field": field} if field else {})


class AuthenticationException(AgencyFlowException):
    """Missing, expired or forged bearer token, or a token for an unknown user."""

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class AuthorizationException(AgencyFlowException):
    """The caller lacks the RACI role (or admin/creator standing) an operation needs."""

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
        details_extra: dict[str, Any] | None = None,
    ) -> None:
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = dict(details_extra or {})
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(AgencyFlowException):
    """No such work item, notification or user in the caller's tenant (and department)."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TenantNotFoundException(AgencyFlowException):
    """Raised when a requested tenant is not found or not active."""

    def __init__(self, tenant_id: str) -> None:
        super().__init__(
            f"Tenant not found: {tenant_id}",
            "TENANT_NOT_FOUND",
            {"tenant_id": tenant_id},
        )


class InvalidTransitionException(AgencyFlowException):
    """Raised when a workflow operation is not allowed from the work item's current status."""

    def __init__(
        self,
        operation: str,
        current_status: str,
        allowed_statuses: list[str],
    ) -> None:
        """Initialize with the rejected operation and status context.

        Args:
            operation: Transition operation that was attempted (e.g. 'approve').
            current_status: Status of the work item when the operation was attempted.
            allowed_statuses: Statuses from which the operation is legal.
        """
        super().__init__(
            f"Cannot {operation} a work item in status '{current_status}'",
            "INVALID_TRANSITION",
            {
                "operation": operation,
                "current_status": current_status,
                "allowed_statuses": allowed_statuses,
            },
        )


class TransitionConflictException(AgencyFlowException):
    """Raised when a concurrent request changed the work item status first (compare-and-swap lost).

    The caller should re-read the work item and retry with fresh state.
    """

    def __init__(self, work_item_id: str, operation: str) -> None:
        super().__init__(
            "Work item was updated by another request; reload and retry.",
            "TRANSITION_CONFLICT",
            {"work_item_id": work_item_id, "operation": operation},
        )


class NotificationDeliveryException(AgencyFlowException):
    """Raised by the notification store when a batch could not be persisted.

    Notifications are best-effort: the fan-out service logs this and keeps the
    work item transition.
    """

    def __init__(self, task_id: str, recipient_count: int, reason: str) -> None:
        super().__init__(
            f"Failed to persist {recipient_count} notification(s) for work item {task_id}",
            "NOTIFICATION_DELIVERY_FAILED",
            {"task_id": task_id, "recipient_count": recipient_count, "reason": reason},
        )


class ServiceUnavailableException(AgencyFlowException):
    """Raised when a backing service (e.g. the database) cannot be reached."""

    def __init__(self, service: str, reason: str | None = None) -> None:
        details: dict[str, str] = {"service": service}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"{service} is unavailable",
            "SERVICE_UNAVAILABLE",
            details,
        )
