"""DTOs for user profiles (no dependency on ORM)."""

from dataclasses import dataclass

from agencyflow.domain.enums import UserRole


@dataclass(frozen=True)
class UserResult:
    """User profile read-model. Also the explicit actor passed to every workflow operation."""

    id: str
    tenant_id: str
    email: str
    full_name: str | None
    role: str
    is_active: bool = True
    avatar_url: str | None = None

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
