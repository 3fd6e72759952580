"""DTOs for tenants (no dependency on ORM)."""

from dataclasses import dataclass

from agencyflow.domain.enums import TenantStatus


@dataclass(frozen=True)
class TenantResult:
    """Tenant (agency) read-model."""

    id: str
    code: str
    name: str
    status: str

    @property
    def is_active(self) -> bool:
        return self.status == TenantStatus.ACTIVE.value
