"""Tenant ORM model. One agency; root entity for multi-tenant hierarchy (no tenant_id)."""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from agencyflow.domain.enums import TenantStatus
from agencyflow.infrastructure.persistence.database import Base
from agencyflow.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


def in_values_check(column: str, values: list[str]) -> str:
    """SQL text for a CHECK constraint restricting column to values."""
    quoted = ", ".join("'{}'".format(v.replace("'", "''")) for v in values)
    return f"{column} IN ({quoted})"


class Tenant(CuidMixin, TimestampMixin, Base):
    """Root tenant entity. Table: tenant. Status: active, suspended, archived."""

    __tablename__ = "tenant"

    code: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[str] = mapped_column(
        String, nullable=False, default=TenantStatus.ACTIVE.value, index=True
    )

    __table_args__ = (
        CheckConstraint(
            in_values_check("status", TenantStatus.values()),
            name="tenant_status_check",
        ),
    )
