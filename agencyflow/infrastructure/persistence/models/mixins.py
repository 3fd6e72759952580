"""Column mixins shared by the agencyflow tables.

Every tenant-owned row carries a CUID id, a tenant_id (deleted with its
tenant) and server-stamped created_at / updated_at.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column

from agencyflow.shared.utils.generators import generate_cuid


class CuidMixin:
    id: Mapped[str] = mapped_column(String, primary_key=True, default=generate_cuid)


class TenantMixin:
    tenant_id: Mapped[str] = mapped_column(
        ForeignKey("tenant.id", ondelete="CASCADE"), index=True
    )


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )


class MultiTenantModel(CuidMixin, TenantMixin, TimestampMixin):
    """id + tenant_id + timestamps: user profiles, work items, notifications."""

    __abstract__ = True
