"""User profile ORM model (tenant-scoped). Written by the auth provider; read here."""

from sqlalchemy import Boolean, CheckConstraint, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from agencyflow.domain.enums import UserRole
from agencyflow.infrastructure.persistence.database import Base
from agencyflow.infrastructure.persistence.models.mixins import MultiTenantModel
from agencyflow.infrastructure.persistence.models.tenant import in_values_check


class UserProfile(MultiTenantModel, Base):
    """User profile. Table: user_profile. Unique (tenant_id, email)."""

    __tablename__ = "user_profile"

    email: Mapped[str] = mapped_column(String(255), nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    role: Mapped[str] = mapped_column(
        String(16), nullable=False, default=UserRole.USER.value, server_default="user"
    )
    avatar_url: Mapped[str | None] = mapped_column(String, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )

    __table_args__ = (
        UniqueConstraint("tenant_id", "email", name="uq_user_profile_tenant_email"),
        CheckConstraint(
            in_values_check("role", UserRole.values()), name="user_profile_role_check"
        ),
    )
