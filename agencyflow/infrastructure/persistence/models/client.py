"""Client ORM model: an agency customer whose work items and calendar belong to it."""

from datetime import date
from decimal import Decimal

from sqlalchemy import (
    CheckConstraint,
    Date,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from agencyflow.domain.enums import ClientStatus
from agencyflow.infrastructure.persistence.database import Base
from agencyflow.infrastructure.persistence.models.mixins import MultiTenantModel
from agencyflow.infrastructure.persistence.models.tenant import in_values_check


class Client(MultiTenantModel, Base):
    """Client project card. Table: client."""

    __tablename__ = "client"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Contact or legal name of the customer; name is the project label
    client_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str | None] = mapped_column(String(64), nullable=True)
    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=ClientStatus.ACTIVE.value,
        server_default="active",
    )
    phase: Mapped[str | None] = mapped_column(String(64), nullable=True)
    progress: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )
    budget: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    deadline: Mapped[date | None] = mapped_column(Date, nullable=True)
    team: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list, server_default=text("'{}'")
    )
    created_by: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("user_profile.id", ondelete="SET NULL"),
        nullable=True,
    )

    __table_args__ = (
        Index("ix_client_tenant_created", "tenant_id", "created_at"),
        CheckConstraint(
            in_values_check("status", ClientStatus.values()),
            name="client_status_check",
        ),
        CheckConstraint("progress BETWEEN 0 AND 100", name="client_progress_check"),
    )
