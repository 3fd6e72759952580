"""Calendar event ORM model: a dated slot on a client's weekly department calendar."""

from datetime import date, time

from sqlalchemy import (
    CheckConstraint,
    Date,
    ForeignKey,
    Index,
    String,
    Text,
    Time,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from agencyflow.domain.enums import Department
from agencyflow.infrastructure.persistence.database import Base
from agencyflow.infrastructure.persistence.models.mixins import MultiTenantModel
from agencyflow.infrastructure.persistence.models.tenant import in_values_check


class CalendarEvent(MultiTenantModel, Base):
    """Event of one client in one department area. Table: calendar_event."""

    __tablename__ = "calendar_event"

    client_id: Mapped[str] = mapped_column(
        String,
        ForeignKey("client.id", ondelete="CASCADE"),
        nullable=False,
    )
    area: Mapped[str] = mapped_column(String(32), nullable=False)
    concept: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    day: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    assigned_user_ids: Mapped[list[str]] = mapped_column(
        ARRAY(String), nullable=False, default=list, server_default=text("'{}'")
    )
    created_by: Mapped[str | None] = mapped_column(
        String,
        ForeignKey("user_profile.id", ondelete="SET NULL"),
        nullable=True,
    )

    __table_args__ = (
        Index("ix_calendar_event_client_area", "tenant_id", "client_id", "area", "day"),
        CheckConstraint(
            in_values_check("area", Department.values()),
            name="calendar_event_area_check",
        ),
        CheckConstraint("end_time > start_time", name="calendar_event_time_check"),
    )
