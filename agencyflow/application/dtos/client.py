"""DTOs for clients (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from agencyflow.domain.enums import ClientStatus


@dataclass(frozen=True)
class ClientResult:
    """Client read-model."""

    id: str
    tenant_id: str
    name: str
    client_name: str | None
    description: str | None
    type: str | None
    status: str
    phase: str | None
    progress: int
    budget: Decimal | None
    start_date: date | None
    deadline: date | None
    team: list[str]
    created_by: str | None
    created_at: datetime
    updated_at: datetime


@dataclass
class ClientCreate:
    name: str
    client_name: str | None = None
    description: str | None = None
    type: str | None = None
    status: str = ClientStatus.ACTIVE.value
    phase: str | None = None
    progress: int = 0
    budget: Decimal | None = None
    start_date: date | None = None
    deadline: date | None = None
    team: list[str] = field(default_factory=list)
