"""Client API schemas."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from agencyflow.application.dtos.client import ClientCreate


class ClientCreateRequest(BaseModel):
    """Request body for creating a client."""

    name: str = Field(..., min_length=1, max_length=255)
    client_name: str | None = Field(default=None, max_length=255)
    description: str | None = None
    type: str | None = Field(default=None, max_length=64)
    status: str = Field(default="active", description="active, paused, completed or delayed")
    phase: str | None = Field(default=None, max_length=64)
    progress: int = Field(default=0, ge=0, le=100)
    budget: Decimal | None = Field(default=None, ge=0, max_digits=12, decimal_places=2)
    start_date: date | None = None
    deadline: date | None = None
    team: list[str] = Field(default_factory=list, description="User ids on the account")

    def to_dto(self) -> ClientCreate:
        return ClientCreate(**self.model_dump())


class ClientResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

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
