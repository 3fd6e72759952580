"""Client API: the tenant's client board and client detail."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from agencyflow.api.v1.dependencies import (
    get_actor,
    get_client_service,
    get_client_service_for_write,
)
from agencyflow.application.dtos.user import UserResult
from agencyflow.application.use_cases.clients import ClientService
from agencyflow.core.limiter import limit_writes
from agencyflow.schemas.client import ClientCreateRequest, ClientResponse

router = APIRouter()


@router.get("", response_model=list[ClientResponse])
async def list_clients(
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[ClientService, Depends(get_client_service)],
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
) -> list[ClientResponse]:
    """List the tenant's clients, newest first."""
    clients = await service.list_clients(actor, skip=skip, limit=limit)
    return [ClientResponse.model_validate(c) for c in clients]


@router.get("/{client_id}", response_model=ClientResponse)
async def get_client(
    client_id: str,
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[ClientService, Depends(get_client_service)],
) -> ClientResponse:
    client = await service.get_client(actor, client_id)
    return ClientResponse.model_validate(client)


@router.post("", response_model=ClientResponse, status_code=201)
@limit_writes
async def create_client(
    request: Request,
    body: ClientCreateRequest,
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[ClientService, Depends(get_client_service_for_write)],
) -> ClientResponse:
    """Create a client in the caller's tenant."""
    client = await service.create_client(actor, body.to_dto())
    return ClientResponse.model_validate(client)
