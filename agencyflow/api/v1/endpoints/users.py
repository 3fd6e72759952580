"""User profile API: the current user and the tenant's users (RACI pickers)."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from agencyflow.api.v1.dependencies import get_actor, get_user_repo
from agencyflow.application.dtos.user import UserResult
from agencyflow.infrastructure.persistence.repositories import UserRepository
from agencyflow.schemas.user import UserResponse

router = APIRouter()


@router.get("/me", response_model=UserResponse)
async def get_me(
    actor: Annotated[UserResult, Depends(get_actor)],
) -> UserResponse:
    """Return the authenticated user's profile."""
    return UserResponse.model_validate(actor)


@router.get("", response_model=list[UserResponse])
async def list_users(
    actor: Annotated[UserResult, Depends(get_actor)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
) -> list[UserResponse]:
    """List active users of the actor's tenant."""
    users = await user_repo.list_by_tenant(actor.tenant_id, skip=skip, limit=limit)
    return [UserResponse.model_validate(u) for u in users]
