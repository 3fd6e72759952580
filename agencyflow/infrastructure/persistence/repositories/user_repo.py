"""User profile repository (read side). Profiles are provisioned by the auth provider."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from agencyflow.application.dtos.user import UserResult
from agencyflow.infrastructure.persistence.models.user_profile import UserProfile
from agencyflow.infrastructure.persistence.repositories.base import BaseRepository


def _user_to_result(u: UserProfile) -> UserResult:
    """Map ORM UserProfile to application UserResult."""
    return UserResult(
        id=u.id,
        tenant_id=u.tenant_id,
        email=u.email,
        full_name=u.full_name,
        role=u.role,
        is_active=u.is_active,
        avatar_url=u.avatar_url,
    )


class UserRepository(BaseRepository[UserProfile]):
    """User profile repository. Implements IUserRepository."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, UserProfile)

    async def get_by_id_and_tenant(
        self, user_id: str, tenant_id: str
    ) -> UserResult | None:
        user = await self.get_scoped(tenant_id, user_id)
        return _user_to_result(user) if user else None

    async def list_by_tenant(
        self, tenant_id: str, skip: int = 0, limit: int = 100
    ) -> list[UserResult]:
        result = await self.db.execute(
            select(UserProfile)
            .where(UserProfile.tenant_id == tenant_id, UserProfile.is_active.is_(True))
            .order_by(UserProfile.full_name, UserProfile.email)
            .offset(skip)
            .limit(limit)
        )
        return [_user_to_result(u) for u in result.scalars().all()]

    async def get_existing_ids(self, tenant_id: str, user_ids: Iterable[str]) -> set[str]:
        ids = set(user_ids)
        if not ids:
            return set()
        result = await self.db.execute(
            select(UserProfile.id).where(
                UserProfile.tenant_id == tenant_id,
                UserProfile.id.in_(ids),
                UserProfile.is_active.is_(True),
            )
        )
        return set(result.scalars().all())
