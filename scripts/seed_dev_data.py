"""Seed a development agency: one tenant, an admin and four users, a client with a
calendar event, and one work item for that client.

Prints a bearer token per user so the API can be exercised locally.
In production, tenants and profiles are written by the auth provider.

Usage:
    python -m scripts.seed_dev_data [tenant-code]

Requires: DATABASE_URL, SECRET_KEY, migrated database.
"""

from __future__ import annotations

import asyncio
import sys
from datetime import date, time, timedelta
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import select

from agencyflow.application.dtos.calendar_event import CalendarEventCreate
from agencyflow.application.dtos.client import ClientCreate
from agencyflow.application.dtos.work_item import WorkItemCreate
from agencyflow.domain.enums import Department, UserRole
from agencyflow.infrastructure.persistence import database as db_mod
from agencyflow.infrastructure.persistence.models import Tenant, UserProfile
from agencyflow.infrastructure.persistence.repositories import (
    CalendarEventRepository,
    ClientRepository,
    WorkItemRepository,
)
from agencyflow.infrastructure.security.jwt import create_access_token
from agencyflow.shared.utils.generators import generate_cuid

DEV_USERS = [
    ("admin", "Agency Admin", UserRole.ADMIN),
    ("rachel", "Rachel Responsible", UserRole.USER),
    ("alex", "Alex Accountable", UserRole.USER),
    ("carla", "Carla Consulted", UserRole.USER),
    ("ian", "Ian Informed", UserRole.USER),
]


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def run(code: str) -> None:
    db_mod._ensure_engine()
    assert db_mod.AsyncSessionLocal is not None
    async with db_mod.AsyncSessionLocal() as session:
        async with session.begin():
            existing = (
                await session.execute(select(Tenant).where(Tenant.code == code))
            ).scalar_one_or_none()
            tenant_id = existing.id if existing else generate_cuid()
            # RLS WITH CHECK needs the tenant set before the first insert.
            await db_mod.bind_tenant(session, tenant_id)
            if existing is None:
                session.add(Tenant(id=tenant_id, code=code, name=f"{code} agency"))
                await session.flush()
                print(f"Tenant {code} -> {tenant_id}")

            users: dict[str, UserProfile] = {}
            for handle, full_name, role in DEV_USERS:
                email = f"{handle}@{code}.dev"
                user = (
                    await session.execute(
                        select(UserProfile).where(
                            UserProfile.tenant_id == tenant_id,
                            UserProfile.email == email,
                        )
                    )
                ).scalar_one_or_none()
                if user is None:
                    user = UserProfile(
                        tenant_id=tenant_id,
                        email=email,
                        full_name=full_name,
                        role=role.value,
                    )
                    session.add(user)
                    await session.flush()
                users[handle] = user

            client = await ClientRepository(session).create(
                tenant_id,
                ClientCreate(
                    name="Spring launch",
                    client_name=f"{code} retail",
                    type="retail",
                    phase="planning",
                    start_date=date.today(),
                    deadline=date.today() + timedelta(days=60),
                    team=[users["rachel"].id, users["alex"].id],
                ),
                created_by=users["admin"].id,
            )
            print(f"Client {client.id} ({client.name})")
            event = await CalendarEventRepository(session).create(
                tenant_id,
                client.id,
                CalendarEventCreate(
                    area=Department.MARKETING.value,
                    concept="Campaign kickoff",
                    day=date.today(),
                    start_time=time(10, 0),
                    end_time=time(11, 0),
                    assigned_user_ids=[users["rachel"].id, users["carla"].id],
                ),
                created_by=users["admin"].id,
            )
            print(f"Calendar event {event.id} ({event.concept})")

            item = await WorkItemRepository(session).create(
                tenant_id,
                Department.MARKETING.value,
                WorkItemCreate(
                    title="Launch spring campaign",
                    responsible_user_id=users["rachel"].id,
                    accountable_user_id=users["alex"].id,
                    consulted_user_ids=[users["carla"].id],
                    informed_user_ids=[users["ian"].id],
                    info_type="campaign",
                    client_id=client.id,
                ),
                created_by=users["admin"].id,
            )
            print(f"Work item marketing/{item.id} ({item.title})")

    print(f"\nX-Tenant-ID: {tenant_id}")
    for handle, user in users.items():
        token = create_access_token({"sub": user.id, "tenant_id": tenant_id})
        print(f"{handle:>7}: Bearer {token}")
    await db_mod.dispose_engine()


def main() -> None:
    _load_env()
    code = sys.argv[1] if len(sys.argv) > 1 else "acme"
    if not code.replace("-", "").replace("_", "").isalnum():
        sys.exit(f"Invalid tenant code: {code!r}")
    asyncio.run(run(code))


if __name__ == "__main__":
    main()
