"""Work item and workflow service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from agencyflow.application.services.notification_fanout import (
    NotificationFanoutService,
)
from agencyflow.application.use_cases.work_items import (
    TaskWorkflowService,
    WorkItemService,
)
from agencyflow.infrastructure.persistence.repositories import (
    ClientRepository,
    NotificationRepository,
    UserRepository,
    WorkItemRepository,
)

from .db import (
    get_client_repo,
    get_notification_repo_for_write,
    get_user_repo,
    get_work_item_repo,
    get_work_item_repo_for_write,
)


async def get_work_item_service(
    work_item_repo: Annotated[WorkItemRepository, Depends(get_work_item_repo)],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    client_repo: Annotated[ClientRepository, Depends(get_client_repo)],
) -> WorkItemService:
    """WorkItemService for reads (get, list)."""
    return WorkItemService(
        work_item_repo=work_item_repo, user_repo=user_repo, client_repo=client_repo
    )


async def get_work_item_service_for_write(
    work_item_repo: Annotated[
        WorkItemRepository, Depends(get_work_item_repo_for_write)
    ],
    user_repo: Annotated[UserRepository, Depends(get_user_repo)],
    client_repo: Annotated[ClientRepository, Depends(get_client_repo)],
) -> WorkItemService:
    """WorkItemService for create and update (transactional)."""
    return WorkItemService(
        work_item_repo=work_item_repo, user_repo=user_repo, client_repo=client_repo
    )


async def get_task_workflow_service(
    work_item_repo: Annotated[
        WorkItemRepository, Depends(get_work_item_repo_for_write)
    ],
    notification_repo: Annotated[
        NotificationRepository, Depends(get_notification_repo_for_write)
    ],
) -> TaskWorkflowService:
    """TaskWorkflowService: task update and notification fan-out in one transaction."""
    return TaskWorkflowService(
        work_item_repo=work_item_repo,
        fanout=NotificationFanoutService(notification_repo),
    )
