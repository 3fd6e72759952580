"""Work item use cases: RACI transitions and CRUD."""

from agencyflow.application.use_cases.work_items.task_workflow import TaskWorkflowService
from agencyflow.application.use_cases.work_items.work_item_operations import (
    WorkItemService,
)

__all__ = ["TaskWorkflowService", "WorkItemService"]
