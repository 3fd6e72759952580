"""Work item API: department-scoped CRUD and the four RACI workflow operations.

Thin routes: each delegates to WorkItemService or TaskWorkflowService with the
authenticated user as the explicit actor. Domain exceptions are mapped to HTTP
in agencyflow.core.exception_handlers.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from agencyflow.api.v1.dependencies import (
    get_actor,
    get_task_workflow_service,
    get_work_item_service,
    get_work_item_service_for_write,
)
from agencyflow.application.dtos.user import UserResult
from agencyflow.application.dtos.work_item import TransitionResult
from agencyflow.application.services.raci import build_view
from agencyflow.application.use_cases.work_items import (
    TaskWorkflowService,
    WorkItemService,
)
from agencyflow.core.limiter import limit_transitions, limit_writes
from agencyflow.schemas.work_item import (
    ContentRequest,
    FeedbackRequest,
    TransitionResponse,
    WorkItemCreateRequest,
    WorkItemResponse,
    WorkItemUpdateRequest,
)

router = APIRouter()
mine_router = APIRouter()


def _transition_response(actor: UserResult, result: TransitionResult) -> TransitionResponse:
    return TransitionResponse.from_result(result, build_view(actor.id, result.item))


@router.post("", response_model=WorkItemResponse, status_code=201)
@limit_writes
async def create_work_item(
    request: Request,
    department: str,
    body: WorkItemCreateRequest,
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[WorkItemService, Depends(get_work_item_service_for_write)],
) -> WorkItemResponse:
    """Create a pending work item in the department."""
    item = await service.create_work_item(actor, department, body.to_dto())
    return WorkItemResponse.from_view(build_view(actor.id, item))


@router.get("", response_model=list[WorkItemResponse])
async def list_work_items(
    department: str,
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[WorkItemService, Depends(get_work_item_service)],
    status: str | None = Query(None, description="Filter by task status"),
    info_type: str | None = Query(None, description="Filter by information type"),
    client_id: str | None = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
) -> list[WorkItemResponse]:
    """List the department's work items, newest first."""
    views = await service.list_work_items(
        actor,
        department,
        status=status,
        info_type=info_type,
        client_id=client_id,
        skip=skip,
        limit=limit,
    )
    return [WorkItemResponse.from_view(v) for v in views]


@router.get("/{item_id}", response_model=WorkItemResponse)
async def get_work_item(
    department: str,
    item_id: str,
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[WorkItemService, Depends(get_work_item_service)],
) -> WorkItemResponse:
    """Get a work item with the caller's roles, primary action and allowed operations."""
    view = await service.get_work_item(actor, department, item_id)
    return WorkItemResponse.from_view(view)


@router.patch("/{item_id}", response_model=WorkItemResponse)
@limit_writes
async def update_work_item(
    request: Request,
    department: str,
    item_id: str,
    body: WorkItemUpdateRequest,
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[WorkItemService, Depends(get_work_item_service_for_write)],
) -> WorkItemResponse:
    """Edit description or RACI assignment (admin or creator; not once completed)."""
    view = await service.update_assignment(actor, department, item_id, body.to_dto())
    return WorkItemResponse.from_view(view)


@router.post("/{item_id}/complete", response_model=TransitionResponse)
@limit_transitions
async def complete_work_item(
    request: Request,
    department: str,
    item_id: str,
    body: ContentRequest,
    actor: Annotated[UserResult, Depends(get_actor)],
    workflow: Annotated[TaskWorkflowService, Depends(get_task_workflow_service)],
) -> TransitionResponse:
    """Responsible user submits completion content; the item moves to in_review."""
    result = await workflow.complete_task(actor, department, item_id, body.content)
    return _transition_response(actor, result)


@router.post("/{item_id}/approve", response_model=TransitionResponse)
@limit_transitions
async def approve_work_item(
    request: Request,
    department: str,
    item_id: str,
    actor: Annotated[UserResult, Depends(get_actor)],
    workflow: Annotated[TaskWorkflowService, Depends(get_task_workflow_service)],
) -> TransitionResponse:
    """Accountable user approves an item in review; the item is completed."""
    result = await workflow.approve_task(actor, department, item_id)
    return _transition_response(actor, result)


@router.post("/{item_id}/request-correction", response_model=TransitionResponse)
@limit_transitions
async def request_work_item_correction(
    request: Request,
    department: str,
    item_id: str,
    body: FeedbackRequest,
    actor: Annotated[UserResult, Depends(get_actor)],
    workflow: Annotated[TaskWorkflowService, Depends(get_task_workflow_service)],
) -> TransitionResponse:
    """Accountable user sends the item back with feedback (correction_needed)."""
    result = await workflow.request_correction(
        actor, department, item_id, body.feedback
    )
    return _transition_response(actor, result)


@router.post("/{item_id}/consult", response_model=TransitionResponse)
@limit_transitions
async def consult_work_item(
    request: Request,
    department: str,
    item_id: str,
    body: ContentRequest,
    actor: Annotated[UserResult, Depends(get_actor)],
    workflow: Annotated[TaskWorkflowService, Depends(get_task_workflow_service)],
) -> TransitionResponse:
    """Consulted user records input; status is unchanged."""
    result = await workflow.submit_consulted_input(
        actor, department, item_id, body.content
    )
    return _transition_response(actor, result)


@mine_router.get("/mine", response_model=list[WorkItemResponse])
async def list_my_work_items(
    actor: Annotated[UserResult, Depends(get_actor)],
    service: Annotated[WorkItemService, Depends(get_work_item_service)],
    role: str | None = Query(None, description="responsible, accountable, consulted or informed"),
    status: str | None = Query(None),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
) -> list[WorkItemResponse]:
    """Work items across departments where the caller holds a RACI role."""
    views = await service.list_my_work_items(
        actor, role=role, status=status, skip=skip, limit=limit
    )
    return [WorkItemResponse.from_view(v) for v in views]
