"""
Checklist API endpoints.

Reading is open to every organization member (the report form needs it);
editing is limited to organization admins. Each edit is applied to the
last saved checklist and the whole document is written back.
"""

from functools import partial

from ninja import Router

from apps.checklists import editing
from apps.checklists.schemas import (
    CategoryRequest,
    ChecklistResponse,
    ItemRequest,
    ReorderCategoryRequest,
    ReorderItemRequest,
    ReplaceChecklistRequest,
)
from apps.checklists.services import apply_edit, load_checklist, replace_checklist
from apps.core.auth import request_context
from apps.core.gate import Surface, require_surface
from apps.core.results import unwrap
from apps.core.schemas import ErrorResponse, RedirectResponse
from apps.core.types import AuthenticatedHttpRequest

router = Router(tags=["checklist"])

ERRORS = {
    303: RedirectResponse,
    400: ErrorResponse,
    401: ErrorResponse,
    403: ErrorResponse,
    404: ErrorResponse,
    500: ErrorResponse,
}


@router.get(
    "",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="getChecklist",
    summary="Get the organization's checklist",
)
@require_surface(Surface.ORG_MEMBER)
def get_checklist(request: AuthenticatedHttpRequest) -> ChecklistResponse:
    """Get the checklist, falling back to the default template."""
    categories = unwrap(load_checklist(request_context(request)))
    return ChecklistResponse(categories=categories)


@router.put(
    "",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="replaceChecklist",
    summary="Replace the whole checklist",
)
@require_surface(Surface.ORG_ADMIN)
def put_checklist(request: AuthenticatedHttpRequest, payload: ReplaceChecklistRequest) -> ChecklistResponse:
    categories = [c.model_dump() for c in payload.categories]
    return ChecklistResponse(categories=unwrap(replace_checklist(request_context(request), categories)))


@router.post(
    "/categories",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="addChecklistCategory",
    summary="Add a category",
)
@require_surface(Surface.ORG_ADMIN)
def add_category(request: AuthenticatedHttpRequest, payload: CategoryRequest) -> ChecklistResponse:
    edit = partial(editing.add_category, name=payload.name, icon=payload.icon)
    return ChecklistResponse(categories=unwrap(apply_edit(request_context(request), edit)))


@router.patch(
    "/categories/{category_id}",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="updateChecklistCategory",
    summary="Rename a category or change its icon",
)
@require_surface(Surface.ORG_ADMIN)
def update_category(
    request: AuthenticatedHttpRequest, category_id: str, payload: CategoryRequest
) -> ChecklistResponse:
    edit = partial(
        editing.update_category, category_id=category_id, name=payload.name, icon=payload.icon
    )
    return ChecklistResponse(categories=unwrap(apply_edit(request_context(request), edit)))


@router.delete(
    "/categories/{category_id}",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="deleteChecklistCategory",
    summary="Delete a category and its items",
)
@require_surface(Surface.ORG_ADMIN)
def delete_category(request: AuthenticatedHttpRequest, category_id: str) -> ChecklistResponse:
    edit = partial(editing.delete_category, category_id=category_id)
    return ChecklistResponse(categories=unwrap(apply_edit(request_context(request), edit)))


@router.post(
    "/categories/{category_id}/items",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="addChecklistItem",
    summary="Add an item to a category",
)
@require_surface(Surface.ORG_ADMIN)
def add_item(
    request: AuthenticatedHttpRequest, category_id: str, payload: ItemRequest
) -> ChecklistResponse:
    edit = partial(
        editing.add_item,
        category_id=category_id,
        name=payload.name,
        description=payload.description,
    )
    return ChecklistResponse(categories=unwrap(apply_edit(request_context(request), edit)))


@router.patch(
    "/categories/{category_id}/items/{item_id}",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="updateChecklistItem",
    summary="Edit an item",
)
@require_surface(Surface.ORG_ADMIN)
def update_item(
    request: AuthenticatedHttpRequest, category_id: str, item_id: str, payload: ItemRequest
) -> ChecklistResponse:
    edit = partial(
        editing.update_item,
        category_id=category_id,
        item_id=item_id,
        name=payload.name,
        description=payload.description,
    )
    return ChecklistResponse(categories=unwrap(apply_edit(request_context(request), edit)))


@router.delete(
    "/categories/{category_id}/items/{item_id}",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="deleteChecklistItem",
    summary="Delete an item",
)
@require_surface(Surface.ORG_ADMIN)
def delete_item(request: AuthenticatedHttpRequest, category_id: str, item_id: str) -> ChecklistResponse:
    edit = partial(editing.delete_item, category_id=category_id, item_id=item_id)
    return ChecklistResponse(categories=unwrap(apply_edit(request_context(request), edit)))


@router.post(
    "/reorder/categories",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="reorderChecklistCategory",
    summary="Move a category onto another's position",
)
@require_surface(Surface.ORG_ADMIN)
def reorder_category(
    request: AuthenticatedHttpRequest, payload: ReorderCategoryRequest
) -> ChecklistResponse:
    edit = partial(editing.reorder_category, active_id=payload.active_id, over_id=payload.over_id)
    return ChecklistResponse(categories=unwrap(apply_edit(request_context(request), edit)))


@router.post(
    "/reorder/items",
    response={200: ChecklistResponse, **ERRORS},
    operation_id="reorderChecklistItem",
    summary="Move an item within its category",
)
@require_surface(Surface.ORG_ADMIN)
def reorder_item(request: AuthenticatedHttpRequest, payload: ReorderItemRequest) -> ChecklistResponse:
    """Cross-category moves are rejected with 400."""
    edit = partial(
        editing.reorder_item,
        active_category_id=payload.active_category_id,
        active_item_id=payload.active_item_id,
        over_category_id=payload.over_category_id,
        over_item_id=payload.over_item_id,
    )
    return ChecklistResponse(categories=unwrap(apply_edit(request_context(request), edit)))
