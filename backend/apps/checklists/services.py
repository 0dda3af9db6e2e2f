"""
Checklist services - read, overwrite and edit an organization's checklist.
"""

from collections.abc import Callable, Sequence
from typing import Any

from django.db import DatabaseError

from apps.accounts.constants import SUPER_ORG_ID
from apps.checklists.defaults import default_checklist
from apps.checklists.editing import (
    ChecklistEditError,
    CrossCategoryMoveError,
)
from apps.checklists.models import Checklist
from apps.core.auth import RequestContext
from apps.core.logging import get_logger
from apps.core.results import Err, ErrorKind, Ok

logger = get_logger(__name__)

LOAD_FAILED_MESSAGE = "Could not load the inspection checklist."
SAVE_FAILED_MESSAGE = "Could not save the inspection checklist."

ChecklistEdit = Callable[[list[dict]], list[dict]]


def is_valid_checklist(categories: Any) -> bool:
    """Check the stored document has the expected category/item shape."""
    if not isinstance(categories, list):
        return False
    for category in categories:
        if not isinstance(category, dict) or not {"id", "name", "items"} <= category.keys():
            return False
        if not isinstance(category["items"], list):
            return False
    return True


def get_checklist(org_id: str, is_super_admin: bool = False) -> list[dict]:
    """
    Get the checklist for an organization.

    Super-admins always get the default template. Organizations that never
    saved a checklist (or whose stored document is malformed) get the default
    template, which is persisted so later reads find it.
    """
    if is_super_admin or org_id == SUPER_ORG_ID:
        return default_checklist()

    checklist = Checklist.objects.filter(organization_id=org_id).first()
    if checklist is not None and is_valid_checklist(checklist.categories):
        return checklist.categories

    categories = default_checklist()
    if checklist is None:
        Checklist.objects.create(organization_id=org_id, categories=categories)
    else:
        checklist.categories = categories
        checklist.save(update_fields=["categories", "updated_at"])
    logger.info("default_checklist_persisted", **{"organization.id": org_id})
    return default_checklist()


def set_checklist(org_id: str, categories: Sequence[dict]) -> bool:
    """
    Overwrite an organization's checklist with the given ordered categories.

    Returns False without writing for the reserved super-admin organization.
    """
    if org_id == SUPER_ORG_ID:
        logger.warning("checklist_write_refused", **{"organization.id": org_id})
        return False

    Checklist.objects.update_or_create(
        organization_id=org_id,
        defaults={"categories": list(categories)},
    )
    return True


def checklist_org_id(ctx: RequestContext) -> str | None:
    """The checklist a caller works on: super-admins only see the reserved one."""
    if ctx.is_super_admin:
        return SUPER_ORG_ID
    return ctx.org_id


def load_checklist(ctx: RequestContext) -> Ok[list[dict]] | Err:
    org_id = checklist_org_id(ctx)
    if org_id is None:
        return Err("Organization not found.", ErrorKind.UNAUTHORIZED)
    try:
        return Ok(get_checklist(org_id, ctx.is_super_admin))
    except DatabaseError:
        logger.exception("checklist_load_failed", **{"organization.id": org_id})
        return Err(LOAD_FAILED_MESSAGE)


def replace_checklist(ctx: RequestContext, categories: Sequence[dict]) -> Ok[list[dict]] | Err:
    """Full overwrite from the editor."""
    org_id = checklist_org_id(ctx)
    if org_id is None:
        return Err("Organization not found.", ErrorKind.UNAUTHORIZED)
    if not is_valid_checklist(list(categories)):
        return Err("Checklist is malformed.", ErrorKind.INVALID)
    return _save(org_id, list(categories))


def apply_edit(ctx: RequestContext, edit: ChecklistEdit) -> Ok[list[dict]] | Err:
    """
    Apply one pure edit to the last persisted checklist and save the result.

    A failed save is logged and reported; nothing is rolled back on the
    caller's side, so an editor may show state that was never persisted.
    """
    loaded = load_checklist(ctx)
    if isinstance(loaded, Err):
        return loaded

    try:
        categories = edit(loaded.data)
    except CrossCategoryMoveError as e:
        return Err(str(e), ErrorKind.INVALID)
    except IndexError:
        return Err("Invalid position.", ErrorKind.INVALID)
    except ChecklistEditError as e:
        return Err(str(e), ErrorKind.NOT_FOUND)

    return _save(checklist_org_id(ctx), categories)  # type: ignore[arg-type]


def _save(org_id: str, categories: list[dict]) -> Ok[list[dict]] | Err:
    try:
        saved = set_checklist(org_id, categories)
    except DatabaseError:
        logger.exception("checklist_save_failed", **{"organization.id": org_id})
        return Err(SAVE_FAILED_MESSAGE)

    if not saved:
        return Err("The default checklist cannot be edited.", ErrorKind.INVALID)

    logger.info(
        "checklist_saved",
        categories=len(categories),
        items=sum(len(c["items"]) for c in categories),
        **{"organization.id": org_id},
    )
    return Ok(categories)
