"""
Fleet services - the driver and vehicle rosters.

Both rosters share one implementation, parameterized by model and the single
identifying field (``name`` for drivers, ``registration`` for vehicles).
"""

from __future__ import annotations

import re
import uuid
from collections.abc import Callable
from dataclasses import dataclass

from django.db import DatabaseError, models
from django.db.models import Q

from apps.core.auth import RequestContext
from apps.core.logging import get_logger
from apps.core.results import Err, ErrorKind, Ok
from apps.fleet.cursor import CursorInvalidError, decode_cursor, encode_cursor
from apps.fleet.models import Driver, Vehicle

logger = get_logger(__name__)

PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

_REGISTRATION_SEPARATORS = re.compile(r"[\s-]+")


def format_driver_name(name: str) -> str:
    """
    Title-case each space-separated word.

    "jOhN dOE" -> "John Doe"
    """
    if not name:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in name.lower().split(" "))


def format_vehicle_registration(registration: str) -> str:
    """
    Upper-case and drop whitespace and hyphens.

    "abc-123 xy" -> "ABC123XY"
    """
    if not registration:
        return ""
    return _REGISTRATION_SEPARATORS.sub("", registration).upper()


@dataclass(frozen=True)
class FleetPage:
    items: list[dict]
    next_cursor: str | None


@dataclass(frozen=True)
class FleetCollection:
    """One organization-scoped roster."""

    model: type[models.Model]
    field: str
    label: str
    normalize: Callable[[str], str]

    def _serialize(self, row: models.Model) -> dict:
        return {
            "id": str(row.pk),
            self.field: getattr(row, self.field),
            "created_at": row.created_at,  # type: ignore[attr-defined]
        }

    def add(self, ctx: RequestContext, value: str) -> Ok[dict] | Err:
        """Normalize the value and store a new row."""
        if not ctx.org_id:
            return Err("Organization ID is required.", ErrorKind.UNAUTHORIZED)

        normalized = self.normalize((value or "").strip())
        if not normalized:
            return Err(f"A {self.label} {self.field} is required.", ErrorKind.INVALID)

        try:
            row = self.model.objects.create(organization_id=ctx.org_id, **{self.field: normalized})
        except DatabaseError:
            logger.exception(f"{self.label}_add_failed", **{"organization.id": ctx.org_id})
            return Err(f"Could not add {self.label}.")

        logger.info(f"{self.label}_added", id=str(row.pk), **{"organization.id": ctx.org_id})
        return Ok(self._serialize(row), message=f"{self.label} added successfully.")

    def list(self, ctx: RequestContext) -> Ok[list[dict]] | Err:
        """Every row for the organization, ordered by the identifying field."""
        if not ctx.org_id:
            return Ok([])
        try:
            rows = self.model.objects.filter(organization_id=ctx.org_id).order_by(self.field, "created_at")
            return Ok([self._serialize(row) for row in rows])
        except DatabaseError:
            logger.exception(f"{self.label}_list_failed", **{"organization.id": ctx.org_id})
            return Err(f"Could not load {self.label}s.")

    def list_page(
        self,
        ctx: RequestContext,
        cursor: str | None = None,
        limit: int = PAGE_SIZE,
    ) -> Ok[FleetPage] | Err:
        """
        One page of rows, newest first.

        ``next_cursor`` is set when the page is full; pass it back to get
        the rows created before the last one shown.
        """
        if not ctx.org_id:
            return Ok(FleetPage(items=[], next_cursor=None))

        limit = max(1, min(limit, MAX_PAGE_SIZE))
        queryset = self.model.objects.filter(organization_id=ctx.org_id)
        if cursor:
            try:
                position = decode_cursor(cursor)
                last_id = uuid.UUID(position.row_id)
            except (CursorInvalidError, ValueError):
                return Err("Invalid cursor.", ErrorKind.INVALID)
            queryset = queryset.filter(
                Q(created_at__lt=position.created_at)
                | Q(created_at=position.created_at, id__lt=last_id)
            )

        try:
            rows = list(queryset.order_by("-created_at", "-id")[:limit])
        except DatabaseError:
            logger.exception(f"{self.label}_page_failed", **{"organization.id": ctx.org_id})
            return Err(f"Could not load {self.label}s.")

        next_cursor = None
        if len(rows) == limit:
            last = rows[-1]
            next_cursor = encode_cursor(last.created_at, str(last.pk))  # type: ignore[attr-defined]
        return Ok(FleetPage(items=[self._serialize(row) for row in rows], next_cursor=next_cursor))

    def delete(self, ctx: RequestContext, item_id: str | None) -> Ok[None] | Err:
        """Hard delete by id within the caller's organization."""
        if not ctx.org_id or not item_id:
            return Err("Organization and item ID are required.", ErrorKind.INVALID)

        try:
            pk = uuid.UUID(str(item_id))
        except ValueError:
            return Err(f"{self.label.capitalize()} not found.", ErrorKind.NOT_FOUND)

        try:
            deleted, _ = self.model.objects.filter(organization_id=ctx.org_id, pk=pk).delete()
        except DatabaseError:
            logger.exception(f"{self.label}_delete_failed", id=item_id, **{"organization.id": ctx.org_id})
            return Err(f"Could not delete {self.label}.")

        if not deleted:
            return Err(f"{self.label.capitalize()} not found.", ErrorKind.NOT_FOUND)

        logger.info(f"{self.label}_deleted", id=item_id, **{"organization.id": ctx.org_id})
        return Ok(None, message=f"{self.label} deleted successfully.")


DRIVERS = FleetCollection(model=Driver, field="name", label="driver", normalize=format_driver_name)
VEHICLES = FleetCollection(
    model=Vehicle,
    field="registration",
    label="vehicle",
    normalize=format_vehicle_registration,
)
