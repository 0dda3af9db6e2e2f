"""
Inspection report services - write, list, look up and export reports.

Every operation returns Ok/Err; nothing raises to the caller.
"""

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from django.core.exceptions import ValidationError
from django.db import DatabaseError
from django.db.models import Q

from apps.checklists.editing import flatten_items
from apps.checklists.services import is_valid_checklist
from apps.core.auth import RequestContext
from apps.core.logging import get_logger
from apps.core.results import Err, ErrorKind, Ok
from apps.inspections.models import InspectionReport

logger = get_logger(__name__)

STATUSES = ("Ok", "Needs Repair", "not ok")
DEFAULT_STATUS = "not ok"
MAX_NOTES_LENGTH = 200
# BigIntegerField bounds
MIN_ODOMETER = -(2**63)
MAX_ODOMETER = 2**63 - 1
VERDICTS = (InspectionReport.Verdict.PASS, InspectionReport.Verdict.FAIL)

SAVED_MESSAGE = "Inspection report saved successfully!"
NOT_IN_ORG_MESSAGE = "User is not authenticated or does not belong to an organization."


def coerce_odometer(value: Any) -> int | None:
    """Integer odometer reading, or None when the input is not a storable number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        reading = value
    else:
        try:
            reading = int(str(value).strip().replace(",", ""))
        except ValueError:
            return None
    if not MIN_ODOMETER <= reading <= MAX_ODOMETER:
        return None
    return reading


def timestamp_pair(value: datetime) -> dict[str, int]:
    """Serialize a timestamp as ``{seconds, nanoseconds}``."""
    return {"seconds": int(value.timestamp()), "nanoseconds": value.microsecond * 1000}


def build_report_items(form_data: Mapping[str, Any], categories: Sequence[dict]) -> list[dict]:
    """
    Snapshot every checklist item with the status and notes from the form.

    One entry per item, in checklist order, whether or not the form answered it.
    """
    items = []
    for entry in flatten_items(categories):
        item_id = entry["item_id"]
        items.append(
            {
                "id": item_id,
                "name": entry["name"],
                "description": entry["description"],
                "category_id": entry["category_id"],
                "category_name": entry["category_name"],
                "status": str(form_data.get(f"{item_id}_status") or DEFAULT_STATUS),
                "notes": str(form_data.get(f"{item_id}_notes") or ""),
            }
        )
    return items


def _validate(form_data: Mapping[str, Any], items: list[dict]) -> str | None:
    for field, label in (
        ("vehicle_registration", "Vehicle registration"),
        ("driver_name", "Driver name"),
        ("final_verdict", "Final verdict"),
    ):
        if not str(form_data.get(field) or "").strip():
            return f"{label} is required."
    if form_data["final_verdict"] not in VERDICTS:
        return "Final verdict must be PASS or FAIL."
    for item in items:
        if item["status"] not in STATUSES:
            return f"Invalid status for {item['name']}."
        if len(item["notes"]) > MAX_NOTES_LENGTH:
            return f"Notes for {item['name']} must be {MAX_NOTES_LENGTH} characters or fewer."
    return None


def save_inspection_report(
    ctx: RequestContext,
    form_data: Mapping[str, Any],
    categories: Sequence[dict],
) -> Ok[dict] | Err:
    """
    Store one report from a submitted form.

    Args:
        ctx: Caller claims; user and organization are required
        form_data: Flat form values: ``vehicle_registration``, ``driver_name``,
            ``current_odometer``, ``inspected_by``, ``final_verdict`` and
            ``<item_id>_status`` / ``<item_id>_notes`` per checklist item
        categories: The checklist the form was rendered from

    Returns:
        Ok with the stored report, or Err with a user-facing message
    """
    if not ctx.user_id or not ctx.org_id:
        return Err(NOT_IN_ORG_MESSAGE, ErrorKind.UNAUTHORIZED)
    if not is_valid_checklist(list(categories)):
        return Err("Checklist is malformed.", ErrorKind.INVALID)

    items = build_report_items(form_data, categories)
    problem = _validate(form_data, items)
    if problem:
        return Err(problem, ErrorKind.INVALID)

    try:
        report = InspectionReport.objects.create(
            organization_id=ctx.org_id,
            vehicle_registration=str(form_data["vehicle_registration"]).strip(),
            driver_name=str(form_data["driver_name"]).strip(),
            current_odometer=coerce_odometer(form_data.get("current_odometer")),
            inspected_by=str(form_data.get("inspected_by") or "").strip().upper(),
            final_verdict=form_data["final_verdict"],
            items=items,
            submitted_by=ctx.user_id,
        )
    except DatabaseError:
        logger.exception("inspection_report_save_failed", **{"organization.id": ctx.org_id})
        return Err("An unknown error occurred while saving the report.")

    logger.info(
        "inspection_report_saved",
        report_id=str(report.id),
        items=len(items),
        verdict=report.final_verdict,
        **{"organization.id": ctx.org_id},
    )
    return Ok(serialize_report(report), message=SAVED_MESSAGE)


def serialize_summary(report: InspectionReport) -> dict:
    return {
        "id": str(report.id),
        "vehicle_registration": report.vehicle_registration,
        "driver_name": report.driver_name,
        "current_odometer": report.current_odometer,
        "inspected_by": report.inspected_by,
        "final_verdict": report.final_verdict,
        "submitted_by": report.submitted_by,
        "submitted_at": timestamp_pair(report.submitted_at),
    }


def serialize_report(report: InspectionReport) -> dict:
    return {**serialize_summary(report), "items": report.items}


def get_reports(
    ctx: RequestContext,
    search: str = "",
    verdict: str | None = None,
) -> Ok[list[dict]] | Err:
    """
    Report summaries for the organization, newest first.

    ``search`` matches vehicle registration or driver name, case-insensitively.
    """
    if not ctx.org_id:
        return Ok([])
    if verdict and verdict not in VERDICTS:
        return Err("Verdict filter must be PASS or FAIL.", ErrorKind.INVALID)

    queryset = InspectionReport.objects.filter(organization_id=ctx.org_id).defer("items")
    search = search.strip()
    if search:
        queryset = queryset.filter(
            Q(vehicle_registration__icontains=search) | Q(driver_name__icontains=search)
        )
    if verdict:
        queryset = queryset.filter(final_verdict=verdict)

    try:
        return Ok([serialize_summary(r) for r in queryset.order_by("-submitted_at")])
    except DatabaseError:
        logger.exception("inspection_reports_load_failed", **{"organization.id": ctx.org_id})
        return Err("Could not load reports.")


def get_all_reports_for_export(ctx: RequestContext) -> Ok[list[dict]] | Err:
    """Full reports (with items) for the organization, newest first."""
    if not ctx.org_id:
        return Err("No organization found.", ErrorKind.UNAUTHORIZED)
    try:
        reports = InspectionReport.objects.filter(organization_id=ctx.org_id).order_by("-submitted_at")
        return Ok([serialize_report(r) for r in reports])
    except DatabaseError:
        logger.exception("inspection_export_failed", **{"organization.id": ctx.org_id})
        return Err("Could not load reports for export.")


def get_report_details(ctx: RequestContext, report_id: str) -> Ok[dict] | Err:
    """One report; "not found" is reported separately from load failures."""
    if not ctx.org_id:
        return Err("User is not authenticated.", ErrorKind.UNAUTHORIZED)
    try:
        report = InspectionReport.objects.get(organization_id=ctx.org_id, pk=report_id)
    except (InspectionReport.DoesNotExist, ValidationError):
        return Err("Report not found.", ErrorKind.NOT_FOUND)
    except DatabaseError:
        logger.exception("inspection_report_load_failed", report_id=report_id)
        return Err("Could not load the report.")
    return Ok(serialize_report(report))
