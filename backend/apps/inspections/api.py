"""
Inspection report API endpoints.

Any organization member can submit a report; listing, details and export
are for organization admins.
"""

from django.http import HttpResponse
from django.utils import timezone
from ninja import Router

from apps.checklists.services import load_checklist
from apps.core.auth import request_context
from apps.core.gate import Surface, require_surface
from apps.core.results import unwrap
from apps.core.schemas import ErrorResponse, RedirectResponse
from apps.core.types import AuthenticatedHttpRequest
from apps.inspections.export import export_filename, write_reports_csv
from apps.inspections.schemas import (
    ReportSchema,
    ReportSummarySchema,
    SaveReportRequest,
    SaveReportResponse,
)
from apps.inspections.services import (
    get_all_reports_for_export,
    get_report_details,
    get_reports,
    save_inspection_report,
)

router = Router(tags=["reports"])

ERRORS = {
    303: RedirectResponse,
    400: ErrorResponse,
    401: ErrorResponse,
    403: ErrorResponse,
    404: ErrorResponse,
    500: ErrorResponse,
}


@router.post(
    "",
    response={201: SaveReportResponse, **ERRORS},
    operation_id="saveInspectionReport",
    summary="Submit an inspection report",
)
@require_surface(Surface.ORG_MEMBER)
def save_report(
    request: AuthenticatedHttpRequest, payload: SaveReportRequest
) -> tuple[int, SaveReportResponse]:
    """
    Store a report. Items come from ``payload.categories`` when given,
    otherwise from the organization's current checklist.
    """
    ctx = request_context(request)
    if payload.categories is not None:
        categories = [c.model_dump() for c in payload.categories]
    else:
        categories = unwrap(load_checklist(ctx))

    form_data = {
        **payload.answers,
        "vehicle_registration": payload.vehicle_registration,
        "driver_name": payload.driver_name,
        "current_odometer": payload.current_odometer,
        "inspected_by": payload.inspected_by,
        "final_verdict": payload.final_verdict,
    }
    result = save_inspection_report(ctx, form_data, categories)
    report = unwrap(result)
    return 201, SaveReportResponse(message=result.message, report=report)


@router.get(
    "",
    response={200: list[ReportSummarySchema], **ERRORS},
    operation_id="listInspectionReports",
    summary="List reports, newest first",
)
@require_surface(Surface.ORG_ADMIN)
def list_reports(
    request: AuthenticatedHttpRequest,
    search: str = "",
    verdict: str | None = None,
) -> list[dict]:
    """Filter by vehicle/driver text and by PASS/FAIL verdict."""
    return unwrap(get_reports(request_context(request), search=search, verdict=verdict))


@router.get(
    "/export",
    response={200: list[ReportSchema], **ERRORS},
    operation_id="exportInspectionReports",
    summary="All reports with items",
)
@require_surface(Surface.ORG_ADMIN)
def export_reports(request: AuthenticatedHttpRequest) -> list[dict]:
    return unwrap(get_all_reports_for_export(request_context(request)))


@router.get(
    "/export.csv",
    response={200: None, **ERRORS},
    operation_id="exportInspectionReportsCsv",
    summary="Download all reports as CSV",
)
@require_surface(Surface.ORG_ADMIN)
def export_reports_csv(request: AuthenticatedHttpRequest) -> HttpResponse:
    """One row per report; a Status and Notes column per checklist item."""
    ctx = request_context(request)
    reports = unwrap(get_all_reports_for_export(ctx))
    categories = unwrap(load_checklist(ctx))

    response = HttpResponse(content_type="text/csv; charset=utf-8")
    response["Content-Disposition"] = (
        f'attachment; filename="{export_filename(timezone.now().date())}"'
    )
    write_reports_csv(response, reports, categories)
    return response


@router.get(
    "/{report_id}",
    response={200: ReportSchema, **ERRORS},
    operation_id="getInspectionReport",
    summary="Get one report",
)
@require_surface(Surface.ORG_ADMIN)
def get_report(request: AuthenticatedHttpRequest, report_id: str) -> dict:
    return unwrap(get_report_details(request_context(request), report_id))
