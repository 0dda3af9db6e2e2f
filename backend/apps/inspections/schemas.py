"""
Pydantic schemas for inspection report API endpoints.
"""

from ninja import Schema
from pydantic import Field

from apps.checklists.schemas import ChecklistCategorySchema


class TimestampSchema(Schema):
    seconds: int
    nanoseconds: int


class ReportItemSchema(Schema):
    id: str
    name: str
    description: str = ""
    category_id: str
    category_name: str
    status: str = Field(description="Ok, Needs Repair or not ok")
    notes: str = ""


class ReportSummarySchema(Schema):
    id: str
    vehicle_registration: str
    driver_name: str
    current_odometer: int | None
    inspected_by: str
    final_verdict: str
    submitted_by: str
    submitted_at: TimestampSchema


class ReportSchema(ReportSummarySchema):
    items: list[ReportItemSchema]


class SaveReportRequest(Schema):
    """A submitted inspection form."""

    vehicle_registration: str = Field(default="", max_length=50)
    driver_name: str = Field(default="", max_length=255)
    current_odometer: int | str | None = Field(
        default=None,
        description="Stored as an integer; anything non-numeric is stored as null",
    )
    inspected_by: str = Field(default="", max_length=255)
    final_verdict: str = Field(default="", description="PASS or FAIL")
    answers: dict[str, str] = Field(
        default_factory=dict,
        description="Per-item form values keyed '<item_id>_status' and '<item_id>_notes'",
    )
    categories: list[ChecklistCategorySchema] | None = Field(
        default=None,
        description="Checklist the form was rendered from; defaults to the current one",
    )


class SaveReportResponse(Schema):
    message: str
    report: ReportSchema
