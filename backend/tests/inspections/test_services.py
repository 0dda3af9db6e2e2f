"""
Tests for inspection report services.
"""

from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from django.db import DatabaseError

from apps.checklists.defaults import default_checklist
from apps.checklists.services import set_checklist
from apps.core.auth import RequestContext
from apps.core.results import Err, ErrorKind, Ok
from apps.inspections.models import InspectionReport
from apps.inspections.services import (
    SAVED_MESSAGE,
    build_report_items,
    coerce_odometer,
    get_all_reports_for_export,
    get_report_details,
    get_reports,
    save_inspection_report,
    timestamp_pair,
)
from tests.accounts.factories import OrganizationFactory
from tests.conftest import context_for
from tests.inspections.factories import InspectionReportFactory

CATEGORIES = [
    {
        "id": "cab",
        "name": "Cab",
        "icon": "Car",
        "items": [
            {"id": "belt", "name": "Seat belt", "description": "Latches"},
            {"id": "horn", "name": "Horn", "description": ""},
        ],
    },
    {
        "id": "trailer",
        "name": "Trailer",
        "icon": "Trailer",
        "items": [{"id": "axles", "name": "Axles", "description": "At least 2"}],
    },
]


def form(**overrides) -> dict:
    data = {
        "vehicle_registration": "KAA001X",
        "driver_name": "John Doe",
        "current_odometer": "120,500",
        "inspected_by": "jane roe",
        "final_verdict": "PASS",
        "belt_status": "Ok",
        "belt_notes": "",
        "horn_status": "Needs Repair",
        "horn_notes": "Weak",
    }
    data.update(overrides)
    return data


class TestHelpers:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (120500, 120500),
            ("120500", 120500),
            (" 1,024 ", 1024),
            ("abc", None),
            ("", None),
            (None, None),
            (True, None),
            (str(2**63 - 1), 2**63 - 1),
            ("99999999999999999999999", None),
            (2**64, None),
        ],
    )
    def test_coerce_odometer(self, value, expected) -> None:
        assert coerce_odometer(value) == expected

    def test_timestamp_pair(self) -> None:
        ts = datetime(2025, 1, 2, 3, 4, 5, 678901, tzinfo=UTC)
        assert timestamp_pair(ts) == {"seconds": int(ts.timestamp()), "nanoseconds": 678901000}

    def test_build_report_items_covers_every_item_in_order(self) -> None:
        items = build_report_items(form(), CATEGORIES)

        assert [i["id"] for i in items] == ["belt", "horn", "axles"]
        assert items[1] == {
            "id": "horn",
            "name": "Horn",
            "description": "",
            "category_id": "cab",
            "category_name": "Cab",
            "status": "Needs Repair",
            "notes": "Weak",
        }

    def test_unanswered_item_defaults_to_not_ok(self) -> None:
        items = build_report_items(form(), CATEGORIES)

        assert items[2]["status"] == "not ok"
        assert items[2]["notes"] == ""

    def test_values_are_stringified(self) -> None:
        items = build_report_items(form(belt_notes=42), CATEGORIES)
        assert items[0]["notes"] == "42"


@pytest.mark.django_db
class TestSaveInspectionReport:
    def test_saves_snapshot(self, member) -> None:
        result = save_inspection_report(context_for(member), form(), CATEGORIES)

        assert isinstance(result, Ok)
        assert result.message == SAVED_MESSAGE
        report = InspectionReport.objects.get(id=result.data["id"])
        assert report.organization_id == member.organization.stytch_org_id
        assert report.current_odometer == 120500
        assert report.inspected_by == "JANE ROE"
        assert report.submitted_by == str(member.user.pk)
        assert len(report.items) == 3

    def test_snapshot_survives_checklist_edits(self, member) -> None:
        ctx = context_for(member)
        result = save_inspection_report(ctx, form(), CATEGORIES)
        set_checklist(ctx.org_id, [{"id": "cab", "name": "Cabin", "icon": "Car", "items": []}])

        report = InspectionReport.objects.get(id=result.data["id"])
        assert [i["name"] for i in report.items] == ["Seat belt", "Horn", "Axles"]
        assert report.items[0]["category_name"] == "Cab"

    def test_non_numeric_odometer_stored_as_null(self, member) -> None:
        result = save_inspection_report(context_for(member), form(current_odometer="n/a"), CATEGORIES)
        assert result.data["current_odometer"] is None

    def test_out_of_range_odometer_stored_as_null(self, member) -> None:
        result = save_inspection_report(
            context_for(member), form(current_odometer="99999999999999999999999"), CATEGORIES
        )

        assert isinstance(result, Ok)
        assert InspectionReport.objects.get(id=result.data["id"]).current_odometer is None

    def test_requires_organization(self) -> None:
        result = save_inspection_report(RequestContext(user_id="1"), form(), CATEGORIES)

        assert result.kind == ErrorKind.UNAUTHORIZED
        assert result.message == "User is not authenticated or does not belong to an organization."

    @pytest.mark.parametrize(
        ("overrides", "message"),
        [
            ({"vehicle_registration": ""}, "Vehicle registration is required."),
            ({"driver_name": "  "}, "Driver name is required."),
            ({"final_verdict": ""}, "Final verdict is required."),
            ({"final_verdict": "MAYBE"}, "Final verdict must be PASS or FAIL."),
            ({"belt_status": "Broken"}, "Invalid status for Seat belt."),
            ({"horn_notes": "x" * 201}, "Notes for Horn must be 200 characters or fewer."),
        ],
    )
    def test_validation(self, member, overrides: dict, message: str) -> None:
        result = save_inspection_report(context_for(member), form(**overrides), CATEGORIES)

        assert isinstance(result, Err)
        assert result.kind == ErrorKind.INVALID
        assert result.message == message
        assert InspectionReport.objects.count() == 0

    def test_notes_at_limit_accepted(self, member) -> None:
        result = save_inspection_report(context_for(member), form(horn_notes="x" * 200), CATEGORIES)
        assert isinstance(result, Ok)

    def test_database_error(self, member) -> None:
        with patch.object(InspectionReport.objects, "create", side_effect=DatabaseError("down")):
            result = save_inspection_report(context_for(member), form(), CATEGORIES)

        assert result.message == "An unknown error occurred while saving the report."

    def test_default_checklist_has_39_entries(self, member) -> None:
        result = save_inspection_report(context_for(member), form(), default_checklist())
        assert len(result.data["items"]) == 39


@pytest.mark.django_db
class TestGetReports:
    def test_newest_first_and_scoped(self, admin_member) -> None:
        org = admin_member.organization
        older = InspectionReportFactory.create(organization=org)
        newer = InspectionReportFactory.create(organization=org)
        InspectionReportFactory.create()
        InspectionReport.objects.filter(id=older.id).update(submitted_at=datetime(2024, 1, 1, tzinfo=UTC))

        result = get_reports(context_for(admin_member))

        assert [r["id"] for r in result.data] == [str(newer.id), str(older.id)]
        assert "items" not in result.data[0]

    def test_search_matches_vehicle_or_driver(self, admin_member) -> None:
        org = admin_member.organization
        InspectionReportFactory.create(organization=org, vehicle_registration="KDA111A", driver_name="Musa")
        InspectionReportFactory.create(organization=org, vehicle_registration="KDB222B", driver_name="Ada Kda")
        InspectionReportFactory.create(organization=org, vehicle_registration="KDC333C", driver_name="Bisi")

        result = get_reports(context_for(admin_member), search="kda")

        assert sorted(r["vehicle_registration"] for r in result.data) == ["KDA111A", "KDB222B"]

    def test_verdict_filter(self, admin_member) -> None:
        org = admin_member.organization
        InspectionReportFactory.create(organization=org, final_verdict="PASS")
        InspectionReportFactory.create(organization=org, final_verdict="FAIL")

        result = get_reports(context_for(admin_member), verdict="FAIL")

        assert [r["final_verdict"] for r in result.data] == ["FAIL"]

    def test_bad_verdict_filter(self, admin_member) -> None:
        assert get_reports(context_for(admin_member), verdict="MAYBE").kind == ErrorKind.INVALID

    def test_no_org_returns_empty(self) -> None:
        assert get_reports(RequestContext(user_id="1")).data == []


@pytest.mark.django_db
class TestExportAndDetails:
    def test_export_includes_items(self, admin_member) -> None:
        InspectionReportFactory.create(organization=admin_member.organization)

        result = get_all_reports_for_export(context_for(admin_member))

        assert len(result.data) == 1
        assert len(result.data[0]["items"]) == 2

    def test_export_requires_org(self) -> None:
        assert get_all_reports_for_export(RequestContext(user_id="1")).kind == ErrorKind.UNAUTHORIZED

    def test_export_database_error(self, admin_member) -> None:
        with patch.object(InspectionReport.objects, "filter", side_effect=DatabaseError("down")):
            result = get_all_reports_for_export(context_for(admin_member))

        assert result.message == "Could not load reports for export."

    def test_details(self, admin_member) -> None:
        report = InspectionReportFactory.create(organization=admin_member.organization)

        result = get_report_details(context_for(admin_member), str(report.id))

        assert result.data["id"] == str(report.id)
        assert result.data["submitted_at"]["seconds"] == int(report.submitted_at.timestamp())

    def test_details_of_other_org_is_not_found(self, admin_member) -> None:
        report = InspectionReportFactory.create(organization=OrganizationFactory.create())

        result = get_report_details(context_for(admin_member), str(report.id))

        assert result.kind == ErrorKind.NOT_FOUND
        assert result.message == "Report not found."

    def test_details_malformed_id(self, admin_member) -> None:
        assert get_report_details(context_for(admin_member), "nope").kind == ErrorKind.NOT_FOUND
