"""
Tests for the CSV export of inspection reports.
"""

import csv
import io
from datetime import date

from apps.inspections.export import (
    export_filename,
    report_headers,
    report_row,
    write_reports_csv,
)

CATEGORIES = [
    {
        "id": "cab",
        "name": "Cab",
        "icon": "Car",
        "items": [
            {"id": "belt", "name": "Seat belt", "description": ""},
            {"id": "horn", "name": "Horn, audible", "description": ""},
        ],
    },
    {"id": "new", "name": "New", "icon": "Cog", "items": [{"id": "lamp", "name": "Lamp", "description": ""}]},
]

REPORT = {
    "id": "3f1c",
    "vehicle_registration": "KAA001X",
    "driver_name": "John Doe",
    "current_odometer": 120500,
    "final_verdict": "FAIL",
    "submitted_at": {"seconds": 1735787045, "nanoseconds": 0},
    "items": [
        {"id": "belt", "status": "Ok", "notes": ""},
        {"id": "horn", "status": "Needs Repair", "notes": 'Says "meep"'},
        {"id": "gone", "status": "Ok", "notes": "Removed from checklist"},
    ],
}


class TestExport:
    def test_filename(self) -> None:
        assert export_filename(date(2025, 1, 2)) == "vehicle-check-reports-2025-01-02.csv"

    def test_headers_follow_checklist_order(self) -> None:
        assert report_headers(CATEGORIES) == [
            "Report ID",
            "Vehicle Registration",
            "Driver Name",
            "Odometer",
            "Date",
            "Final Verdict",
            "Seat belt - Status",
            "Seat belt - Notes",
            "Horn, audible - Status",
            "Horn, audible - Notes",
            "Lamp - Status",
            "Lamp - Notes",
        ]

    def test_row_values(self) -> None:
        row = report_row(REPORT, CATEGORIES)

        assert row[:6] == ["3f1c", "KAA001X", "John Doe", 120500, "2025-01-02 03:04:05", "FAIL"]
        assert row[6:10] == ["Ok", "", "Needs Repair", 'Says "meep"']

    def test_item_added_after_submission_is_na(self) -> None:
        row = report_row(REPORT, CATEGORIES)
        assert row[10:] == ["N/A", ""]

    def test_missing_odometer_is_blank(self) -> None:
        row = report_row({**REPORT, "current_odometer": None}, CATEGORIES)
        assert row[3] == ""

    def test_csv_quoting_round_trips(self) -> None:
        stream = io.StringIO()
        write_reports_csv(stream, [REPORT, REPORT], CATEGORIES)

        rows = list(csv.reader(io.StringIO(stream.getvalue())))

        assert len(rows) == 3
        assert rows[0][8] == "Horn, audible - Status"
        assert rows[1][9] == 'Says "meep"'
        assert all(len(r) == 12 for r in rows)

    def test_no_reports_writes_header_only(self) -> None:
        stream = io.StringIO()
        write_reports_csv(stream, [], CATEGORIES)

        assert stream.getvalue().count("\n") == 1
