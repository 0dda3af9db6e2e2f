"""
CSV export of inspection reports.

Columns are the fixed report fields followed by a Status and a Notes column
for every item in the organization's current checklist, in checklist order.
"""

import csv
from collections.abc import Sequence
from datetime import UTC, date, datetime
from typing import Any, Protocol

FIXED_HEADERS = [
    "Report ID",
    "Vehicle Registration",
    "Driver Name",
    "Odometer",
    "Date",
    "Final Verdict",
]
MISSING_STATUS = "N/A"


class _Writable(Protocol):
    def write(self, s: str, /) -> Any: ...


def export_filename(today: date) -> str:
    return f"vehicle-check-reports-{today.isoformat()}.csv"


def _checklist_items(categories: Sequence[dict]) -> list[dict]:
    return [item for category in categories for item in category.get("items", [])]


def report_headers(categories: Sequence[dict]) -> list[str]:
    headers = list(FIXED_HEADERS)
    for item in _checklist_items(categories):
        headers += [f"{item['name']} - Status", f"{item['name']} - Notes"]
    return headers


def _format_submitted_at(submitted_at: dict[str, int]) -> str:
    return datetime.fromtimestamp(submitted_at["seconds"], tz=UTC).strftime("%Y-%m-%d %H:%M:%S")


def report_row(report: dict, categories: Sequence[dict]) -> list[Any]:
    """
    One CSV row. Checklist items the report has no entry for (added after it
    was submitted) export as ``N/A`` with empty notes.
    """
    answers = {item["id"]: item for item in report.get("items", [])}
    odometer = report.get("current_odometer")
    row: list[Any] = [
        report["id"],
        report["vehicle_registration"],
        report["driver_name"],
        "" if odometer is None else odometer,
        _format_submitted_at(report["submitted_at"]),
        report["final_verdict"],
    ]
    for item in _checklist_items(categories):
        answer = answers.get(item["id"])
        row.append((answer or {}).get("status") or MISSING_STATUS)
        row.append((answer or {}).get("notes") or "")
    return row


def write_reports_csv(stream: _Writable, reports: Sequence[dict], categories: Sequence[dict]) -> None:
    """Write the header row and one row per report to a file-like object."""
    writer = csv.writer(stream)
    writer.writerow(report_headers(categories))
    writer.writerows(report_row(report, categories) for report in reports)
