"""
Demo practice records for dashboard tests.

Rows are shaped like the practice database tables (extra columns included) so
the record models are exercised with extra='ignore'. Every compliance due date
is relative to DEMO_TODAY.
"""
from __future__ import annotations

from datetime import date, timedelta
from typing import Any

DEMO_TODAY = date(2024, 12, 20)


def _due(days: int) -> str:
    return (DEMO_TODAY + timedelta(days=days)).isoformat()


CLIENT_ROWS: list[dict[str, Any]] = [
    dict(id="1", client_name="John Doe", pan="ABCDE1234F", user_id="demo-user"),
    dict(id="2", client_name="Jane Smith", pan="FGHIJ5678K", user_id="demo-user"),
    dict(id="3", client_name="ABC Pvt Ltd", pan="KLMNO9012P", user_id="demo-user"),
]

TASK_ROWS: list[dict[str, Any]] = [
    dict(id="1", title="Complete ITR Filing for John Doe", status="Pending",
         priority="High", created_at="2024-01-15T09:00:00", task_type="ITR Filing"),
    dict(id="2", title="Audit Report for Jane Smith", status="In Progress",
         priority="Medium", created_at="2024-01-20T09:00:00", task_type="Audit"),
    dict(id="3", title="TDS Return Filing", status="Completed",
         priority="High", created_at="2024-01-10T09:00:00", task_type="TDS Return"),
    dict(id="4", title="GST reconciliation", status="Pending",
         priority="Low", created_at="2024-02-01T09:00:00", task_type="Other"),
]

COMPLIANCE_ROWS: list[dict[str, Any]] = [
    # upcoming: due today, pending
    dict(id="1", title="GST Return Filing", compliance_type="GST",
         due_date=_due(0), status="Pending", priority="High"),
    # upcoming: due in 5 days, pending
    dict(id="2", title="ITR Filing Deadline", compliance_type="ITR",
         due_date=_due(5), status="Pending", priority="High"),
    # neither: completed
    dict(id="3", title="Audit Report Submission", compliance_type="Audit",
         due_date=_due(10), status="Completed", priority="Medium"),
    # overdue: due yesterday, pending
    dict(id="4", title="TDS Q2 Return", compliance_type="TDS",
         due_date=_due(-1), status="Pending", priority="High"),
    # completed ITR return
    dict(id="5", title="ITR AY 2024-25", compliance_type="ITR",
         due_date=_due(-30), status="Completed", priority="High"),
    # upcoming boundary: exactly 7 days out
    dict(id="6", title="Advance tax instalment", compliance_type="ITR",
         due_date=_due(7), status="Pending", priority="Medium"),
    # outside window: 8 days out
    dict(id="7", title="GST annual return", compliance_type="GST",
         due_date=_due(8), status="Pending", priority="Low"),
]

NOTICE_ROWS: list[dict[str, Any]] = [
    dict(id="1", title="Income Tax Notice", status="Received", client_id="1"),
    dict(id="2", title="GST Notice", status="Responded", client_id="2"),
]

# Counters expected for the rows above at DEMO_TODAY with the 7-day window
DEMO_EXPECTED: dict[str, int] = dict(
    total_clients=3,
    pending_tasks=2,
    upcoming_deadlines=3,     # ids 1, 2, 6
    completed_returns=1,      # id 5
    pending_notices=1,
    overdue_compliances=1,    # id 4
)
