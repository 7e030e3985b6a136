"""
dashboard — practice dashboard counters and panels.
"""
from taxdesk.dashboard.schemas import (
    ClientRecord,
    ComplianceItem,
    NoticeRecord,
    StatisticsSnapshot,
    TaskRecord,
)
from taxdesk.dashboard.statistics import compute_snapshot, recent_tasks, upcoming_compliances

__all__ = [
    "ClientRecord",
    "ComplianceItem",
    "NoticeRecord",
    "StatisticsSnapshot",
    "TaskRecord",
    "compute_snapshot",
    "recent_tasks",
    "upcoming_compliances",
]
