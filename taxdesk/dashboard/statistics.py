"""
TaxDesk Statistics Aggregator
Folds client / task / compliance / notice records into dashboard counters.
Pure functions. No I/O. No clock reads — the caller passes `today`.

Date windows (calendar days, `today` inclusive):
  upcoming : status == "Pending" and 0 <= (due_date - today).days <= window
  overdue  : status == "Pending" and due_date < today
An item due today is upcoming, never overdue.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Iterable, List, Optional

from taxdesk.config import settings
from taxdesk.dashboard.schemas import (
    ClientRecord,
    ComplianceItem,
    ComplianceStatus,
    ComplianceType,
    NoticeRecord,
    NoticeStatus,
    StatisticsSnapshot,
    TaskRecord,
    TaskStatus,
)

logger = logging.getLogger(__name__)


# ===========================================================================
# INTERNAL HELPERS
# ===========================================================================

def _as_date(today: date) -> date:
    """Reduce a datetime to its calendar date; plain dates pass through."""
    return today.date() if isinstance(today, datetime) else today


def _resolve_window(window_days: Optional[int]) -> int:
    return settings.upcoming_window_days if window_days is None else window_days


def _days_until(item: ComplianceItem, today: date) -> int:
    return (item.due_date - today).days


def _is_pending(item: ComplianceItem) -> bool:
    return item.status == ComplianceStatus.pending.value


def _is_upcoming(item: ComplianceItem, today: date, window_days: int) -> bool:
    return _is_pending(item) and 0 <= _days_until(item, today) <= window_days


def _is_overdue(item: ComplianceItem, today: date) -> bool:
    return _is_pending(item) and item.due_date < today


def _created_at_utc(task: TaskRecord) -> datetime:
    created = task.created_at
    return created.replace(tzinfo=timezone.utc) if created.tzinfo is None else created


# ===========================================================================
# SNAPSHOT — public API
# ===========================================================================

def compute_snapshot(
    clients: Iterable[ClientRecord],
    tasks: Iterable[TaskRecord],
    compliance_items: Iterable[ComplianceItem],
    notices: Iterable[NoticeRecord],
    today: date,
    window_days: Optional[int] = None,
) -> StatisticsSnapshot:
    """
    Compute the six dashboard counters.

    Args:
        clients, tasks, compliance_items, notices: Records to count. Any
            iterable is accepted; each is consumed once.
        today: Reference calendar date. A datetime is truncated to its date.
        window_days: Upcoming-deadline window in days. Defaults to
            settings.upcoming_window_days (7).

    Returns:
        A fresh StatisticsSnapshot. Inputs are never mutated.
    """
    today = _as_date(today)
    window = _resolve_window(window_days)
    items = list(compliance_items)

    snapshot = StatisticsSnapshot(
        total_clients=sum(1 for _ in clients),
        pending_tasks=sum(1 for t in tasks if t.status == TaskStatus.pending.value),
        upcoming_deadlines=sum(1 for c in items if _is_upcoming(c, today, window)),
        completed_returns=sum(
            1 for c in items
            if c.compliance_type == ComplianceType.itr.value
            and c.status == ComplianceStatus.completed.value
        ),
        pending_notices=sum(1 for n in notices if n.status == NoticeStatus.received.value),
        overdue_compliances=sum(1 for c in items if _is_overdue(c, today)),
    )

    logger.debug(
        "Dashboard snapshot today=%s window=%d clients=%d pending_tasks=%d "
        "upcoming=%d overdue=%d completed_returns=%d pending_notices=%d",
        today.isoformat(), window,
        snapshot.total_clients, snapshot.pending_tasks,
        snapshot.upcoming_deadlines, snapshot.overdue_compliances,
        snapshot.completed_returns, snapshot.pending_notices,
    )
    return snapshot


# ===========================================================================
# DASHBOARD PANELS
# ===========================================================================

def upcoming_compliances(
    compliance_items: Iterable[ComplianceItem],
    today: date,
    window_days: Optional[int] = None,
) -> List[ComplianceItem]:
    """
    Pending items due within the window, soonest first.
    Same membership rule as StatisticsSnapshot.upcoming_deadlines; sort is
    stable so items due the same day keep their input order.
    """
    today = _as_date(today)
    window = _resolve_window(window_days)
    upcoming = [c for c in compliance_items if _is_upcoming(c, today, window)]
    return sorted(upcoming, key=lambda c: c.due_date)


def recent_tasks(tasks: Iterable[TaskRecord], limit: Optional[int] = None) -> List[TaskRecord]:
    """
    Newest tasks first by created_at, at most `limit` (settings.recent_tasks_limit
    when omitted; a negative limit returns nothing). Tasks without created_at
    go last. Naive timestamps are read as UTC so they sort against aware ones.
    """
    limit = settings.recent_tasks_limit if limit is None else max(limit, 0)
    tasks = list(tasks)
    dated = [t for t in tasks if t.created_at is not None]
    undated = [t for t in tasks if t.created_at is None]
    return (sorted(dated, key=_created_at_utc, reverse=True) + undated)[:limit]


__all__ = [
    "compute_snapshot",
    "upcoming_compliances",
    "recent_tasks",
]
