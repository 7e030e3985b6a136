"""
schemas.py — Dashboard record and snapshot contracts.

Records mirror the practice database rows but only declare the columns the
aggregator reads. extra='ignore' lets a full row be validated directly:

    ComplianceItem.model_validate(row)

Status and type columns stay plain strings (the database does not constrain
them) and are compared case-sensitively against the enum values below.
"""
from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

_RECORD_CONFIG = ConfigDict(extra="ignore", frozen=True)


# ---------------------------------------------------------------------------
# Enums — well-known status / type values
# ---------------------------------------------------------------------------

class TaskStatus(str, Enum):
    pending = "Pending"
    in_progress = "In Progress"
    completed = "Completed"


class ComplianceStatus(str, Enum):
    pending = "Pending"
    completed = "Completed"
    overdue = "Overdue"


class ComplianceType(str, Enum):
    itr = "ITR"
    gst = "GST"
    tds = "TDS"
    audit = "Audit"


class NoticeStatus(str, Enum):
    received = "Received"
    responded = "Responded"


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

class ClientRecord(BaseModel):
    model_config = _RECORD_CONFIG

    id: Optional[str] = None
    client_name: Optional[str] = None


class TaskRecord(BaseModel):
    model_config = _RECORD_CONFIG

    id: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[datetime] = None


class ComplianceItem(BaseModel):
    """A filing obligation on the compliance calendar."""
    model_config = _RECORD_CONFIG

    id: Optional[str] = None
    title: Optional[str] = None
    compliance_type: str
    due_date: date
    status: Optional[str] = None


class NoticeRecord(BaseModel):
    model_config = _RECORD_CONFIG

    id: Optional[str] = None
    title: Optional[str] = None
    status: Optional[str] = None


# ---------------------------------------------------------------------------
# StatisticsSnapshot — aggregator output
# ---------------------------------------------------------------------------

class StatisticsSnapshot(BaseModel):
    """
    Dashboard counters. Recomputed on every call; no identity, not persisted.

    upcoming_deadlines and overdue_compliances never share an item: an item due
    today is upcoming (0 days left), an item due yesterday is overdue.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    total_clients: int = Field(default=0, ge=0)
    pending_tasks: int = Field(default=0, ge=0)
    upcoming_deadlines: int = Field(default=0, ge=0)
    completed_returns: int = Field(default=0, ge=0)
    pending_notices: int = Field(default=0, ge=0)
    overdue_compliances: int = Field(default=0, ge=0)


__all__ = [
    "TaskStatus",
    "ComplianceStatus",
    "ComplianceType",
    "NoticeStatus",
    "ClientRecord",
    "TaskRecord",
    "ComplianceItem",
    "NoticeRecord",
    "StatisticsSnapshot",
]
