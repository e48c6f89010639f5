"""Display helpers for job cards."""
from __future__ import annotations

from datetime import datetime, timezone

JOB_TYPE_LABELS: dict[str, str] = {
    "full-time": "Full Time",
    "part-time": "Part Time",
    "contract": "Contract",
    "remote": "Remote",
}


def _parse_date(value: str) -> datetime:
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def time_ago(date_string: str, now: datetime | None = None) -> str:
    """"Today", "1 day ago" or "N days ago" for an ISO date string."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    days = (now - _parse_date(date_string)).days
    if days <= 0:
        return "Today"
    if days == 1:
        return "1 day ago"
    return f"{days} days ago"


def job_type_display(job_type: str) -> str:
    return JOB_TYPE_LABELS.get(job_type, job_type)
