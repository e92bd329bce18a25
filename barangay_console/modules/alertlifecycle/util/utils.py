"""Small helpers for ids and timestamps."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from .constants import AlertDefaults

ID_FORMAT = "%Y%m%d%H%M%S%f"


def now() -> datetime:
    return datetime.now(timezone.utc)


def generate_alert_id(at: datetime) -> str:
    """Time-based id with a random suffix so alerts raised in one tick differ."""
    return f"{at.astimezone(timezone.utc).strftime(ID_FORMAT)}-{uuid.uuid4().hex[:8]}"


def generate_lineage_id() -> str:
    return uuid.uuid4().hex


def parse_iso_datetime(value: str) -> datetime:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_iso_datetime(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def persists_marker(dismiss_count: int) -> str:
    return AlertDefaults.PERSISTS_MARKER.format(number=dismiss_count + 1)
