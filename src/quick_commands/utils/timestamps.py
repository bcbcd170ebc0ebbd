"""Timestamp formatting for payloads and file names."""

import re
from datetime import datetime, timezone


def iso_timestamp(moment: datetime | None = None) -> str:
    """Format as UTC ISO 8601 with millisecond precision and a ``Z`` suffix."""
    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def filename_timestamp(moment: datetime | None = None) -> str:
    """ISO timestamp with ``:`` and ``.`` replaced so it is safe in file names."""
    return re.sub(r"[:.]", "-", iso_timestamp(moment))
