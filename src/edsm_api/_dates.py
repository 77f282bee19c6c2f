"""Date-time codec for EDSM timestamps.

EDSM reports times as ``YYYY-MM-DD HH:MM:SS`` in UTC rather than ISO 8601,
so fields carrying them need a dedicated parse/format pair.
"""

from __future__ import annotations

import re
from datetime import datetime, timezone

EDSM_DATETIME_FORMAT: str = "%Y-%m-%d %H:%M:%S"
"""``strptime`` pattern of EDSM timestamps."""

# strptime accepts unpadded fields, the wire format never has them
_EDSM_DATETIME_RE = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", re.ASCII)


def parse_edsm_datetime(text: str) -> datetime:
    """Parse an EDSM timestamp into a timezone-aware UTC datetime.

    Args:
        text: Timestamp string, e.g. ``"2020-04-18 14:31:12"``.

    Returns:
        Aware :class:`~datetime.datetime` in UTC.

    Raises:
        TypeError: If *text* is not a string.
        ValueError: If *text* does not match the EDSM format.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected timestamp string, got {type(text).__name__}")
    if _EDSM_DATETIME_RE.fullmatch(text) is None:
        raise ValueError(f"timestamp {text!r} does not match format 'YYYY-MM-DD HH:MM:SS'")
    return datetime.strptime(text, EDSM_DATETIME_FORMAT).replace(tzinfo=timezone.utc)


def format_edsm_datetime(dt: datetime) -> str:
    """Format a datetime as an EDSM timestamp.

    Naive datetimes are taken to be UTC already.
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime(EDSM_DATETIME_FORMAT)
