# parkit/utils/clock.py
"""Ticket timestamps are naive UTC so DST changes never reorder in/out times."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)
