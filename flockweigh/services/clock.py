from datetime import date, datetime, timezone
from typing import Optional, Union

Moment = Union[date, datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def resolve_today(now: Optional[Moment] = None) -> date:
    """Calendar day of `now`, defaulting to the current UTC day."""
    if now is None:
        return utc_now().date()
    if isinstance(now, datetime):
        return now.date()
    return now


def resolve_moment(now: Optional[Moment] = None) -> datetime:
    """Timestamp for `now`; bare dates map to midnight UTC."""
    if now is None:
        return utc_now()
    if isinstance(now, datetime):
        return now
    return datetime.combine(now, datetime.min.time(), tzinfo=timezone.utc)
