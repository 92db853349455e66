import logging
from datetime import timedelta
from typing import Iterable, List, Optional

from flockweigh.core.config import settings
from flockweigh.models.weighing import WeighingEvent, WeighingStatus
from flockweigh.services.clock import Moment, resolve_today

logger = logging.getLogger(__name__)


def upcoming_weighings(
    events: Iterable[WeighingEvent],
    lookahead_days: Optional[int] = None,
    now: Optional[Moment] = None,
) -> List[WeighingEvent]:
    """
    Selects pending weighings due within the next `lookahead_days` days.

    The window runs from the day of `now` through `lookahead_days` days later,
    both ends included. The window defaults to UPCOMING_LOOKAHEAD_DAYS from
    settings. Results are ordered by expected date; events due on the same
    day keep their input order. The input is left untouched.

    Raises:
        ValueError: If lookahead_days is negative.
    """
    if lookahead_days is None:
        lookahead_days = settings.UPCOMING_LOOKAHEAD_DAYS
    if lookahead_days < 0:
        raise ValueError(f"lookahead_days cannot be negative, got {lookahead_days}.")

    start = resolve_today(now)
    end = start + timedelta(days=lookahead_days)

    selected = [
        event
        for event in events
        if event.status == WeighingStatus.PENDING and start <= event.expected_date <= end
    ]
    selected.sort(key=lambda event: event.expected_date)

    logger.debug(f"{len(selected)} weighings due between {start} and {end}.")
    return selected
