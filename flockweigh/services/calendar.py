from typing import Optional

from flockweigh.data.weighing_presets import phase_for_week
from flockweigh.models.weighing import WeighingEvent, WeighingStatus
from flockweigh.schemas.calendar_entry import CalendarEntry
from flockweigh.services.clock import Moment, resolve_today
from flockweigh.services.deviation import CRITICAL, classify_deviation, event_deviation

NEUTRAL_COLOR = "#6B7280"
OVERDUE_COLOR = CRITICAL.color


def effective_status(event: WeighingEvent, now: Optional[Moment] = None) -> WeighingStatus:
    """
    Status of a weighing as seen on the day of `now`.

    A pending weighing whose expected date has passed is overdue.
    """
    if event.status == WeighingStatus.COMPLETED:
        return WeighingStatus.COMPLETED
    if event.expected_date < resolve_today(now):
        return WeighingStatus.OVERDUE
    return WeighingStatus.PENDING


def event_color(event: WeighingEvent, now: Optional[Moment] = None) -> str:
    status = effective_status(event, now)
    if status == WeighingStatus.OVERDUE:
        return OVERDUE_COLOR

    deviation = event_deviation(event)
    if deviation is not None:
        return classify_deviation(deviation).color
    return NEUTRAL_COLOR


def to_calendar_entry(event: WeighingEvent, now: Optional[Moment] = None) -> CalendarEntry:
    return CalendarEntry(
        id=event.id,
        batch_id=event.batch_id,
        date=event.expected_date,
        title=f"Weighing - Week {event.week}",
        description=f"Ideal: {event.ideal_weight_grams}g • {event.age_in_days} days",
        status=effective_status(event, now),
        color=event_color(event, now),
        phase=phase_for_week(event.week),
    )
