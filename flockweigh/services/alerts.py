import logging
from typing import Iterable, List, Optional

from flockweigh.models.alert import AlertPriority, AlertType, WeighingAlert
from flockweigh.models.weighing import WeighingEvent, WeighingStatus
from flockweigh.services.calendar import effective_status
from flockweigh.services.clock import Moment, resolve_moment
from flockweigh.services.deviation import event_deviation

logger = logging.getLogger(__name__)

OFF_TARGET_THRESHOLD = 10.0
CRITICAL_THRESHOLD = 20.0


def build_weighing_alerts(
    events: Iterable[WeighingEvent], now: Optional[Moment] = None
) -> List[WeighingAlert]:
    """
    Raises alerts for overdue weighings and for recorded weights that stray
    more than 10% from the ideal curve (critical above 20%).
    """
    created_at = resolve_moment(now)
    alerts: List[WeighingAlert] = []

    for event in events:
        if effective_status(event, now) == WeighingStatus.OVERDUE:
            alerts.append(
                WeighingAlert(
                    id=f"alert-weighing-{event.id}",
                    batch_id=event.batch_id,
                    event_id=event.id,
                    type=AlertType.OVERDUE_WEIGHING,
                    priority=AlertPriority.MEDIUM,
                    title=f"Weighing week {event.week} overdue",
                    description=f"Expected on {event.expected_date:%d/%m/%Y}",
                    created_at=created_at,
                )
            )

        deviation = event_deviation(event)
        if deviation is None:
            continue
        magnitude = abs(deviation)
        if magnitude > OFF_TARGET_THRESHOLD:
            priority = (
                AlertPriority.CRITICAL if magnitude > CRITICAL_THRESHOLD else AlertPriority.HIGH
            )
            alerts.append(
                WeighingAlert(
                    id=f"alert-weight-{event.id}",
                    batch_id=event.batch_id,
                    event_id=event.id,
                    type=AlertType.WEIGHT_OFF_TARGET,
                    priority=priority,
                    title=f"Weight off target - Week {event.week}",
                    description=(
                        f"Deviation of {magnitude:.1f}% "
                        f"(Actual: {event.actual_weight_grams:g}g, Ideal: {event.ideal_weight_grams}g)"
                    ),
                    created_at=created_at,
                )
            )

    logger.debug(f"Built {len(alerts)} weighing alerts.")
    return alerts
