from typing import Iterable, Optional

from flockweigh.models.weighing import WeighingEvent, WeighingStatus
from flockweigh.schemas.batch_summary import BatchWeighingSummary
from flockweigh.services.calendar import effective_status
from flockweigh.services.clock import Moment
from flockweigh.services.deviation import classify_deviation, event_deviation


def summarize_batch(
    batch_id: str, events: Iterable[WeighingEvent], now: Optional[Moment] = None
) -> BatchWeighingSummary:
    """
    Counts a batch's weighings by effective status and reports the most
    advanced recorded weighing against the ideal curve.

    Events belonging to other batches are ignored.
    """
    summary = BatchWeighingSummary(batch_id=batch_id)
    latest: Optional[WeighingEvent] = None

    for event in events:
        if event.batch_id != batch_id:
            continue
        summary.total_events += 1
        status = effective_status(event, now)
        if status == WeighingStatus.COMPLETED:
            summary.completed_events += 1
        elif status == WeighingStatus.OVERDUE:
            summary.overdue_events += 1
        else:
            summary.pending_events += 1

        if event_deviation(event) is not None and (latest is None or event.week > latest.week):
            latest = event

    if latest is not None:
        deviation = event_deviation(latest)
        summary.latest_week = latest.week
        summary.latest_actual_weight_grams = latest.actual_weight_grams
        summary.latest_ideal_weight_grams = latest.ideal_weight_grams
        summary.latest_deviation_percent = deviation
        summary.latest_tier = classify_deviation(deviation).tier

    return summary
