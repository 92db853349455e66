import logging
from typing import Optional

from flockweigh.models.weighing import WeighingEvent, WeighingStatus
from flockweigh.schemas.deviation import DeviationTier
from flockweigh.schemas.weighing_request import WeighingRecordCreate
from flockweigh.services.clock import Moment, resolve_moment
from flockweigh.services.deviation import classify_deviation, deviation_percent

logger = logging.getLogger(__name__)


def record_weighing(
    event: WeighingEvent,
    record: WeighingRecordCreate,
    now: Optional[Moment] = None,
) -> WeighingEvent:
    """
    Applies a measurement to a scheduled weighing.

    Returns a completed copy; the given event is not modified.
    Recording over an already completed weighing replaces its measurement.
    """
    timestamp = resolve_moment(now)
    if event.status == WeighingStatus.COMPLETED:
        logger.info(f"Overwriting recorded measurement for weighing '{event.id}'.")

    updated = event.model_copy(
        update={
            "status": WeighingStatus.COMPLETED,
            "actual_weight_grams": record.actual_weight_grams,
            "measured_at": record.measured_at or timestamp,
            "sampled_birds": record.sampled_birds,
            "responsible": record.responsible,
            "notes": record.notes,
            "updated_at": timestamp,
        }
    )

    deviation = deviation_percent(record.actual_weight_grams, event.ideal_weight_grams)
    classification = classify_deviation(deviation)
    if classification.tier in (DeviationTier.ATTENTION, DeviationTier.CRITICAL):
        logger.warning(
            f"Batch '{event.batch_id}' week {event.week} weighed {record.actual_weight_grams}g "
            f"against {event.ideal_weight_grams}g ideal ({deviation:+.1f}%, {classification.tier.value})."
        )
    else:
        logger.info(
            f"Recorded weighing '{event.id}': {deviation:+.1f}% ({classification.tier.value})."
        )
    return updated
