import logging
from datetime import date, timedelta
from typing import List, Optional

from flockweigh.core.config import settings
from flockweigh.data.weighing_presets import (
    REFERENCE_BREED,
    SCHEDULED_WEEKS,
    ideal_weight_grams,
)
from flockweigh.models.batch import Batch
from flockweigh.models.weighing import WeighingEvent, WeighingStatus, weighing_id
from flockweigh.services.clock import Moment, resolve_moment

logger = logging.getLogger(__name__)


def generate_schedule(
    batch_id: str,
    entry_date: date,
    breed: Optional[str] = None,
    now: Optional[Moment] = None,
) -> List[WeighingEvent]:
    """
    Builds the full weighing calendar for a batch.

    One pending event is produced per scheduled week, in ascending week order.
    Event ids depend only on the batch id and the week, so regenerating a
    schedule yields the same identities.

    Args:
        batch_id: Identifier of the owning batch.
        entry_date: Day the birds entered the farm.
        breed: Breed label. Every breed is weighed against the reference
            curve; defaults to the configured breed.
        now: Generation timestamp stamped on each event. Defaults to now (UTC).

    Raises:
        ValueError: If batch_id is empty.

    Returns:
        The list of weighing events for the batch.
    """
    if not batch_id:
        raise ValueError("batch_id must not be empty.")

    breed = breed or settings.DEFAULT_BREED
    if breed != REFERENCE_BREED:
        logger.info(
            f"No dedicated weight curve for breed '{breed}'; batch '{batch_id}' "
            f"uses the {REFERENCE_BREED} reference curve."
        )

    created_at = resolve_moment(now)
    events = []
    for week in SCHEDULED_WEEKS:
        age_in_days = week * 7
        events.append(
            WeighingEvent(
                id=weighing_id(batch_id, week),
                batch_id=batch_id,
                week=week,
                age_in_days=age_in_days,
                expected_date=entry_date + timedelta(days=age_in_days),
                ideal_weight_grams=ideal_weight_grams(week),
                status=WeighingStatus.PENDING,
                created_at=created_at,
            )
        )

    logger.info(
        f"Generated {len(events)} weighings for batch '{batch_id}' entered on {entry_date}."
    )
    return events


def generate_schedule_for_batch(
    batch: Batch, now: Optional[Moment] = None
) -> List[WeighingEvent]:
    return generate_schedule(batch.id, batch.entry_date, batch.breed, now=now)
