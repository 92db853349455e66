import math
from typing import Optional

from flockweigh.models.weighing import WeighingEvent, WeighingStatus
from flockweigh.schemas.deviation import DeviationClassification, DeviationTier

EXCELLENT = DeviationClassification(
    tier=DeviationTier.EXCELLENT,
    color="#10B981",
    description="Weight within ideal range",
)
GOOD = DeviationClassification(
    tier=DeviationTier.GOOD,
    color="#F59E0B",
    description="Small acceptable deviation",
)
ATTENTION = DeviationClassification(
    tier=DeviationTier.ATTENTION,
    color="#F97316",
    description="Deviation requires attention",
)
CRITICAL = DeviationClassification(
    tier=DeviationTier.CRITICAL,
    color="#EF4444",
    description="Critical deviation - immediate action",
)

# Inclusive upper bounds on the absolute deviation, checked in order.
DEVIATION_THRESHOLDS = (
    (5.0, EXCELLENT),
    (10.0, GOOD),
    (20.0, ATTENTION),
)


def deviation_percent(actual_weight: float, ideal_weight: float) -> float:
    """
    Signed deviation of a measured weight from the ideal, in percent.

    Positive values mean the birds are heavier than ideal. An ideal weight of
    zero yields 0.0.
    """
    if ideal_weight == 0:
        return 0.0
    return ((actual_weight - ideal_weight) / ideal_weight) * 100


def classify_deviation(deviation: float) -> DeviationClassification:
    """
    Buckets a deviation percentage into a severity tier.

    The sign is ignored. Anything above the last threshold is critical.

    Raises:
        ValueError: If deviation is NaN.
    """
    if math.isnan(deviation):
        raise ValueError("Cannot classify a NaN deviation.")

    magnitude = abs(deviation)
    for upper_bound, classification in DEVIATION_THRESHOLDS:
        if magnitude <= upper_bound:
            return classification
    return CRITICAL


def event_deviation(event: WeighingEvent) -> Optional[float]:
    """Deviation of a recorded weighing, or None when nothing was measured."""
    if event.status != WeighingStatus.COMPLETED or event.actual_weight_grams is None:
        return None
    return deviation_percent(event.actual_weight_grams, event.ideal_weight_grams)
