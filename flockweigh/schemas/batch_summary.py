from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from flockweigh.schemas.deviation import DeviationTier


class BatchWeighingSummary(BaseModel):
    """
    Aggregated weighing figures for a single batch.

    The latest_* fields describe the most advanced recorded weighing and are
    null while nothing has been weighed yet.
    """

    batch_id: str
    total_events: int = 0
    pending_events: int = 0
    overdue_events: int = 0
    completed_events: int = 0
    latest_week: Optional[int] = None
    latest_actual_weight_grams: Optional[float] = None
    latest_ideal_weight_grams: Optional[int] = None
    latest_deviation_percent: Optional[float] = None
    latest_tier: Optional[DeviationTier] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
