from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WeighingRecordCreate(BaseModel):
    """Schema for a measurement taken at a scheduled weighing."""

    actual_weight_grams: float = Field(gt=0, description="Average bird weight in grams.")
    sampled_birds: Optional[int] = Field(
        default=None, ge=1, description="Number of birds placed on the scale."
    )
    measured_at: Optional[datetime] = Field(
        default=None, description="When the weighing took place. Defaults to now."
    )
    responsible: Optional[str] = None
    notes: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
