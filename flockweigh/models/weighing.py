import enum
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class WeighingStatus(enum.Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    # Derived from the expected date, never stored on an event.
    OVERDUE = "overdue"


def weighing_id(batch_id: str, week: int) -> str:
    return f"weighing-{batch_id}-{week}"


class WeighingEvent(BaseModel):
    """
    A scheduled or completed flock weighing for a batch.

    The event references its batch by id only. Measurement fields stay empty
    until the weighing is recorded.
    """

    id: str
    batch_id: str
    week: int = Field(gt=0)
    age_in_days: int
    expected_date: date
    ideal_weight_grams: int
    status: WeighingStatus = WeighingStatus.PENDING
    created_at: datetime
    measured_at: Optional[datetime] = None
    actual_weight_grams: Optional[float] = None
    sampled_birds: Optional[int] = None
    responsible: Optional[str] = None
    notes: Optional[str] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_validator("status")
    @classmethod
    def validate_stored_status(cls, v: WeighingStatus) -> WeighingStatus:
        if v == WeighingStatus.OVERDUE:
            raise ValueError("Overdue is derived from the expected date and cannot be stored.")
        return v

    @model_validator(mode="after")
    def validate_age(self) -> "WeighingEvent":
        if self.age_in_days != self.week * 7:
            raise ValueError(
                f"ageInDays must equal week * 7 ({self.week * 7}), got {self.age_in_days}."
            )
        return self
