import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class AlertType(enum.Enum):
    OVERDUE_WEIGHING = "overdue_weighing"
    WEIGHT_OFF_TARGET = "weight_off_target"


class AlertPriority(enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class WeighingAlert(BaseModel):
    """An operator alert raised from a batch's weighing schedule."""

    id: str
    batch_id: str
    event_id: str
    type: AlertType
    priority: AlertPriority
    title: str
    description: str
    seen: bool = False
    resolved: bool = False
    created_at: datetime

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
