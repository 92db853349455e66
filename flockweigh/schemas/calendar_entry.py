from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from flockweigh.data.weighing_presets import WeighingPhase
from flockweigh.models.weighing import WeighingStatus


class CalendarEntry(BaseModel):
    """A weighing as shown on the batch calendar."""

    id: str
    batch_id: str
    kind: str = "weighing"
    date: date
    title: str
    description: str
    status: WeighingStatus
    color: str
    phase: WeighingPhase

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
