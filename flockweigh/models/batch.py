from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from flockweigh.core.config import settings


class Batch(BaseModel):
    """
    A cohort of birds housed together ("lote").

    Only the id, entry date and breed drive the weighing schedule; the rest is
    descriptive data carried along by the calling application.
    """

    id: str = Field(min_length=1)
    entry_date: date
    breed: str = Field(default_factory=lambda: settings.DEFAULT_BREED)
    name: Optional[str] = None
    bird_count: Optional[int] = Field(default=None, ge=1)
    birth_date: Optional[date] = None
    notes: Optional[str] = None
    cost_center: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
