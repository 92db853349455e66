from __future__ import annotations

import datetime as dt
from typing import Callable, Dict, Optional

import pytest

from flockweigh.data.weighing_presets import ideal_weight_grams
from flockweigh.db.repository import WeighingRepository
from flockweigh.db.store import InMemoryStore
from flockweigh.models.batch import Batch
from flockweigh.models.weighing import WeighingEvent, WeighingStatus, weighing_id
from flockweigh.services.schedule import generate_schedule_for_batch

GENERATED_AT = dt.datetime(2024, 1, 16, 9, 0, tzinfo=dt.timezone.utc)


class FakeRedis:
    """Stands in for redis.Redis(decode_responses=True) in storage tests."""

    def __init__(self) -> None:
        self.data: Dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        self.data[key] = value
        return True


@pytest.fixture()
def batch() -> Batch:
    return Batch(
        id="lote-001",
        name="Lote A - Galpao 1",
        bird_count=5000,
        birth_date=dt.date(2024, 1, 15),
        entry_date=dt.date(2024, 1, 16),
    )


@pytest.fixture()
def schedule(batch: Batch) -> list[WeighingEvent]:
    return generate_schedule_for_batch(batch, now=GENERATED_AT)


@pytest.fixture()
def make_event() -> Callable[..., WeighingEvent]:
    def _make(
        expected_date: dt.date,
        *,
        week: int = 10,
        batch_id: str = "lote-001",
        status: WeighingStatus = WeighingStatus.PENDING,
        actual_weight_grams: Optional[float] = None,
    ) -> WeighingEvent:
        return WeighingEvent(
            id=weighing_id(batch_id, week),
            batch_id=batch_id,
            week=week,
            age_in_days=week * 7,
            expected_date=expected_date,
            ideal_weight_grams=ideal_weight_grams(week),
            status=status,
            created_at=GENERATED_AT,
            actual_weight_grams=actual_weight_grams,
        )

    return _make


@pytest.fixture()
def memory_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture()
def repository(memory_store: InMemoryStore) -> WeighingRepository:
    return WeighingRepository(memory_store, key_prefix="weighings")


@pytest.fixture()
def fake_redis() -> FakeRedis:
    return FakeRedis()
