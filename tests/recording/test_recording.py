from __future__ import annotations

import datetime as dt
import logging

import pytest
from pydantic import ValidationError

from flockweigh.models.weighing import WeighingStatus
from flockweigh.schemas.weighing_request import WeighingRecordCreate
from flockweigh.services.recording import record_weighing

pytestmark = pytest.mark.recording

RECORDED_AT = dt.datetime(2024, 5, 21, 7, 45, tzinfo=dt.timezone.utc)


def test_record_weighing_completes_a_copy(schedule) -> None:
    event = schedule[17]
    record = WeighingRecordCreate(
        actual_weight_grams=1700, sampled_birds=50, responsible="Ana", notes="Aviary 2"
    )

    updated = record_weighing(event, record, now=RECORDED_AT)

    assert updated.status == WeighingStatus.COMPLETED
    assert updated.actual_weight_grams == 1700
    assert updated.sampled_birds == 50
    assert updated.responsible == "Ana"
    assert updated.notes == "Aviary 2"
    assert updated.measured_at == RECORDED_AT
    assert updated.updated_at == RECORDED_AT
    assert updated.id == event.id
    assert event.status == WeighingStatus.PENDING
    assert event.actual_weight_grams is None


def test_record_weighing_keeps_explicit_measurement_time(schedule) -> None:
    measured_at = dt.datetime(2024, 5, 20, 6, 0, tzinfo=dt.timezone.utc)
    record = WeighingRecordCreate(actual_weight_grams=1650, measured_at=measured_at)

    updated = record_weighing(schedule[17], record, now=RECORDED_AT)

    assert updated.measured_at == measured_at
    assert updated.updated_at == RECORDED_AT


def test_recording_again_replaces_measurement(schedule) -> None:
    first = record_weighing(
        schedule[0], WeighingRecordCreate(actual_weight_grams=60), now=RECORDED_AT
    )
    second = record_weighing(first, WeighingRecordCreate(actual_weight_grams=72), now=RECORDED_AT)

    assert second.actual_weight_grams == 72
    assert second.status == WeighingStatus.COMPLETED


def test_off_target_weight_is_logged_as_warning(
    schedule, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.INFO, logger="flockweigh.services.recording")

    record_weighing(schedule[0], WeighingRecordCreate(actual_weight_grams=90), now=RECORDED_AT)

    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(warnings) == 1
    assert "critical" in warnings[0].getMessage()


def test_record_request_accepts_camel_case() -> None:
    record = WeighingRecordCreate.model_validate({"actualWeightGrams": 1520.5, "sampledBirds": 40})
    assert record.actual_weight_grams == 1520.5
    assert record.sampled_birds == 40


@pytest.mark.parametrize(
    "payload",
    [
        {"actual_weight_grams": 0},
        {"actual_weight_grams": -10},
        {"actual_weight_grams": 1500, "sampled_birds": 0},
    ],
)
def test_record_request_rejects_invalid_values(payload: dict) -> None:
    with pytest.raises(ValidationError):
        WeighingRecordCreate(**payload)
