from __future__ import annotations

import datetime as dt

import pytest

from flockweigh.models.weighing import WeighingStatus
from flockweigh.schemas.deviation import DeviationTier
from flockweigh.services.deviation import classify_deviation, deviation_percent, event_deviation

pytestmark = pytest.mark.deviation


def test_deviation_is_zero_on_target() -> None:
    assert deviation_percent(1660, 1660) == 0


def test_deviation_is_signed() -> None:
    assert deviation_percent(1700, 1660) == pytest.approx(2.41, abs=0.01)
    assert deviation_percent(1500, 2000) == pytest.approx(-25.0)


@pytest.mark.parametrize("actual", [0, 150, -3, 1e6])
def test_deviation_against_zero_ideal_is_zero(actual: float) -> None:
    assert deviation_percent(actual, 0) == 0


@pytest.mark.parametrize(
    ("deviation", "tier"),
    [
        (3, DeviationTier.EXCELLENT),
        (-8, DeviationTier.GOOD),
        (15, DeviationTier.ATTENTION),
        (25, DeviationTier.CRITICAL),
        (0, DeviationTier.EXCELLENT),
        (5, DeviationTier.EXCELLENT),
        (5.01, DeviationTier.GOOD),
        (-10, DeviationTier.GOOD),
        (20, DeviationTier.ATTENTION),
        (20.01, DeviationTier.CRITICAL),
        (-35, DeviationTier.CRITICAL),
        (float("inf"), DeviationTier.CRITICAL),
    ],
)
def test_classify_deviation(deviation: float, tier: DeviationTier) -> None:
    assert classify_deviation(deviation).tier == tier


def test_classification_carries_color_and_description() -> None:
    critical = classify_deviation(-21)
    assert critical.color == "#EF4444"
    assert critical.description == "Critical deviation - immediate action"
    assert classify_deviation(1).color == "#10B981"


def test_classify_rejects_nan() -> None:
    with pytest.raises(ValueError, match="NaN"):
        classify_deviation(float("nan"))


def test_event_deviation_only_for_recorded_weighings(make_event) -> None:
    pending = make_event(dt.date(2024, 3, 26), week=10)
    completed = make_event(
        dt.date(2024, 3, 26),
        week=10,
        status=WeighingStatus.COMPLETED,
        actual_weight_grams=1166,
    )

    assert event_deviation(pending) is None
    assert event_deviation(completed) == pytest.approx(10.0)
