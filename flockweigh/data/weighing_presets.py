"""
Weighing calendar and ideal weight curve for laying hens.

Values follow the NOVOgen Tinted management guide. The curve is the single
reference curve used for every breed.
"""

import enum
from types import MappingProxyType
from typing import Mapping, Tuple


class WeighingPhase(enum.Enum):
    REARING = "rearing"
    GROWTH = "growth"
    PRODUCTION = "production"


REFERENCE_BREED = "NOVOgen Tinted"

REARING_LAST_WEEK = 18
GROWTH_LAST_WEEK = 22

# Weekly through rearing and growth, then every 4 weeks while in lay.
WEIGHING_PHASES: Mapping[WeighingPhase, Tuple[int, ...]] = MappingProxyType(
    {
        WeighingPhase.REARING: tuple(range(1, REARING_LAST_WEEK + 1)),
        WeighingPhase.GROWTH: tuple(range(REARING_LAST_WEEK + 1, GROWTH_LAST_WEEK + 1)),
        WeighingPhase.PRODUCTION: tuple(range(26, 75, 4)),
    }
)

SCHEDULED_WEEKS: Tuple[int, ...] = tuple(
    sorted({week for weeks in WEIGHING_PHASES.values() for week in weeks})
)

IDEAL_WEIGHTS_GRAMS: Mapping[int, int] = MappingProxyType(
    {
        1: 70,
        2: 120,
        3: 200,
        4: 300,
        5: 420,
        6: 550,
        7: 680,
        8: 810,
        9: 940,
        10: 1060,
        11: 1170,
        12: 1270,
        13: 1360,
        14: 1440,
        15: 1510,
        16: 1570,
        17: 1620,
        18: 1660,  # end of rearing
        19: 1700,
        20: 1730,
        21: 1750,
        22: 1780,  # onset of lay
        26: 1850,
        30: 1900,
        34: 1950,
        38: 2000,
        42: 2020,
        46: 2030,
        50: 2040,
        54: 2050,
        58: 2060,
        62: 2070,
        66: 2070,
        70: 2070,
        74: 2070,
    }
)

PLATEAU_WEIGHT_GRAMS: int = max(IDEAL_WEIGHTS_GRAMS.values())


def ideal_weight_grams(week: int) -> int:
    """
    Returns the ideal average bird weight for a production week.

    Weeks missing from the table (including every week past the last
    tabulated one) resolve to the plateau weight.

    Raises:
        ValueError: If week is lower than 1.
    """
    if week < 1:
        raise ValueError(f"Week must be 1 or greater, got {week}.")
    return IDEAL_WEIGHTS_GRAMS.get(week, PLATEAU_WEIGHT_GRAMS)


def phase_for_week(week: int) -> WeighingPhase:
    """Maps a production week onto its flock phase."""
    if week < 1:
        raise ValueError(f"Week must be 1 or greater, got {week}.")
    if week <= REARING_LAST_WEEK:
        return WeighingPhase.REARING
    if week <= GROWTH_LAST_WEEK:
        return WeighingPhase.GROWTH
    return WeighingPhase.PRODUCTION
