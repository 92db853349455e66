import enum

from pydantic import BaseModel, ConfigDict


class DeviationTier(enum.Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ATTENTION = "attention"
    CRITICAL = "critical"


class DeviationClassification(BaseModel):
    """Severity of a measured weight's deviation from the ideal curve."""

    tier: DeviationTier
    color: str
    description: str

    model_config = ConfigDict(frozen=True)
