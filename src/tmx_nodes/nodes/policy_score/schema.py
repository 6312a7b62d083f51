"""Policy Score Node Configuration Schema."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class PolicyScoreOutcome(str, Enum):
    """Outcomes of the Policy Score node."""
    GREATER_THAN_OR_EQUAL = "GREATER_THAN_OR_EQUAL"
    LESS_THAN = "LESS_THAN"


class PolicyScoreConfig(BaseModel):
    """Configuration for the ThreatMetrix Policy Score node."""

    policy_score_threshold: int = Field(
        default=0,
        description="Scores at or above this value take the GREATER_THAN_OR_EQUAL outcome"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")
