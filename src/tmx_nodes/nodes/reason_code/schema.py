"""Reason Code Node Configuration Schema."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

NONE_TRIGGERED = "None Triggered"


class ReasonCodeConfig(BaseModel):
    """Configuration for the ThreatMetrix Reason Code node.

    The order of reason_code_outcomes is significant: the first configured
    code present in the response wins.
    """

    reason_code_outcomes: List[str] = Field(
        ...,
        description="Candidate reason codes, each exposed as an outcome"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("reason_code_outcomes")
    @classmethod
    def _check_outcomes(cls, value: List[str]) -> List[str]:
        seen = set()
        for code in value:
            if not code:
                raise ValueError("reason codes must be non-empty")
            if code == NONE_TRIGGERED:
                raise ValueError(f"'{NONE_TRIGGERED}' is reserved")
            if code in seen:
                raise ValueError(f"duplicate reason code '{code}'")
            seen.add(code)
        return value
