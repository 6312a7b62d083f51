"""Review Status Node Configuration Schema."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ReviewStatusOutcome(str, Enum):
    """Outcomes of the Review Status node."""
    PASS = "PASS"
    CHALLENGE = "CHALLENGE"
    REVIEW = "REVIEW"
    REJECT = "REJECT"


# Exact, case-sensitive wire values. Anything else maps to REJECT.
REVIEW_STATUS_VALUES = {
    "pass": ReviewStatusOutcome.PASS,
    "challenge": ReviewStatusOutcome.CHALLENGE,
    "review": ReviewStatusOutcome.REVIEW,
}


class ReviewStatusConfig(BaseModel):
    """The Review Status node has no settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")
