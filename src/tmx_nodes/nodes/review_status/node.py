"""Review Status Node - branches on the service's review verdict."""

import logging
from typing import Any, List, Optional

from tmx_nodes.common.constants import ResponseFields
from tmx_nodes.common.exceptions import MalformedResponseError, MissingStateError
from tmx_nodes.core.base import Node, get_session_query_response, outcomes_from_enum
from tmx_nodes.core.types import Action, InputState, Outcome, StateKey, TreeContext
from tmx_nodes.nodes.review_status.schema import (
    REVIEW_STATUS_VALUES,
    ReviewStatusConfig,
    ReviewStatusOutcome,
)

logger = logging.getLogger(__name__)

OUTCOME_LABELS = {
    ReviewStatusOutcome.PASS: "Pass",
    ReviewStatusOutcome.CHALLENGE: "Challenge",
    ReviewStatusOutcome.REVIEW: "Review",
    ReviewStatusOutcome.REJECT: "Reject",
}


class ReviewStatusNode(Node):
    """Maps review_status to PASS, CHALLENGE, REVIEW or REJECT.

    Unrecognized values, including "reject", select REJECT.
    """

    name = "ThreatMetrixReviewStatusNode"
    config_class = ReviewStatusConfig
    inputs = (InputState(StateKey.SESSION_QUERY_RESPONSE.value),)

    def __init__(self, config: Optional[ReviewStatusConfig] = None):
        super().__init__(config or ReviewStatusConfig())

    @classmethod
    def outcomes(cls, config: Any = None) -> List[Outcome]:
        return outcomes_from_enum(ReviewStatusOutcome, OUTCOME_LABELS)

    def process(self, context: TreeContext) -> Action:
        response = get_session_query_response(context.shared_state)
        review_status = response.get(ResponseFields.REVIEW_STATUS)

        if review_status is None or review_status == "":
            raise MissingStateError(
                f"Unable to find {ResponseFields.REVIEW_STATUS} in "
                f"{StateKey.SESSION_QUERY_RESPONSE.value}. To use the ThreatMetrix "
                "Review Status node, the ThreatMetrix service type must be: 3DS, "
                "All, Page-Integrity, Session or Session-Policy",
                key=ResponseFields.REVIEW_STATUS,
            )
        if not isinstance(review_status, str):
            raise MalformedResponseError(
                f"{ResponseFields.REVIEW_STATUS} must be a string",
                field=ResponseFields.REVIEW_STATUS,
            )

        outcome = REVIEW_STATUS_VALUES.get(review_status, ReviewStatusOutcome.REJECT)
        logger.info(f"Review status '{review_status}': {outcome.value}")
        return Action.goto(outcome.value, context.shared_state)
