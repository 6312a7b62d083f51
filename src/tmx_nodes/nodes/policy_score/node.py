"""Policy Score Node - compares the policy score against a threshold."""

import logging
import re
from typing import Any, List, Optional

from tmx_nodes.common.constants import ResponseFields
from tmx_nodes.common.exceptions import MalformedResponseError
from tmx_nodes.core.base import Node, get_session_query_response, outcomes_from_enum
from tmx_nodes.core.types import Action, InputState, Outcome, StateKey, TreeContext
from tmx_nodes.nodes.policy_score.schema import PolicyScoreConfig, PolicyScoreOutcome

logger = logging.getLogger(__name__)

OUTCOME_LABELS = {
    PolicyScoreOutcome.GREATER_THAN_OR_EQUAL: "Greater Than or Equal",
    PolicyScoreOutcome.LESS_THAN: "Less Than",
}


# Signed decimal digits only, within a 32-bit int
_POLICY_SCORE = re.compile(r"[+-]?[0-9]+")
_INT_MIN, _INT_MAX = -(2 ** 31), 2 ** 31 - 1


def parse_policy_score(value: Any) -> int:
    """Parse policy_score, which the service sends as an integer string.

    Accepts an optional sign and ASCII digits, nothing else (no whitespace,
    underscores or decimals), in the signed 32-bit range.

    Raises:
        MalformedResponseError: If the value is absent or not an integer
    """
    if value is None:
        raise MalformedResponseError(
            f"{ResponseFields.POLICY_SCORE} is missing from the session query response",
            field=ResponseFields.POLICY_SCORE,
        )
    if isinstance(value, int) and not isinstance(value, bool):
        score = value
    elif isinstance(value, str) and _POLICY_SCORE.fullmatch(value):
        score = int(value)
    else:
        score = None

    if score is None or not _INT_MIN <= score <= _INT_MAX:
        raise MalformedResponseError(
            f"{ResponseFields.POLICY_SCORE} is not an integer: {value!r}",
            field=ResponseFields.POLICY_SCORE,
        )
    return score


class PolicyScoreNode(Node):
    """Branches on the policy score of the stored session query response."""

    name = "ThreatMetrixPolicyScoreNode"
    config_class = PolicyScoreConfig
    inputs = (InputState(StateKey.SESSION_QUERY_RESPONSE.value),)

    def __init__(self, config: Optional[PolicyScoreConfig] = None):
        super().__init__(config or PolicyScoreConfig())

    @classmethod
    def outcomes(cls, config: Any = None) -> List[Outcome]:
        return outcomes_from_enum(PolicyScoreOutcome, OUTCOME_LABELS)

    def process(self, context: TreeContext) -> Action:
        response = get_session_query_response(context.shared_state)
        score = parse_policy_score(response.get(ResponseFields.POLICY_SCORE))

        if score >= self.config.policy_score_threshold:
            outcome = PolicyScoreOutcome.GREATER_THAN_OR_EQUAL
        else:
            outcome = PolicyScoreOutcome.LESS_THAN

        logger.info(
            f"Policy score {score} against threshold "
            f"{self.config.policy_score_threshold}: {outcome.value}"
        )
        return Action.goto(outcome.value, context.shared_state)
