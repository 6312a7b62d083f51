"""Reason Code Node - branches on the first configured reason code triggered."""

import logging
from typing import Any, List, Optional

from tmx_nodes.common.constants import ResponseFields
from tmx_nodes.common.exceptions import MalformedResponseError
from tmx_nodes.core.base import Node, get_session_query_response
from tmx_nodes.core.types import Action, InputState, Outcome, StateKey, TreeContext
from tmx_nodes.nodes.reason_code.schema import NONE_TRIGGERED, ReasonCodeConfig

logger = logging.getLogger(__name__)


class ReasonCodeNode(Node):
    """Selects the first configured reason code present in the response.

    Matching walks the configured candidates in order, not the response
    list. No reason codes, or no match, selects None Triggered.
    """

    name = "ThreatMetrixReasonCodeNode"
    config_class = ReasonCodeConfig
    inputs = (InputState(StateKey.SESSION_QUERY_RESPONSE.value),)

    def __init__(self, config: ReasonCodeConfig):
        super().__init__(config)

    @classmethod
    def outcomes(cls, config: Optional[ReasonCodeConfig] = None) -> List[Outcome]:
        if config is None:
            return []
        outcomes = [Outcome(code, code) for code in config.reason_code_outcomes]
        outcomes.append(Outcome(NONE_TRIGGERED, NONE_TRIGGERED))
        return outcomes

    def process(self, context: TreeContext) -> Action:
        response = get_session_query_response(context.shared_state)
        reason_codes = self._reason_codes(response.get(ResponseFields.REASON_CODE))

        outcome = NONE_TRIGGERED
        if reason_codes is not None:
            triggered = set(reason_codes)
            for candidate in self.config.reason_code_outcomes:
                if candidate in triggered:
                    outcome = candidate
                    break

        logger.info(f"Reason code outcome: {outcome}")
        return Action.goto(outcome, context.shared_state)

    @staticmethod
    def _reason_codes(value: Any) -> Optional[List[str]]:
        if value is None:
            return None
        if not isinstance(value, list):
            raise MalformedResponseError(
                f"{ResponseFields.REASON_CODE} must be a list, got {type(value).__name__}",
                field=ResponseFields.REASON_CODE,
            )
        return [str(code) for code in value]
