"""Session Query Node - scores the profiled session with ThreatMetrix."""

import logging
from typing import Dict, Optional

import pydantic

from tmx_nodes.client.http import RiskServiceClient
from tmx_nodes.client.schemas import RiskQueryRequest
from tmx_nodes.common.constants import ResponseFields
from tmx_nodes.common.exceptions import (
    MissingStateError,
    NodeProcessingError,
    RemoteServiceError,
    ValidationError,
)
from tmx_nodes.core.base import SingleOutcomeNode
from tmx_nodes.core.state import SharedState
from tmx_nodes.core.types import (
    Action,
    InputState,
    OutputState,
    StateKey,
    TreeContext,
)
from tmx_nodes.nodes.session_query.schema import SessionQueryConfig

logger = logging.getLogger(__name__)


class SessionQueryNode(SingleOutcomeNode):
    """Queries the risk service for the session set up by the Profiler node.

    Stores the full response under session_query_response and its request id
    under request_id. Any remote failure is fatal to the attempt.
    """

    name = "ThreatMetrixSessionQueryNode"
    config_class = SessionQueryConfig
    tags = ("risk",)
    inputs = (
        InputState(StateKey.SESSION_ID.value, required=True),
        InputState(StateKey.ORG_ID.value, required=True),
        InputState(StateKey.SESSION_QUERY_PARAMETERS.value, required=False),
    )
    outputs = (
        OutputState(StateKey.SESSION_QUERY_RESPONSE.value, (SingleOutcomeNode.OUTCOME,)),
        OutputState(StateKey.REQUEST_ID.value, (SingleOutcomeNode.OUTCOME,)),
    )

    def __init__(
        self,
        config: SessionQueryConfig,
        client: Optional[RiskServiceClient] = None,
    ):
        """Initialize the node.

        Args:
            config: Node configuration
            client: Risk service client. A default client is created if not given.
        """
        super().__init__(config)
        self._owns_client = client is None
        self.client = client or RiskServiceClient()

    def close(self) -> None:
        """Close the client if this node created it."""
        if self._owns_client:
            self.client.close()

    def process(self, context: TreeContext) -> Action:
        shared_state = context.shared_state
        for key in (StateKey.ORG_ID, StateKey.SESSION_ID):
            if not shared_state.is_defined(key):
                raise MissingStateError(
                    f"The ThreatMetrix {key.value} is not present in shared state. "
                    "Ensure the ThreatMetrix Profiler node runs before this node.",
                    key=key.value,
                )

        session_id = shared_state.get_str(StateKey.SESSION_ID)
        request = self._build_request(shared_state, session_id)

        try:
            response = self.client.query(request, self.config.uri)
        except RemoteServiceError as e:
            logger.error(f"Unable to get TMX response for session: {session_id}")
            raise NodeProcessingError(
                f"Session query failed for session {session_id}: {e.message}",
                node_name=self.name,
                details={"session_id": session_id, "cause": e.to_dict()},
            ) from e

        shared_state[StateKey.SESSION_QUERY_RESPONSE] = response
        request_id = response.get(ResponseFields.REQUEST_ID)
        if request_id is not None:
            shared_state[StateKey.REQUEST_ID] = request_id
        else:
            # Null out any request id left by an earlier query
            shared_state[StateKey.REQUEST_ID] = None
            logger.warning(f"Session query response for {session_id} has no request_id")

        logger.info(f"Stored session query response for session {session_id}")
        return self.goto_next(shared_state)

    def _build_request(self, shared_state: SharedState, session_id: str) -> RiskQueryRequest:
        try:
            return RiskQueryRequest(
                org_id=shared_state.get_str(StateKey.ORG_ID),
                api_key=self.config.api_key,
                session_id=session_id,
                service_type=self.config.service_type,
                event_type=self.config.event_type,
                policy=self.config.policy,
                extra_parameters=self._extra_parameters(shared_state),
            )
        except pydantic.ValidationError as e:
            raise ValidationError(
                f"Invalid session query input: {e}",
                details={"session_id": session_id},
            ) from e

    def _extra_parameters(self, shared_state: SharedState) -> Dict[str, str]:
        if not self.config.add_shared_state_variables_to_request:
            return {}
        key = StateKey.SESSION_QUERY_PARAMETERS
        if not shared_state.is_defined(key):
            return {}
        parameters = shared_state[key]
        if not isinstance(parameters, dict):
            raise ValidationError(
                f"{key.value} in shared state must be a map of parameter names to values",
                details={"key": key.value, "type": type(parameters).__name__},
            )
        return {str(name): str(value) for name, value in parameters.items()}
