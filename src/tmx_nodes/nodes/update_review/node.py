"""Update Review Node - reports the final disposition back to ThreatMetrix."""

import logging
from concurrent.futures import Executor
from typing import Optional

from tmx_nodes.client.dispatch import dispatch_update
from tmx_nodes.client.enums import FinalReviewStatus, TrustTagName
from tmx_nodes.client.http import RiskServiceClient
from tmx_nodes.client.schemas import UpdateReviewRequest
from tmx_nodes.common.exceptions import MissingStateError, RemoteServiceError
from tmx_nodes.core.base import SingleOutcomeNode
from tmx_nodes.core.state import SharedState
from tmx_nodes.core.types import Action, InputState, OutputState, StateKey, TreeContext
from tmx_nodes.nodes.update_review.schema import UpdateReviewConfig, check_trust_tag_pair

logger = logging.getLogger(__name__)


class UpdateReviewNode(SingleOutcomeNode):
    """Sends update_review_status for the request scored earlier in the tree.

    Remote failures never block the attempt. By default the update runs in
    the background and its response is discarded; with wait_for_response
    the node blocks and stores the response under update_response.
    """

    name = "ThreatMetrixUpdateReviewNode"
    config_class = UpdateReviewConfig
    inputs = (
        InputState(StateKey.ORG_ID.value, required=True),
        InputState(StateKey.REQUEST_ID.value, required=True),
    )
    outputs = (
        OutputState(StateKey.UPDATE_RESPONSE.value, (SingleOutcomeNode.OUTCOME,)),
    )

    def __init__(
        self,
        config: UpdateReviewConfig,
        client: Optional[RiskServiceClient] = None,
        executor: Optional[Executor] = None,
    ):
        """Initialize the node.

        Args:
            config: Node configuration
            client: Risk service client. A default client is created if not given.
            executor: Executor for background updates. Shared pool if not given.
        """
        super().__init__(config)
        self._owns_client = client is None
        self.client = client or RiskServiceClient()
        self.executor = executor

    def close(self) -> None:
        """Close the client if this node created it.

        Background updates still running on that client should be flushed first
        with shutdown_executor().
        """
        if self._owns_client:
            self.client.close()

    def process(self, context: TreeContext) -> Action:
        shared_state = context.shared_state
        for key in (StateKey.ORG_ID, StateKey.REQUEST_ID):
            if not shared_state.is_defined(key):
                raise MissingStateError(
                    f"The ThreatMetrix {key.value} is not present in shared state. "
                    "Ensure the ThreatMetrix Session Query node runs before this node.",
                    key=key.value,
                )

        request = self.build_request(shared_state)

        if self.config.wait_for_response:
            self._send_and_store(request, shared_state)
        else:
            dispatch_update(self.client, request, self.config.uri, self.executor)
            logger.info(f"Dispatched review update for request {request.request_id}")

        return self.goto_next(shared_state)

    def build_request(self, shared_state: SharedState) -> UpdateReviewRequest:
        """Build the update request from shared state and configuration.

        Raises:
            ConfigurationError: If a trust tag name is configured without context
        """
        config = self.config
        check_trust_tag_pair(config.trust_tag_name, config.trust_tag_context)

        has_tag = config.trust_tag_name != TrustTagName.NONE
        return UpdateReviewRequest(
            org_id=shared_state.get_str(StateKey.ORG_ID),
            api_key=config.api_key,
            request_id=shared_state.get_str(StateKey.REQUEST_ID),
            final_review_status=(
                None if config.final_review_status == FinalReviewStatus.NONE
                else config.final_review_status
            ),
            notes=config.notes or None,
            tag_name=config.trust_tag_name if has_tag else None,
            tag_context=config.trust_tag_context if has_tag else None,
            line_of_business=config.line_of_business or None,
        )

    def _send_and_store(self, request: UpdateReviewRequest, shared_state: SharedState) -> None:
        try:
            response = self.client.update(request, self.config.uri)
        except RemoteServiceError as e:
            logger.warning(f"Review update for request {request.request_id} failed: {e.message}")
            return
        shared_state[StateKey.UPDATE_RESPONSE] = response
        logger.info(f"Stored review update response for request {request.request_id}")
