"""Profiler Node - starts device fingerprinting on the client."""

import logging
import re
import uuid
from urllib.parse import urlencode

from tmx_nodes.common.constants import ProfilerConstants
from tmx_nodes.common.exceptions import ValidationError
from tmx_nodes.core.base import SingleOutcomeNode
from tmx_nodes.core.types import (
    Action,
    HiddenValueCallback,
    OutputState,
    ScriptCallback,
    StateKey,
    TreeContext,
)
from tmx_nodes.nodes.profiler.schema import ProfilerConfig

logger = logging.getLogger(__name__)

# Loads the profiler tag and the fallback iframe. {src} is substituted twice.
PROFILER_SCRIPT_TEMPLATE = (
    "var script = document.createElement('script');\n"
    "script.type = 'text/javascript';\n"
    "script.src = '{src}'\n"
    "document.getElementsByTagName('head')[0].appendChild(script);\n"
    "var tmx_iframe = document.createElement('iframe');\n"
    "tmx_iframe.src = '{src}'\n"
    "tmx_iframe.style.width = '100px';\n"
    "tmx_iframe.style.height = '100px';\n"
    "tmx_iframe.style.border = '0px';\n"
    "tmx_iframe.style.position = 'absolute';\n"
    "tmx_iframe.style.top = '-5000px';\n"
    "document.getElementsByTagName('body')[0].appendChild(tmx_iframe);\n"
)

_CLIENT_SESSION_ID = re.compile(ProfilerConstants.CLIENT_SESSION_ID_PATTERN)


def render_profiler_script(uri: str, org_id: str, session_id: str, page_id: str) -> str:
    """Render the profiler script for one session."""
    query = urlencode({"org_id": org_id, "session_id": session_id, "pageid": page_id})
    return PROFILER_SCRIPT_TEMPLATE.format(src=f"{uri}.js?{query}")


class ProfilerNode(SingleOutcomeNode):
    """Sends the profiler script to the client, then records the session.

    First pass: no callbacks returned yet. Generates a session id, stores it
    and suspends with the script plus a hidden value callback.

    Second pass: callbacks returned. Optionally adopts the client's session
    id, writes the org id and advances.
    """

    name = "ThreatMetrixProfilerNode"
    config_class = ProfilerConfig
    outputs = (
        OutputState(StateKey.SESSION_ID.value, (SingleOutcomeNode.OUTCOME,)),
        OutputState(StateKey.ORG_ID.value, (SingleOutcomeNode.OUTCOME,)),
    )

    def __init__(self, config: ProfilerConfig):
        super().__init__(config)

    def process(self, context: TreeContext) -> Action:
        shared_state = context.shared_state

        if context.has_callbacks(ScriptCallback, HiddenValueCallback):
            if self.config.use_client_generated_session_id:
                returned = context.get_callback(HiddenValueCallback).value
                shared_state[StateKey.SESSION_ID] = self._check_client_session_id(returned)
            shared_state[StateKey.ORG_ID] = self.config.org_id
            logger.info(
                f"Profiling complete for session {shared_state.get_str(StateKey.SESSION_ID)}"
            )
            return self.goto_next(shared_state)

        session_id = str(uuid.uuid4())
        shared_state[StateKey.SESSION_ID] = session_id
        script = render_profiler_script(
            self.config.uri, self.config.org_id, session_id, self.config.page_id
        )
        logger.debug(f"Sending profiler script for session {session_id}")
        return Action.send(
            [
                ScriptCallback(script),
                HiddenValueCallback(ProfilerConstants.HIDDEN_VALUE_ID),
            ],
            shared_state,
        )

    @staticmethod
    def _check_client_session_id(value: str) -> str:
        """Client-supplied ids cross a trust boundary; accept only plain tokens."""
        if not isinstance(value, str) or not _CLIENT_SESSION_ID.fullmatch(value):
            raise ValidationError(
                "Client returned an invalid ThreatMetrix session id",
                details={"pattern": ProfilerConstants.CLIENT_SESSION_ID_PATTERN},
            )
        return value
