"""Example: run the login tree against a canned risk service response."""

from unittest.mock import MagicMock

from tmx_nodes.client.http import RiskServiceClient
from tmx_nodes.common.logging import configure_package_logging
from tmx_nodes.core.types import HiddenValueCallback, ScriptCallback
from tmx_nodes.nodes import (
    PolicyScoreNode,
    ProfilerConfig,
    ProfilerNode,
    ReviewStatusNode,
    SessionQueryConfig,
    SessionQueryNode,
)
from tmx_nodes.orchestration import AuthTree

logger = configure_package_logging("DEBUG")


def _canned_session() -> MagicMock:
    """HTTP session that answers every POST with a passing assessment."""
    response = MagicMock()
    response.status_code = 200
    response.json.return_value = {
        "request_id": "req_example_001",
        "policy_score": "25",
        "review_status": "pass",
        "reason_code": ["DeviceNewForAccount"],
    }
    session = MagicMock()
    session.post.return_value = response
    return session


def example_login_tree():
    """
    Example scenario: a login that passes review.

    1. Profiler sends the fingerprinting script and suspends
    2. Client runs the script and returns the hidden value
    3. Session query scores the session
    4. Review status and policy score route to SUCCESS
    """
    client = RiskServiceClient(session=_canned_session())
    tree = AuthTree(
        start="profiler",
        nodes={
            "profiler": ProfilerNode(ProfilerConfig(org_id="example_org", page_id="1")),
            "query": SessionQueryNode(SessionQueryConfig(api_key="example-key"), client=client),
            "review": ReviewStatusNode(),
            "score": PolicyScoreNode(),
        },
        wiring={
            "profiler": {"outcome": "query"},
            "query": {"outcome": "review"},
            "review": {"PASS": "score", "CHALLENGE": "FAILURE",
                       "REVIEW": "FAILURE", "REJECT": "FAILURE"},
            "score": {"GREATER_THAN_OR_EQUAL": "SUCCESS", "LESS_THAN": "FAILURE"},
        },
    )

    suspended = tree.start()
    script = next(c for c in suspended.callbacks if isinstance(c, ScriptCallback))
    logger.info(f"Client would run:\n{script.script}")

    # The client echoes the hidden value back
    returned = [script, HiddenValueCallback("ThreatMetrix Session ID", value="")]
    return tree.resume(suspended, returned)


if __name__ == "__main__":
    result = example_login_tree()
    print(f"Tree finished: {result.status} via {result.path}")
