"""Tests for the Session Query node."""

import pytest

from tmx_nodes.client.enums import EventType, ServiceType
from tmx_nodes.common.exceptions import (
    MissingStateError,
    NodeProcessingError,
    ValidationError,
)
from tmx_nodes.core.state import SharedState
from tmx_nodes.core.types import StateKey, TreeContext
from tmx_nodes.nodes.session_query import SessionQueryConfig, SessionQueryNode
from tests.fixtures.tmx import make_response

QUERY_URL = "https://tmx.example.test/api/session-query"


@pytest.fixture
def config():
    return SessionQueryConfig(
        api_key="k1",
        service_type=ServiceType.SESSION_POLICY,
        event_type=EventType.LOGIN,
        policy="default",
        uri=QUERY_URL,
    )


@pytest.fixture
def node(config, risk_client):
    return SessionQueryNode(config, client=risk_client)


class TestSessionQueryHappyPath:
    """Successful queries."""

    def test_sends_exact_form(self, node, mock_http_session, profiled_state):
        """Test the request carries the profiled session and the configured fields."""
        node.process(TreeContext(profiled_state))

        args, kwargs = mock_http_session.post.call_args
        assert args[0] == QUERY_URL
        assert kwargs["params"] == {"output_format": "json"}
        assert kwargs["data"] == [
            ("org_id", "org_test"),
            ("api_key", "k1"),
            ("session_id", "sess_test_001"),
            ("service_type", "session-policy"),
            ("event_type", "LOGIN"),
            ("policy", "default"),
        ]

    def test_stores_response_and_request_id(self, node, profiled_state, query_response):
        action = node.process(TreeContext(profiled_state))

        assert action.outcome == "outcome"
        assert profiled_state[StateKey.SESSION_QUERY_RESPONSE] == query_response
        assert profiled_state[StateKey.REQUEST_ID] == "req_8f2c1d"

    def test_missing_request_id_not_written(self, node, mock_http_session, profiled_state):
        mock_http_session.post.return_value = make_response(200, {"policy_score": "10"})

        node.process(TreeContext(profiled_state))

        assert profiled_state[StateKey.SESSION_QUERY_RESPONSE] == {"policy_score": "10"}
        assert profiled_state.is_defined(StateKey.REQUEST_ID) is False

    def test_forwards_shared_state_parameters(self, risk_client, mock_http_session, profiled_state):
        config = SessionQueryConfig(
            api_key="k1", uri=QUERY_URL, add_shared_state_variables_to_request=True,
        )
        profiled_state[StateKey.SESSION_QUERY_PARAMETERS] = {
            "account_login": "alice",
            "input_ip_address": "10.0.0.1",
        }

        SessionQueryNode(config, client=risk_client).process(TreeContext(profiled_state))

        form = mock_http_session.post.call_args.kwargs["data"]
        assert ("account_login", "alice") in form
        assert ("input_ip_address", "10.0.0.1") in form

    def test_parameters_ignored_when_disabled(self, node, mock_http_session, profiled_state):
        profiled_state[StateKey.SESSION_QUERY_PARAMETERS] = {"account_login": "alice"}

        node.process(TreeContext(profiled_state))

        form = mock_http_session.post.call_args.kwargs["data"]
        assert ("account_login", "alice") not in form

    def test_absent_parameters_with_forwarding_enabled(self, risk_client, mock_http_session, profiled_state):
        config = SessionQueryConfig(
            api_key="k1", uri=QUERY_URL, add_shared_state_variables_to_request=True,
        )
        SessionQueryNode(config, client=risk_client).process(TreeContext(profiled_state))
        assert len(mock_http_session.post.call_args.kwargs["data"]) == 6


class TestSessionQueryMissingState:
    """Missing inputs fail before any request is made."""

    @pytest.mark.parametrize("present, missing", [
        ({"session_id": "s"}, "org_id"),
        ({"org_id": "o"}, "session_id"),
        ({"org_id": "o", "session_id": None}, "session_id"),
    ])
    def test_missing_key_raises_without_request(self, node, mock_http_session, present, missing):
        with pytest.raises(MissingStateError) as exc_info:
            node.process(TreeContext(SharedState(present)))

        assert exc_info.value.key == missing
        assert "Profiler" in exc_info.value.message
        mock_http_session.post.assert_not_called()

    def test_non_map_parameters_rejected(self, risk_client, mock_http_session, profiled_state):
        config = SessionQueryConfig(
            api_key="k1", uri=QUERY_URL, add_shared_state_variables_to_request=True,
        )
        profiled_state[StateKey.SESSION_QUERY_PARAMETERS] = ["account_login"]

        with pytest.raises(ValidationError):
            SessionQueryNode(config, client=risk_client).process(TreeContext(profiled_state))
        mock_http_session.post.assert_not_called()


class TestSessionQueryRemoteFailure:
    """Remote failures are fatal to the attempt."""

    @pytest.mark.parametrize("status", [400, 500])
    def test_error_status_raises_and_leaves_state_untouched(
        self, node, mock_http_session, profiled_state, status, caplog
    ):
        mock_http_session.post.return_value = make_response(status, text="nope")
        before = profiled_state.to_dict()

        with pytest.raises(NodeProcessingError) as exc_info:
            node.process(TreeContext(profiled_state))

        assert exc_info.value.details["cause"]["details"]["status_code"] == status
        assert profiled_state.to_dict() == before
        assert "Unable to get TMX response for session: sess_test_001" in caplog.text

    def test_requery_overwrites_response(self, node, mock_http_session, profiled_state):
        """Test running the node twice keeps only the latest response."""
        node.process(TreeContext(profiled_state))
        mock_http_session.post.return_value = make_response(
            200, {"request_id": "req_second", "policy_score": "5"}
        )

        node.process(TreeContext(profiled_state))

        assert profiled_state[StateKey.REQUEST_ID] == "req_second"
        assert profiled_state[StateKey.SESSION_QUERY_RESPONSE]["policy_score"] == "5"

    def test_requery_without_request_id_clears_previous(self, node, mock_http_session, profiled_state):
        """Test a stale request id never survives beside a newer response."""
        node.process(TreeContext(profiled_state))
        assert profiled_state[StateKey.REQUEST_ID] == "req_8f2c1d"
        mock_http_session.post.return_value = make_response(200, {"policy_score": "5"})

        node.process(TreeContext(profiled_state))

        assert profiled_state[StateKey.REQUEST_ID] is None
        assert profiled_state.is_defined(StateKey.REQUEST_ID) is False
        assert profiled_state[StateKey.SESSION_QUERY_RESPONSE] == {"policy_score": "5"}


class TestSessionQueryDeclarations:

    def test_single_outcome(self):
        assert SessionQueryNode.outcome_ids() == ["outcome"]

    def test_declared_state(self):
        assert [i.name for i in SessionQueryNode.inputs] == [
            "session_id", "org_id", "tmx_session_query_parameters",
        ]
        assert [o.name for o in SessionQueryNode.outputs] == [
            "session_query_response", "request_id",
        ]
