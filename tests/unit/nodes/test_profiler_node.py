"""Tests for the Profiler node."""

import uuid
from urllib.parse import parse_qs, urlparse

import pydantic
import pytest

from tmx_nodes.common.exceptions import ValidationError
from tmx_nodes.core.state import SharedState
from tmx_nodes.core.types import HiddenValueCallback, ScriptCallback, StateKey, TreeContext
from tmx_nodes.nodes.profiler import ProfilerConfig, ProfilerNode
from tmx_nodes.nodes.profiler.node import render_profiler_script

PROFILER_URI = "https://h.online-metrix.net/fp/tags"


@pytest.fixture
def config():
    return ProfilerConfig(org_id="org_test", page_id="7", uri=PROFILER_URI)


def _script_src(script: str) -> str:
    line = next(l for l in script.splitlines() if l.startswith("script.src"))
    return line.split("'")[1]


class TestProfilerFirstPass:
    """First visit: no callbacks returned yet."""

    def test_suspends_with_script_and_hidden_value(self, config):
        """Test the node sends exactly a script and a hidden value callback."""
        node = ProfilerNode(config)
        action = node.process(TreeContext(SharedState()))

        assert action.is_suspended
        assert len(action.callbacks) == 2
        script, hidden = action.callbacks
        assert isinstance(script, ScriptCallback)
        assert isinstance(hidden, HiddenValueCallback)
        assert hidden.id == "ThreatMetrix Session ID"

    def test_generates_and_stores_session_id(self, config):
        """Test a fresh UUID is stored and embedded in the script URL."""
        node = ProfilerNode(config)
        state = SharedState()
        action = node.process(TreeContext(state))

        session_id = state[StateKey.SESSION_ID]
        uuid.UUID(session_id)

        src = _script_src(action.callbacks[0].script)
        parsed = urlparse(src)
        assert f"{parsed.scheme}://{parsed.netloc}{parsed.path}" == f"{PROFILER_URI}.js"
        assert parse_qs(parsed.query) == {
            "org_id": ["org_test"],
            "session_id": [session_id],
            "pageid": ["7"],
        }

    def test_org_id_not_written_until_callbacks_return(self, config):
        state = SharedState()
        ProfilerNode(config).process(TreeContext(state))
        assert StateKey.ORG_ID not in state

    def test_each_attempt_gets_a_new_session_id(self, config):
        node = ProfilerNode(config)
        first, second = SharedState(), SharedState()
        node.process(TreeContext(first))
        node.process(TreeContext(second))
        assert first[StateKey.SESSION_ID] != second[StateKey.SESSION_ID]


class TestProfilerCallbackPass:
    """Second visit: the client returned the callbacks."""

    def test_writes_org_id_and_advances(self, config):
        node = ProfilerNode(config)
        state = SharedState()
        node.process(TreeContext(state))
        generated = state[StateKey.SESSION_ID]

        action = node.process(TreeContext(
            state,
            (ScriptCallback("ignored"), HiddenValueCallback("ThreatMetrix Session ID", "client_1")),
        ))

        assert action.outcome == "outcome"
        assert state[StateKey.ORG_ID] == "org_test"
        assert state[StateKey.SESSION_ID] == generated

    def test_adopts_client_generated_session_id(self):
        config = ProfilerConfig(
            org_id="org_test", page_id="7", uri=PROFILER_URI,
            use_client_generated_session_id=True,
        )
        state = SharedState({"session_id": "server_generated"})

        ProfilerNode(config).process(TreeContext(
            state,
            (ScriptCallback("ignored"), HiddenValueCallback("ThreatMetrix Session ID", "client-ABC_123")),
        ))

        assert state[StateKey.SESSION_ID] == "client-ABC_123"

    @pytest.mark.parametrize("value", ["", "has space", "semi;colon", "x" * 129])
    def test_rejects_unsafe_client_session_id(self, value):
        config = ProfilerConfig(
            org_id="org_test", page_id="7", uri=PROFILER_URI,
            use_client_generated_session_id=True,
        )

        with pytest.raises(ValidationError):
            ProfilerNode(config).process(TreeContext(
                SharedState(),
                (ScriptCallback("ignored"), HiddenValueCallback("ThreatMetrix Session ID", value)),
            ))

    def test_only_hidden_value_returned_is_treated_as_first_pass(self, config):
        action = ProfilerNode(config).process(TreeContext(
            SharedState(), (HiddenValueCallback("ThreatMetrix Session ID", "x"),),
        ))
        assert action.is_suspended


class TestProfilerConfig:

    def test_org_id_required(self):
        with pytest.raises(pydantic.ValidationError):
            ProfilerConfig(org_id="", page_id="1")

    def test_uri_defaults_to_settings(self, monkeypatch):
        monkeypatch.setenv("TMX_PROFILER_URI", "https://profiler.example.test/fp")
        assert ProfilerConfig(org_id="o", page_id="1").uri == "https://profiler.example.test/fp"

    def test_script_embeds_source_twice(self):
        script = render_profiler_script(PROFILER_URI, "o", "s", "1")
        assert script.count(f"{PROFILER_URI}.js?org_id=o&session_id=s&pageid=1") == 2
