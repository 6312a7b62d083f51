"""Core types and base classes."""

from tmx_nodes.core.state import SharedState
from tmx_nodes.core.types import (
    Action,
    Callback,
    HiddenValueCallback,
    InputState,
    Outcome,
    OutputState,
    ScriptCallback,
    StateKey,
    TextOutputCallback,
    TreeContext,
)
from tmx_nodes.core.base import (
    Node,
    NodeContract,
    SingleOutcomeNode,
    get_session_query_response,
)

__all__ = [
    "SharedState",
    "Action",
    "Callback",
    "HiddenValueCallback",
    "InputState",
    "Outcome",
    "OutputState",
    "ScriptCallback",
    "StateKey",
    "TextOutputCallback",
    "TreeContext",
    "Node",
    "NodeContract",
    "SingleOutcomeNode",
    "get_session_query_response",
]
