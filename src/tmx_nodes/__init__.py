"""tmx_nodes - ThreatMetrix device profiling and risk decision nodes."""

__version__ = "0.1.0"

from tmx_nodes.core import Action, SharedState, StateKey, TreeContext
from tmx_nodes.nodes import NODE_TYPES

__all__ = [
    "Action",
    "SharedState",
    "StateKey",
    "TreeContext",
    "NODE_TYPES",
]
