"""Core types exchanged between nodes and the hosting tree."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Type, TypeVar

from tmx_nodes.core.state import SharedState


class StateKey(str, Enum):
    """Well-known shared state keys."""
    ORG_ID = "org_id"
    SESSION_ID = "session_id"
    SESSION_QUERY_RESPONSE = "session_query_response"
    UPDATE_RESPONSE = "update_response"
    REQUEST_ID = "request_id"
    SESSION_QUERY_PARAMETERS = "tmx_session_query_parameters"


@dataclass(frozen=True)
class Outcome:
    """A selectable outcome exposed to the hosting tree."""
    id: str
    display_name: str


@dataclass(frozen=True)
class InputState:
    """A shared state key a node reads."""
    name: str
    required: bool = True


@dataclass(frozen=True)
class OutputState:
    """A shared state key a node writes, per outcome."""
    name: str
    outcomes: Tuple[str, ...] = ()


# =============================================================================
# CALLBACKS
# =============================================================================

@dataclass
class Callback:
    """Base class for values exchanged with the client device."""


@dataclass
class ScriptCallback(Callback):
    """Script text the client must execute."""
    script: str


@dataclass
class HiddenValueCallback(Callback):
    """Hidden form value the client fills in and returns."""
    id: str
    value: str = ""


@dataclass
class TextOutputCallback(Callback):
    """Plain message shown to the client."""
    message: str


C = TypeVar("C", bound=Callback)


@dataclass
class TreeContext:
    """Everything a node sees when it is processed."""
    shared_state: SharedState = field(default_factory=SharedState)
    callbacks: Tuple[Callback, ...] = ()

    def get_callback(self, callback_type: Type[C]) -> Optional[C]:
        """Return the first returned callback of the given type."""
        for callback in self.callbacks:
            if isinstance(callback, callback_type):
                return callback
        return None

    def has_callbacks(self, *callback_types: Type[Callback]) -> bool:
        """Check that a callback of every given type was returned."""
        return all(self.get_callback(t) is not None for t in callback_types)


@dataclass(frozen=True)
class Action:
    """Result of processing a node.

    Either selects an outcome, or suspends the attempt and sends callbacks
    to the client. Never both.
    """
    shared_state: SharedState
    outcome: Optional[str] = None
    callbacks: Tuple[Callback, ...] = ()

    def __post_init__(self):
        if (self.outcome is None) == (not self.callbacks):
            raise ValueError("Action must select an outcome or send callbacks, not both")

    @classmethod
    def goto(cls, outcome: str, shared_state: SharedState) -> "Action":
        """Advance to the named outcome."""
        return cls(shared_state=shared_state, outcome=str(outcome))

    @classmethod
    def send(cls, callbacks, shared_state: SharedState) -> "Action":
        """Suspend and deliver callbacks to the client."""
        return cls(shared_state=shared_state, callbacks=tuple(callbacks))

    @property
    def is_suspended(self) -> bool:
        """Whether the attempt is waiting on the client."""
        return self.outcome is None
