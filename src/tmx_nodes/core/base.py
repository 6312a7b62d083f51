"""Base node classes and contracts."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from tmx_nodes.common.exceptions import MalformedResponseError, MissingStateError
from tmx_nodes.core.state import SharedState
from tmx_nodes.core.types import (
    Action,
    InputState,
    Outcome,
    OutputState,
    StateKey,
    TreeContext,
)


class NodeContract(ABC):
    """Abstract base class for node contracts."""

    @abstractmethod
    def process(self, context: TreeContext) -> Action:
        """Process the current attempt.

        Args:
            context: Shared state plus any callbacks returned by the client

        Returns:
            Action selecting an outcome or suspending with callbacks
        """
        pass


class Node(NodeContract):
    """Base node class.

    Subclasses declare their configuration model, the shared state they read
    and write, and the outcomes the hosting tree may wire.
    """

    name: ClassVar[str] = "Node"
    config_class: ClassVar[Optional[type]] = None
    tags: ClassVar[Tuple[str, ...]] = ()
    inputs: ClassVar[Tuple[InputState, ...]] = ()
    outputs: ClassVar[Tuple[OutputState, ...]] = ()

    def __init__(self, config: Any = None):
        self.config = config

    @classmethod
    @abstractmethod
    def outcomes(cls, config: Any = None) -> List[Outcome]:
        """Outcomes this node can select, in display order."""
        pass

    @classmethod
    def outcome_ids(cls, config: Any = None) -> List[str]:
        """Outcome ids only."""
        return [outcome.id for outcome in cls.outcomes(config)]

    def close(self) -> None:
        """Release resources the node created for itself."""


class SingleOutcomeNode(Node):
    """Node with exactly one outcome."""

    OUTCOME: ClassVar[str] = "outcome"

    @classmethod
    def outcomes(cls, config: Any = None) -> List[Outcome]:
        return [Outcome(cls.OUTCOME, "Outcome")]

    def goto_next(self, shared_state: SharedState) -> Action:
        return Action.goto(self.OUTCOME, shared_state)


def outcomes_from_enum(enum_class: type, labels: Dict[Enum, str]) -> List[Outcome]:
    """Build an outcome list from a closed outcome enum."""
    return [Outcome(member.value, labels[member]) for member in enum_class]


def get_session_query_response(shared_state: SharedState) -> Dict[str, Any]:
    """Fetch the stored session query response.

    Raises:
        MissingStateError: If the Session Query node did not run first
        MalformedResponseError: If the stored value is not a JSON object
    """
    key = StateKey.SESSION_QUERY_RESPONSE
    if not shared_state.is_defined(key):
        raise MissingStateError(
            f"Unable to find ThreatMetrix {key.value} in shared state. Does the "
            "ThreatMetrix Session Query node precede this node and return a "
            "successful response?",
            key=key.value,
        )
    response = shared_state[key]
    if not isinstance(response, dict):
        raise MalformedResponseError(
            f"Stored {key.value} is not a JSON object",
            field=key.value,
        )
    return response
