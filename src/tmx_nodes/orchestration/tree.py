"""Authentication Tree - a minimal host that sequences nodes by outcome.

Runs nodes until one suspends for client input or a terminal is reached.
Node exceptions propagate unchanged; the caller treats them as a failed
attempt.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple

from tmx_nodes.common.exceptions import ConfigurationError
from tmx_nodes.core.base import Node
from tmx_nodes.core.state import SharedState
from tmx_nodes.core.types import Callback, TreeContext

logger = logging.getLogger(__name__)

SUCCESS = "SUCCESS"
FAILURE = "FAILURE"
TERMINALS = (SUCCESS, FAILURE)

TreeStatus = Literal["SUSPENDED", "SUCCESS", "FAILURE"]


@dataclass
class TreeResult:
    """Where an attempt stands after running the tree."""
    status: TreeStatus
    shared_state: SharedState
    callbacks: Tuple[Callback, ...] = ()
    current_node: Optional[str] = None
    path: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def is_suspended(self) -> bool:
        return self.status == "SUSPENDED"


class AuthTree:
    """Wires node outcomes to the next node id or a terminal."""

    # Guard against wiring loops
    MAX_STEPS = 100

    def __init__(
        self,
        start: str,
        nodes: Dict[str, Node],
        wiring: Dict[str, Dict[str, str]],
        resources: Sequence[Any] = (),
    ):
        """Initialize and validate the tree.

        Args:
            start: Id of the first node
            nodes: Node instances by id
            wiring: For each node id, outcome id -> next node id or terminal
            resources: Objects with a close() method owned by the tree

        Raises:
            ConfigurationError: If the wiring is incomplete or dangling
        """
        self.start_node = start
        self.nodes = dict(nodes)
        self.wiring = {node_id: dict(outcomes) for node_id, outcomes in wiring.items()}
        self._resources = tuple(resources)
        self._validate()

    def _validate(self) -> None:
        if self.start_node not in self.nodes:
            raise ConfigurationError(f"Start node '{self.start_node}' is not defined")

        for node_id, node in self.nodes.items():
            wired = self.wiring.get(node_id, {})
            for outcome in node.outcome_ids(node.config):
                if outcome not in wired:
                    raise ConfigurationError(
                        f"Outcome '{outcome}' of node '{node_id}' is not wired",
                        details={"node": node_id, "outcome": outcome},
                    )
            for outcome, target in wired.items():
                if target not in self.nodes and target not in TERMINALS:
                    raise ConfigurationError(
                        f"Outcome '{outcome}' of node '{node_id}' points at unknown "
                        f"node '{target}'",
                        details={"node": node_id, "outcome": outcome, "target": target},
                    )

    def start(self, shared_state: Optional[SharedState] = None) -> TreeResult:
        """Begin a new authentication attempt."""
        context = TreeContext(shared_state=shared_state if shared_state is not None else SharedState())
        return self._run(self.start_node, context, [])

    def resume(self, suspended: TreeResult, callbacks: Sequence[Callback]) -> TreeResult:
        """Continue a suspended attempt with the callbacks the client returned."""
        if not suspended.is_suspended or suspended.current_node is None:
            raise ValueError("Only a suspended attempt can be resumed")
        context = TreeContext(shared_state=suspended.shared_state, callbacks=tuple(callbacks))
        return self._run(suspended.current_node, context, list(suspended.path))

    def _run(self, node_id: str, context: TreeContext, path: List[Tuple[str, str]]) -> TreeResult:
        for _ in range(self.MAX_STEPS):
            node = self.nodes[node_id]
            action = node.process(context)

            if action.is_suspended:
                logger.debug(f"Node '{node_id}' suspended for client input")
                return TreeResult(
                    status="SUSPENDED",
                    shared_state=action.shared_state,
                    callbacks=action.callbacks,
                    current_node=node_id,
                    path=path,
                )

            path.append((node_id, action.outcome))
            target = self.wiring[node_id].get(action.outcome)
            if target is None:
                raise ConfigurationError(
                    f"Node '{node_id}' selected unwired outcome '{action.outcome}'",
                    details={"node": node_id, "outcome": action.outcome},
                )
            if target in TERMINALS:
                logger.info(f"Tree finished with {target} via {node_id}:{action.outcome}")
                return TreeResult(status=target, shared_state=action.shared_state, path=path)

            node_id = target
            context = TreeContext(shared_state=action.shared_state)

        raise ConfigurationError(f"Tree exceeded {self.MAX_STEPS} steps; check for loops")

    def close(self) -> None:
        """Release the nodes' clients and any resources owned by the tree."""
        for node in self.nodes.values():
            node.close()
        for resource in self._resources:
            resource.close()

    def __enter__(self) -> "AuthTree":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
