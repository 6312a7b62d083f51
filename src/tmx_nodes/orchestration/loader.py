"""Tree Loader - builds an AuthTree from a YAML definition.

Example:

    start: profiler
    nodes:
      profiler:
        type: ThreatMetrixProfilerNode
        config: {org_id: abcd1234, page_id: "1"}
        outcomes: {outcome: query}
      query:
        type: ThreatMetrixSessionQueryNode
        config: {api_key: "${TMX_API_KEY}"}
        outcomes: {outcome: SUCCESS}

String values in node config may reference environment variables as ${VAR};
an unset variable is a configuration error.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

import pydantic
import yaml
from pydantic import BaseModel, Field

from tmx_nodes.client.http import RiskServiceClient
from tmx_nodes.common.exceptions import ConfigurationError
from tmx_nodes.core.base import Node
from tmx_nodes.nodes import CLIENT_NODES, NODE_TYPES
from tmx_nodes.orchestration.tree import AuthTree


class NodeDefinition(BaseModel):
    """One node of a tree definition."""
    type: str = Field(..., description="Node type name, e.g. ThreatMetrixProfilerNode")
    config: Dict[str, Any] = Field(default_factory=dict)
    outcomes: Dict[str, str] = Field(default_factory=dict)


class TreeDefinition(BaseModel):
    """A complete tree definition."""
    start: str
    nodes: Dict[str, NodeDefinition]


_ENV_REFERENCE = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _expand_env(value: Any) -> Any:
    """Substitute ${VAR} references from the environment.

    Raises:
        ConfigurationError: If a referenced variable is not set
    """
    if isinstance(value, str):
        missing = [name for name in _ENV_REFERENCE.findall(value) if name not in os.environ]
        if missing:
            raise ConfigurationError(
                f"Environment variable(s) not set: {', '.join(missing)}",
                details={"missing": missing},
            )
        return _ENV_REFERENCE.sub(lambda m: os.environ[m.group(1)], value)
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    if isinstance(value, dict):
        return {key: _expand_env(item) for key, item in value.items()}
    return value


def load_tree_config(path: Union[str, Path]) -> TreeDefinition:
    """Load and validate a tree definition from YAML."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Tree definition not found: {path}")

    with open(path, "r") as f:
        raw_config = yaml.safe_load(f)

    try:
        return TreeDefinition.model_validate(raw_config)
    except pydantic.ValidationError as e:
        raise ConfigurationError(
            f"Invalid tree definition in {path}",
            details={"errors": e.errors(include_url=False)},
        ) from e


def build_node(definition: NodeDefinition, client: Optional[RiskServiceClient] = None) -> Node:
    """Instantiate one node from its definition."""
    node_class = NODE_TYPES.get(definition.type)
    if node_class is None:
        raise ConfigurationError(
            f"Unknown node type '{definition.type}'",
            details={"known_types": sorted(NODE_TYPES)},
        )

    try:
        config = node_class.config_class.model_validate(_expand_env(definition.config))
    except pydantic.ValidationError as e:
        raise ConfigurationError(
            f"Invalid configuration for {definition.type}",
            details={"errors": e.errors(include_url=False, include_input=False)},
        ) from e

    if node_class in CLIENT_NODES:
        return node_class(config, client=client)
    return node_class(config)


def build_tree(
    definition: TreeDefinition,
    client: Optional[RiskServiceClient] = None,
) -> AuthTree:
    """Build an AuthTree, sharing one risk service client between nodes.

    A client created here is owned by the tree and closed with it.
    """
    owned = () if client is not None else (RiskServiceClient(),)
    client = client or owned[0]
    nodes = {
        node_id: build_node(node_definition, client)
        for node_id, node_definition in definition.nodes.items()
    }
    wiring = {
        node_id: node_definition.outcomes
        for node_id, node_definition in definition.nodes.items()
    }
    return AuthTree(definition.start, nodes, wiring, resources=owned)
