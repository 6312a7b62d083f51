"""Orchestration - reference tree host and YAML loader."""

from tmx_nodes.orchestration.tree import AuthTree, TreeResult, SUCCESS, FAILURE
from tmx_nodes.orchestration.loader import (
    NodeDefinition,
    TreeDefinition,
    build_node,
    build_tree,
    load_tree_config,
)

__all__ = [
    "AuthTree",
    "TreeResult",
    "SUCCESS",
    "FAILURE",
    "NodeDefinition",
    "TreeDefinition",
    "build_node",
    "build_tree",
    "load_tree_config",
]
