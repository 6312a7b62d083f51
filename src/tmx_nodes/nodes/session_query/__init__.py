"""Session Query node."""

from tmx_nodes.nodes.session_query.node import SessionQueryNode
from tmx_nodes.nodes.session_query.schema import SessionQueryConfig

__all__ = ["SessionQueryNode", "SessionQueryConfig"]
