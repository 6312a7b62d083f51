"""ThreatMetrix authentication nodes.

NODE_TYPES maps the node type names used in tree definitions to node classes.
"""

from typing import Dict, Type

from tmx_nodes.core.base import Node
from tmx_nodes.nodes.profiler import ProfilerNode, ProfilerConfig
from tmx_nodes.nodes.session_query import SessionQueryNode, SessionQueryConfig
from tmx_nodes.nodes.policy_score import PolicyScoreNode, PolicyScoreConfig, PolicyScoreOutcome
from tmx_nodes.nodes.reason_code import ReasonCodeNode, ReasonCodeConfig, NONE_TRIGGERED
from tmx_nodes.nodes.review_status import ReviewStatusNode, ReviewStatusConfig, ReviewStatusOutcome
from tmx_nodes.nodes.update_review import UpdateReviewNode, UpdateReviewConfig

NODE_TYPES: Dict[str, Type[Node]] = {
    node_class.name: node_class
    for node_class in (
        ProfilerNode,
        SessionQueryNode,
        PolicyScoreNode,
        ReasonCodeNode,
        ReviewStatusNode,
        UpdateReviewNode,
    )
}

# Nodes that call the risk service and accept a shared client
CLIENT_NODES = (SessionQueryNode, UpdateReviewNode)

__all__ = [
    "NODE_TYPES",
    "CLIENT_NODES",
    "ProfilerNode",
    "ProfilerConfig",
    "SessionQueryNode",
    "SessionQueryConfig",
    "PolicyScoreNode",
    "PolicyScoreConfig",
    "PolicyScoreOutcome",
    "ReasonCodeNode",
    "ReasonCodeConfig",
    "NONE_TRIGGERED",
    "ReviewStatusNode",
    "ReviewStatusConfig",
    "ReviewStatusOutcome",
    "UpdateReviewNode",
    "UpdateReviewConfig",
]
