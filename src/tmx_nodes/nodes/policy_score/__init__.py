"""Policy Score node."""

from tmx_nodes.nodes.policy_score.node import PolicyScoreNode, parse_policy_score
from tmx_nodes.nodes.policy_score.schema import PolicyScoreConfig, PolicyScoreOutcome

__all__ = ["PolicyScoreNode", "PolicyScoreConfig", "PolicyScoreOutcome", "parse_policy_score"]
