"""Review Status node."""

from tmx_nodes.nodes.review_status.node import ReviewStatusNode
from tmx_nodes.nodes.review_status.schema import ReviewStatusConfig, ReviewStatusOutcome

__all__ = ["ReviewStatusNode", "ReviewStatusConfig", "ReviewStatusOutcome"]
