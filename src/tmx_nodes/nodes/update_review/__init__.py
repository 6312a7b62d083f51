"""Update Review node."""

from tmx_nodes.nodes.update_review.node import UpdateReviewNode
from tmx_nodes.nodes.update_review.schema import UpdateReviewConfig, check_trust_tag_pair

__all__ = ["UpdateReviewNode", "UpdateReviewConfig", "check_trust_tag_pair"]
