"""Reason Code node."""

from tmx_nodes.nodes.reason_code.node import ReasonCodeNode
from tmx_nodes.nodes.reason_code.schema import NONE_TRIGGERED, ReasonCodeConfig

__all__ = ["ReasonCodeNode", "ReasonCodeConfig", "NONE_TRIGGERED"]
