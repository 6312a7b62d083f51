"""Remote risk service client."""

from tmx_nodes.client.enums import (
    EventType,
    FinalReviewStatus,
    ServiceType,
    TrustTagContext,
    TrustTagName,
)
from tmx_nodes.client.schemas import RiskQueryRequest, UpdateReviewRequest
from tmx_nodes.client.http import RiskServiceClient

__all__ = [
    "EventType",
    "FinalReviewStatus",
    "ServiceType",
    "TrustTagContext",
    "TrustTagName",
    "RiskQueryRequest",
    "UpdateReviewRequest",
    "RiskServiceClient",
]
