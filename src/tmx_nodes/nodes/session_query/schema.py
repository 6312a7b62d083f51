"""Session Query Node Configuration Schema."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from tmx_nodes.client.enums import EventType, ServiceType
from tmx_nodes.common.config.settings import get_settings
from tmx_nodes.common.constants import ServiceConstants


class SessionQueryConfig(BaseModel):
    """Configuration for the ThreatMetrix Session Query node."""

    api_key: SecretStr = Field(..., description="ThreatMetrix API key")
    service_type: ServiceType = Field(
        default=ServiceType.SESSION_POLICY,
        description="Restricts which output fields are returned"
    )
    event_type: EventType = Field(
        default=EventType.LOGIN,
        description="Type of transaction or event"
    )
    policy: str = Field(
        default=ServiceConstants.DEFAULT_POLICY,
        min_length=1,
        description="Policy used for the query"
    )
    uri: str = Field(
        default_factory=lambda: get_settings().session_query_uri,
        description="Session query endpoint"
    )
    add_shared_state_variables_to_request: bool = Field(
        default=False,
        description="Forward tmx_session_query_parameters from shared state"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")
