"""Profiler Node Configuration Schema."""

from pydantic import BaseModel, ConfigDict, Field

from tmx_nodes.common.config.settings import get_settings


class ProfilerConfig(BaseModel):
    """Configuration for the ThreatMetrix Profiler node."""

    org_id: str = Field(..., min_length=1, description="ThreatMetrix organization id")
    page_id: str = Field(..., min_length=1, description="ThreatMetrix page id")
    uri: str = Field(
        default_factory=lambda: get_settings().profiler_uri,
        description="Profiler base URI, without the .js suffix"
    )
    use_client_generated_session_id: bool = Field(
        default=False,
        description="Take the session id returned by the client instead of the generated one"
    )

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "org_id": "abcd1234",
                "page_id": "1",
                "uri": "https://h.online-metrix.net/fp/yshd",
                "use_client_generated_session_id": False,
            }
        },
    )
