"""Update Review Node Configuration Schema."""

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator

from tmx_nodes.client.enums import FinalReviewStatus, TrustTagContext, TrustTagName
from tmx_nodes.common.config.settings import get_settings
from tmx_nodes.common.exceptions import ConfigurationError


def check_trust_tag_pair(tag_name: TrustTagName, tag_context: TrustTagContext) -> None:
    """A trust tag name needs a context.

    Raises:
        ConfigurationError: If a tag name is set but its context is NONE
    """
    if tag_name != TrustTagName.NONE and tag_context == TrustTagContext.NONE:
        raise ConfigurationError(
            "Trust Tag Name set to a value other than None, but Trust Tag Context "
            "is set to None. Please set a value for Trust Tag Context",
            details={"trust_tag_name": tag_name.value},
        )


class UpdateReviewConfig(BaseModel):
    """Configuration for the ThreatMetrix Update Review node."""

    api_key: SecretStr = Field(..., description="ThreatMetrix API key")
    final_review_status: FinalReviewStatus = Field(
        default=FinalReviewStatus.PASS,
        description="Status the transaction is updated to; none omits it"
    )
    notes: str = Field(default="", description="Optional notes on why the status changed")
    trust_tag_name: TrustTagName = Field(default=TrustTagName.NONE)
    trust_tag_context: TrustTagContext = Field(
        default=TrustTagContext.NONE,
        description="Mandatory when a trust tag name is set"
    )
    line_of_business: str = Field(default="")
    uri: str = Field(
        default_factory=lambda: get_settings().update_uri,
        description="Update endpoint"
    )
    wait_for_response: bool = Field(
        default=False,
        description="Block on the update and store update_response instead of "
                    "dispatching it in the background"
    )

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="after")
    def _check_trust_tag(self) -> "UpdateReviewConfig":
        check_trust_tag_pair(self.trust_tag_name, self.trust_tag_context)
        return self
