"""Request schemas for the ThreatMetrix API.

Pydantic models built fresh for every node invocation and never persisted.
The API key is held as a SecretStr so it never appears in reprs or logs.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator

from tmx_nodes.client.enums import (
    EventType,
    FinalReviewStatus,
    ServiceType,
    TrustTagContext,
    TrustTagName,
)
from tmx_nodes.common.constants import FormFields

FormBody = List[Tuple[str, str]]


class RiskQueryRequest(BaseModel):
    """Session query sent after the profiler has run on the device."""

    model_config = ConfigDict(frozen=True)

    org_id: str = Field(..., min_length=1, description="ThreatMetrix organization id")
    api_key: SecretStr = Field(..., description="API key for the organization")
    session_id: str = Field(..., min_length=1, description="Profiling session id")
    service_type: ServiceType = Field(default=ServiceType.SESSION_POLICY)
    event_type: EventType = Field(default=EventType.LOGIN)
    policy: str = Field(default="default", description="Policy used to score the session")
    extra_parameters: Dict[str, str] = Field(
        default_factory=dict,
        description="Additional form fields forwarded from shared state"
    )

    def to_form(self) -> FormBody:
        """Encode as ordered form fields."""
        form = [
            (FormFields.ORG_ID, self.org_id),
            (FormFields.API_KEY, self.api_key.get_secret_value()),
            (FormFields.SESSION_ID, self.session_id),
            (FormFields.SERVICE_TYPE, self.service_type.value),
            (FormFields.EVENT_TYPE, self.event_type.value),
            (FormFields.POLICY, self.policy),
        ]
        form.extend(self.extra_parameters.items())
        return form


class UpdateReviewRequest(BaseModel):
    """Feedback on a previously scored transaction."""

    model_config = ConfigDict(frozen=True)

    org_id: str = Field(..., min_length=1)
    api_key: SecretStr = Field(...)
    request_id: str = Field(..., min_length=1, description="request_id of the session query")
    final_review_status: Optional[FinalReviewStatus] = Field(default=None)
    notes: Optional[str] = Field(default=None)
    tag_name: Optional[TrustTagName] = Field(default=None)
    tag_context: Optional[TrustTagContext] = Field(default=None)
    line_of_business: Optional[str] = Field(default=None)

    @model_validator(mode="after")
    def _check_trust_tag_pair(self) -> "UpdateReviewRequest":
        if (self.tag_name is None) != (self.tag_context is None):
            raise ValueError("tag_name and tag_context must be sent together")
        return self

    @property
    def action(self) -> str:
        return FormFields.UPDATE_REVIEW_STATUS

    def to_form(self) -> FormBody:
        """Encode as ordered form fields, omitting unset optionals."""
        form = [
            (FormFields.ORG_ID, self.org_id),
            (FormFields.API_KEY, self.api_key.get_secret_value()),
            (FormFields.REQUEST_ID, self.request_id),
            (FormFields.ACTION, self.action),
        ]
        if self.final_review_status is not None:
            form.append((FormFields.FINAL_REVIEW_STATUS, self.final_review_status.value))
        if self.notes:
            form.append((FormFields.NOTES, self.notes))
        if self.tag_name is not None and self.tag_context is not None:
            form.append((FormFields.TAG_NAME, self.tag_name.value))
            form.append((FormFields.TAG_CONTEXT, self.tag_context.value))
        if self.line_of_business:
            form.append((FormFields.LINE_OF_BUSINESS, self.line_of_business))
        return form
