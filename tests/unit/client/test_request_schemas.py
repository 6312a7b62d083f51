"""Unit tests for request schemas and wire enums."""

import pydantic
import pytest

from tmx_nodes.client.enums import (
    EventType,
    FinalReviewStatus,
    ServiceType,
    TrustTagContext,
    TrustTagName,
)
from tmx_nodes.client.schemas import RiskQueryRequest, UpdateReviewRequest


class TestWireEnums:
    """Enum values are the exact wire strings."""

    def test_service_type_values(self):
        assert [s.value for s in ServiceType] == [
            "session-policy", "device", "did", "ip", "session", "All", "3ds",
        ]

    def test_event_type_count(self):
        assert len(EventType) == 24
        assert EventType.PASSWORD_RESET.value == "PASSWORD_RESET"

    def test_final_review_status_values(self):
        assert [s.value for s in FinalReviewStatus] == ["none", "pass", "review", "reject"]

    def test_trust_tags_keep_leading_underscore(self):
        assert TrustTagName.LOGIN_PASSED.value == "_LOGIN_PASSED"
        assert TrustTagContext.T_TOR.value == "_T_TOR"
        assert TrustTagName.NONE.value == "NONE"

    def test_str_is_wire_value(self):
        assert str(ServiceType.THREE_DS) == "3ds"


class TestRiskQueryRequest:

    def test_form_field_order(self):
        request = RiskQueryRequest(
            org_id="org", api_key="key", session_id="sess",
            service_type=ServiceType.DEVICE, event_type=EventType.PAYMENT, policy="strict",
        )
        assert request.to_form() == [
            ("org_id", "org"),
            ("api_key", "key"),
            ("session_id", "sess"),
            ("service_type", "device"),
            ("event_type", "PAYMENT"),
            ("policy", "strict"),
        ]

    def test_extra_parameters_appended(self):
        request = RiskQueryRequest(
            org_id="org", api_key="key", session_id="sess",
            extra_parameters={"account_login": "alice", "input_ip_address": "10.0.0.1"},
        )
        form = request.to_form()
        assert form[-2:] == [("account_login", "alice"), ("input_ip_address", "10.0.0.1")]

    def test_api_key_hidden_in_repr(self):
        request = RiskQueryRequest(org_id="org", api_key="super-secret", session_id="sess")
        assert "super-secret" not in repr(request)

    def test_empty_session_id_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            RiskQueryRequest(org_id="org", api_key="key", session_id="")


class TestUpdateReviewRequest:

    def test_minimal_form(self):
        request = UpdateReviewRequest(org_id="org", api_key="key", request_id="req")
        assert request.to_form() == [
            ("org_id", "org"),
            ("api_key", "key"),
            ("request_id", "req"),
            ("action", "update_review_status"),
        ]

    def test_full_form(self):
        request = UpdateReviewRequest(
            org_id="org", api_key="key", request_id="req",
            final_review_status=FinalReviewStatus.REJECT,
            notes="confirmed fraud",
            tag_name=TrustTagName.FRAUD_IDENTITY,
            tag_context=TrustTagContext.A_SMS,
            line_of_business="retail",
        )
        assert request.to_form()[4:] == [
            ("final_review_status", "reject"),
            ("notes", "confirmed fraud"),
            ("tag_name", "_FRAUD_IDENTITY"),
            ("tag_context", "_A_SMS"),
            ("line_of_business", "retail"),
        ]

    def test_tag_name_without_context_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            UpdateReviewRequest(
                org_id="org", api_key="key", request_id="req",
                tag_name=TrustTagName.WATCH,
            )
