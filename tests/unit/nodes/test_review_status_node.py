"""Tests for the Review Status node."""

import pytest

from tmx_nodes.common.exceptions import MalformedResponseError, MissingStateError
from tmx_nodes.core.types import TreeContext
from tmx_nodes.nodes.review_status import ReviewStatusNode
from tests.fixtures.tmx import state_with_response


@pytest.fixture
def node():
    return ReviewStatusNode()


class TestReviewStatusMapping:
    """Mapping of review_status to outcomes."""

    @pytest.mark.parametrize("value, expected", [
        ("pass", "PASS"),
        ("challenge", "CHALLENGE"),
        ("review", "REVIEW"),
        ("reject", "REJECT"),
    ])
    def test_known_values(self, node, value, expected):
        action = node.process(TreeContext(state_with_response(review_status=value)))
        assert action.outcome == expected

    @pytest.mark.parametrize("value", ["garbage", "PASS", "Pass", " pass"])
    def test_unknown_values_reject(self, node, value):
        """Test anything but an exact known value fails closed."""
        action = node.process(TreeContext(state_with_response(review_status=value)))
        assert action.outcome == "REJECT"

    def test_outcomes(self):
        assert ReviewStatusNode.outcome_ids() == ["PASS", "CHALLENGE", "REVIEW", "REJECT"]


class TestReviewStatusMissing:

    @pytest.mark.parametrize("response", [{}, {"review_status": None}, {"review_status": ""}])
    def test_missing_review_status(self, node, response):
        """Test the error names the service types that return review_status."""
        with pytest.raises(MissingStateError) as exc_info:
            node.process(TreeContext(state_with_response(**response)))

        assert exc_info.value.key == "review_status"
        assert "Session-Policy" in exc_info.value.message

    def test_non_string_review_status(self, node):
        with pytest.raises(MalformedResponseError):
            node.process(TreeContext(state_with_response(review_status=["pass"])))
