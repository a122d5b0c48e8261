"""Unit tests for domain enums and error types."""

import pytest

from hotel_voice_assistant.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ExternalServiceError,
    InvalidStatusError,
    NotFoundError,
    ServiceUnavailableError,
    ValidationFailedError,
)
from hotel_voice_assistant.core.models.domain import (
    DeliveryTime,
    OrderStatus,
    StaffRequestStatus,
    parse_status,
)


class TestDeliveryTime:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("asap", "15-20 minutes"),
            ("30min", "30 minutes"),
            ("1hour", "1 hour"),
            ("specific", "at the requested time"),
        ],
    )
    def test_estimated_time(self, value, expected):
        assert DeliveryTime(value).estimated_time == expected


class TestParseStatus:
    def test_known_order_status(self):
        assert parse_status(OrderStatus, "in_progress") is OrderStatus.in_progress

    def test_staff_status_is_case_sensitive(self):
        assert parse_status(StaffRequestStatus, "Doing") is StaffRequestStatus.doing
        with pytest.raises(InvalidStatusError):
            parse_status(StaffRequestStatus, "doing")

    def test_unknown_status_lists_allowed_values(self):
        with pytest.raises(InvalidStatusError) as exc_info:
            parse_status(OrderStatus, "teleported")

        err = exc_info.value
        assert err.status_code == 400
        assert err.status == "teleported"
        assert "pending" in err.details["allowed"]
        assert len(err.details["allowed"]) == 6


class TestErrors:
    @pytest.mark.parametrize(
        "exc,status",
        [
            (NotFoundError("Order", 1), 404),
            (ValidationFailedError("bad"), 400),
            (AuthenticationError("missing"), 401),
            (AuthorizationError("expired"), 403),
            (ServiceUnavailableError("off"), 503),
            (ExternalServiceError("upstream"), 502),
        ],
    )
    def test_status_codes(self, exc, status):
        assert exc.status_code == status

    def test_not_found_message(self):
        err = NotFoundError("Staff request", 12)

        assert err.message == "Staff request 12 not found"
        assert str(err) == "Staff request 12 not found"

    def test_external_error_keeps_upstream_status_separate(self):
        err = ExternalServiceError("Failed", status_code=404, details="nope")

        assert err.status_code == 502
        assert err.upstream_status == 404
        assert err.details == "nope"
