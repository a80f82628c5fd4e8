"""Tests for mapping terminal transport failures onto client errors."""

import pytest

from notification_sdk.dispatch.classifier import classify, error_kind_for_status
from notification_sdk.exceptions import (
    AuthenticationError,
    ErrorKind,
    GenericClientError,
    NotificationClientError,
    NotificationNotFoundError,
    NotificationResponseError,
    NotificationValidationError,
    RateLimitExceededError,
    ServiceUnavailableError,
)
from notification_sdk.transport.exceptions import TransportResponseError

from tests.helpers import connection_error, http_error, timeout_error


class TestErrorKindForStatus:
    """Tests for error_kind_for_status."""

    @pytest.mark.parametrize(
        "status, kind",
        [
            (400, ErrorKind.VALIDATION),
            (401, ErrorKind.AUTHENTICATION),
            (404, ErrorKind.NOT_FOUND),
            (429, ErrorKind.RATE_LIMIT_EXCEEDED),
            (502, ErrorKind.SERVICE_UNAVAILABLE),
            (503, ErrorKind.SERVICE_UNAVAILABLE),
            (504, ErrorKind.SERVICE_UNAVAILABLE),
            (403, ErrorKind.GENERIC),
            (408, ErrorKind.GENERIC),
            (409, ErrorKind.GENERIC),
            (500, ErrorKind.GENERIC),
            (None, ErrorKind.GENERIC),
        ],
    )
    def test_status_mapping(self, status, kind):
        assert error_kind_for_status(status) == kind


class TestClassify:
    """Tests for classify."""

    def test_bad_request_is_server_side_validation(self):
        error = classify(http_error(400, "templateId: must not be blank"))

        assert isinstance(error, NotificationValidationError)
        assert error.message == "templateId: must not be blank"
        assert error.status_code == 400
        assert error.server_side is True

    def test_unauthorized_uses_fixed_message(self):
        error = classify(http_error(401, "token expired for tenant 42"))

        assert isinstance(error, AuthenticationError)
        assert error.message == "Invalid or missing API key"
        assert str(error) == "Invalid or missing API key"
        assert error.body == "token expired for tenant 42"
        assert error.status_code == 401

    def test_not_found(self):
        error = classify(http_error(404, "Notification not found"))

        assert isinstance(error, NotificationNotFoundError)
        assert error.kind == ErrorKind.NOT_FOUND
        assert error.message == "Notification not found"

    def test_rate_limited(self):
        error = classify(http_error(429, "slow down"))

        assert isinstance(error, RateLimitExceededError)
        assert error.message == "Rate limit exceeded"
        assert error.body == "slow down"

    @pytest.mark.parametrize("status", [502, 503, 504])
    def test_gateway_failures_are_service_unavailable(self, status):
        error = classify(http_error(status, "upstream down"))

        assert isinstance(error, ServiceUnavailableError)
        assert error.status_code == status
        assert error.body == "upstream down"

    @pytest.mark.parametrize("status", [403, 408, 409, 500])
    def test_other_statuses_are_generic(self, status):
        error = classify(http_error(status, "nope"))

        assert isinstance(error, GenericClientError)
        assert error.kind == ErrorKind.GENERIC
        assert error.status_code == status
        assert error.message == "nope"

    def test_empty_body_falls_back_to_failure_message(self):
        error = classify(http_error(500, ""))
        assert error.message == "HTTP 500"

    def test_connection_failures_are_generic_without_status(self):
        for failure in (timeout_error(), connection_error()):
            error = classify(failure)
            assert isinstance(error, GenericClientError)
            assert error.status_code is None
            assert error.body is None

    def test_malformed_body(self):
        error = classify(TransportResponseError("Failed to parse JSON response"))
        assert isinstance(error, NotificationResponseError)

    def test_every_error_is_a_client_error(self):
        for status in (400, 401, 404, 429, 503, 418):
            assert isinstance(classify(http_error(status)), NotificationClientError)
