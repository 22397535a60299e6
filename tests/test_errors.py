import pytest

import zendesk_sdk
from zendesk_sdk import (
    APIError,
    ConfigurationError,
    DecodeError,
    InvalidURLError,
    NetworkError,
    RateLimitError,
    TimeoutError,
    UnauthorizedError,
    ValidationError,
    ZendeskError,
)


class TestErrorTaxonomy:
    """Test error attributes and rendering."""

    def test_api_error_str(self):
        error = APIError(404, "RecordNotFound")

        assert str(error) == "HTTP 404: RecordNotFound"
        assert error.code == "API_ERROR"

    def test_details_in_str(self):
        error = DecodeError("Response does not match TicketResponse", details="ticket: field required")

        assert str(error) == "Response does not match TicketResponse - ticket: field required"

    def test_timeout_is_network_error(self):
        error = TimeoutError("timed out", timeout=5.0, url="https://acme.zendesk.com/api/v2/x.json")

        assert isinstance(error, NetworkError)
        assert error.timeout == 5.0
        assert error.code == "TIMEOUT"

    def test_rate_limit_defaults(self):
        error = RateLimitError()

        assert error.status_code == 429
        assert error.retry_after is None

    @pytest.mark.parametrize(
        "error",
        [
            APIError(500, "x"),
            ConfigurationError("x"),
            DecodeError("x"),
            InvalidURLError("x"),
            NetworkError("x"),
            RateLimitError(),
            UnauthorizedError(),
            ValidationError("x"),
        ],
    )
    def test_all_errors_share_base(self, error):
        assert isinstance(error, ZendeskError)
        assert zendesk_sdk.is_zendesk_error(error)


class TestErrorPredicates:
    """Test the is_* convenience checks."""

    def test_predicates(self):
        assert zendesk_sdk.is_unauthorized_error(UnauthorizedError())
        assert zendesk_sdk.is_rate_limit_error(RateLimitError())
        assert zendesk_sdk.is_api_error(APIError(400, "x"))
        assert zendesk_sdk.is_network_error(TimeoutError("x"))
        assert zendesk_sdk.is_timeout_error(TimeoutError("x"))
        assert not zendesk_sdk.is_timeout_error(NetworkError("x"))
        assert zendesk_sdk.is_validation_error(ValidationError("x"))
        assert zendesk_sdk.is_config_error(ConfigurationError("x"))
        assert zendesk_sdk.is_decode_error(DecodeError("x"))
        assert not zendesk_sdk.is_zendesk_error(ValueError("x"))
