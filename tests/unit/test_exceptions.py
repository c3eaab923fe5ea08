"""Unit tests for the error taxonomy."""

import httpx
import pytest

from elevenlabs_sfx.exceptions import (
    APIError,
    AuthenticationError,
    ParseError,
    QuotaExceededError,
    RateLimitError,
    RequestError,
    SoundEffectsError,
    ValidationError,
    error_from_status,
)


class TestErrorRendering:
    """Tests for str() of each error kind."""

    def test_request_error(self):
        """Should prefix the transport error description."""
        cause = httpx.ConnectError("connection refused")
        error = RequestError(cause)

        assert str(error) == "Request failed: connection refused"

    def test_api_error(self):
        """Should include status and message."""
        error = APIError(503, "upstream unavailable")

        assert str(error) == "API error (503): upstream unavailable"
        assert error.status_code == 503
        assert error.details == {"status_code": 503}

    def test_parse_error(self):
        """Should prefix the decode error description."""
        cause = ValueError("Expecting value: line 1 column 1 (char 0)")
        error = ParseError(cause)

        assert str(error) == "Failed to parse response: Expecting value: line 1 column 1 (char 0)"

    def test_authentication_error(self):
        assert str(AuthenticationError("Invalid API key")) == "Authentication failed: Invalid API key"

    def test_rate_limit_without_retry_after(self):
        """Should omit the retry hint when retry_after is unknown."""
        error = RateLimitError("Too many requests")

        assert str(error) == "Rate limit exceeded: Too many requests"
        assert error.retry_after is None

    def test_rate_limit_with_retry_after(self):
        """Should include the retry hint when retry_after is known."""
        error = RateLimitError("Too many requests", retry_after=30)

        assert str(error) == "Rate limit exceeded (retry in 30s): Too many requests"

    def test_quota_exceeded_error(self):
        assert str(QuotaExceededError("Insufficient credits")) == "Quota exceeded: Insufficient credits"

    def test_validation_error(self):
        """Should mention both the kind and the message."""
        display = str(ValidationError("Invalid output format"))

        assert "Validation error" in display
        assert "Invalid output format" in display


class TestErrorCauses:
    """Tests for cause chaining."""

    def test_request_error_keeps_cause(self):
        """Should expose the transport error as cause and __cause__."""
        cause = httpx.ReadTimeout("timed out")
        error = RequestError(cause)

        assert error.cause is cause
        assert error.__cause__ is cause
        assert error.details == {"cause": "ReadTimeout"}

    def test_parse_error_keeps_cause(self):
        cause = ValueError("bad json")
        error = ParseError(cause)

        assert error.cause is cause
        assert error.__cause__ is cause

    def test_status_errors_have_no_cause(self):
        """Status-derived errors should not carry a chained cause."""
        assert AuthenticationError("Invalid API key").__cause__ is None
        assert APIError(500, "boom").__cause__ is None

    def test_all_errors_share_base(self):
        """Should allow catching every kind through the base class."""
        errors = [
            RequestError(httpx.ConnectError("x")),
            APIError(500, "x"),
            ParseError(ValueError("x")),
            AuthenticationError("x"),
            RateLimitError("x"),
            QuotaExceededError("x"),
            ValidationError("x"),
        ]

        for error in errors:
            assert isinstance(error, SoundEffectsError)

    def test_raise_from_preserves_rendering(self):
        """Chaining with raise-from should not change the message."""
        cause = httpx.ConnectError("dns lookup failed")

        with pytest.raises(RequestError) as exc_info:
            raise RequestError(cause) from cause

        assert str(exc_info.value) == "Request failed: dns lookup failed"
        assert exc_info.value.__cause__ is cause


class TestErrorFromStatus:
    """Tests for status code classification."""

    def test_401(self):
        error = error_from_status(401, '{"detail": "invalid key"}')

        assert isinstance(error, AuthenticationError)
        assert error.message == "Invalid API key"
        assert "Authentication failed" in str(error)

    def test_402(self):
        error = error_from_status(402, "")

        assert isinstance(error, QuotaExceededError)
        assert str(error) == "Quota exceeded: Insufficient credits"

    def test_429(self):
        """Should never include a retry time."""
        error = error_from_status(429, "slow down")

        assert isinstance(error, RateLimitError)
        assert error.retry_after is None
        assert str(error) == "Rate limit exceeded: Too many requests"
        assert "retry in" not in str(error)

    @pytest.mark.parametrize("status_code", [400, 403, 404, 422, 500, 502, 503])
    def test_other_statuses(self, status_code):
        """Should fall through to APIError with the body as message."""
        error = error_from_status(status_code, "body text")

        assert type(error) is APIError
        assert str(error) == f"API error ({status_code}): body text"

    def test_is_pure(self):
        """Same input should give equal results on every call."""
        first = error_from_status(500, "boom")
        second = error_from_status(500, "boom")

        assert first is not second
        assert str(first) == str(second)
