"""Custom exceptions for the ElevenLabs sound effects client."""

from typing import Optional


class SoundEffectsError(Exception):
    """Base exception for sound effects client errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class RequestError(SoundEffectsError):
    """HTTP request failed before any response was received.

    Covers connection, DNS and timeout failures raised by the transport.
    """

    def __init__(self, cause: BaseException):
        super().__init__(str(cause), details={"cause": type(cause).__name__})
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"Request failed: {self.cause}"


class APIError(SoundEffectsError):
    """API returned a non-success status that has no dedicated error."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message, details={"status_code": status_code})
        self.status_code = status_code

    def __str__(self) -> str:
        return f"API error ({self.status_code}): {self.message}"


class ParseError(SoundEffectsError):
    """Response body could not be parsed."""

    def __init__(self, cause: BaseException):
        super().__init__(str(cause), details={"cause": type(cause).__name__})
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return f"Failed to parse response: {self.cause}"


class AuthenticationError(SoundEffectsError):
    """Invalid API key or authentication failed."""

    def __str__(self) -> str:
        return f"Authentication failed: {self.message}"


class RateLimitError(SoundEffectsError):
    """Rate limit exceeded."""

    def __init__(self, message: str, retry_after: Optional[int] = None):
        super().__init__(message, details={"retry_after": retry_after})
        self.retry_after = retry_after

    def __str__(self) -> str:
        if self.retry_after is not None:
            return f"Rate limit exceeded (retry in {self.retry_after}s): {self.message}"
        return f"Rate limit exceeded: {self.message}"


class QuotaExceededError(SoundEffectsError):
    """Account does not have enough credits for the request."""

    def __str__(self) -> str:
        return f"Quota exceeded: {self.message}"


class ValidationError(SoundEffectsError):
    """Invalid input parameters, detected before any network call."""

    def __str__(self) -> str:
        return f"Validation error: {self.message}"


def error_from_status(status_code: int, body: str) -> SoundEffectsError:
    """Map a non-success HTTP status to the matching error.

    Args:
        status_code: HTTP status of the response.
        body: Response body text, used as the message for unclassified statuses.

    Returns:
        The error to raise for this response.
    """
    if status_code == 401:
        return AuthenticationError("Invalid API key")
    if status_code == 429:
        # Retry-After is not read yet
        return RateLimitError("Too many requests", retry_after=None)
    if status_code == 402:
        return QuotaExceededError("Insufficient credits")
    return APIError(status_code, body)
