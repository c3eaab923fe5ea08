"""ElevenLabs SFX - Python client for the ElevenLabs sound effects API."""

from .client import SoundEffectsBuilder, SoundEffectsClient
from .config import DEFAULT_BASE_URL, ConfigurationError, Settings, get_settings
from .exceptions import (
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
from .models import (
    DEFAULT_OUTPUT_FORMAT,
    OutputFormat,
    SoundEffectsRequest,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "SoundEffectsClient",
    "SoundEffectsBuilder",
    # Exceptions
    "SoundEffectsError",
    "RequestError",
    "APIError",
    "ParseError",
    "AuthenticationError",
    "RateLimitError",
    "QuotaExceededError",
    "ValidationError",
    "error_from_status",
    # Models
    "OutputFormat",
    "SoundEffectsRequest",
    "DEFAULT_OUTPUT_FORMAT",
    # Configuration
    "Settings",
    "get_settings",
    "ConfigurationError",
    "DEFAULT_BASE_URL",
]
