"""ElevenLabs sound effects client - main client implementation."""

import logging
from typing import Optional, Union

import httpx

from .config import DEFAULT_BASE_URL, Settings
from .exceptions import RequestError, error_from_status
from .models import DEFAULT_OUTPUT_FORMAT, OutputFormat, SoundEffectsRequest

log = logging.getLogger(__name__)


class SoundEffectsClient:
    """Client for the ElevenLabs sound generation API.

    One client can hand out any number of builders. They share its HTTP
    connection pool and nothing else, so requests may run concurrently.

    Example:
        async with SoundEffectsClient(api_key) as client:
            audio = await (
                client.sound_effects("Ghost breath wind")
                .duration_seconds(4.5)
                .prompt_influence(0.6)
                .execute()
            )
    """

    SOUND_GENERATION_PATH = "/sound-generation"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: float = 120.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_key: ElevenLabs API key, sent as the xi-api-key header.
            base_url: API base URL. Uses the public endpoint if not provided.
            timeout: Request timeout in seconds, applied by httpx.
            transport: Optional httpx transport, e.g. httpx.MockTransport in tests.
        """
        self._api_key = api_key
        self.base_url = (base_url or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @classmethod
    def with_base_url(cls, api_key: str, base_url: str) -> "SoundEffectsClient":
        """Create a client for an alternate deployment or test server."""
        return cls(api_key, base_url=base_url)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SoundEffectsClient":
        """Create a client from loaded settings.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        return cls(
            settings.require_api_key(),
            base_url=settings.base_url,
            timeout=settings.timeout,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "SoundEffectsClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return f"SoundEffectsClient(base_url={self.base_url!r}, api_key='***')"

    def sound_effects(self, text: str) -> "SoundEffectsBuilder":
        """Start building a sound effects request.

        Args:
            text: Natural-language description of the sound.

        Returns:
            A builder; nothing is sent until execute() is awaited.
        """
        return SoundEffectsBuilder(self, text)

    def _headers(self) -> dict:
        return {
            "xi-api-key": self._api_key,
            "Content-Type": "application/json",
        }

    async def execute_sfx(self, request: SoundEffectsRequest) -> bytes:
        """Send a finalized request and return the generated audio.

        Args:
            request: Finalized request, usually from SoundEffectsBuilder.build().

        Returns:
            Raw audio bytes exactly as the API returned them.

        Raises:
            RequestError: If no response was received.
            AuthenticationError: On 401.
            QuotaExceededError: On 402.
            RateLimitError: On 429.
            APIError: On any other non-success status.
        """
        url = f"{self.base_url}{self.SOUND_GENERATION_PATH}"
        payload = request.to_payload()
        log.debug("POST %s output_format=%s", url, payload.get("output_format"))

        try:
            response = await self.client.post(url, headers=self._headers(), json=payload)
        except httpx.HTTPError as e:
            log.warning("Sound generation request failed: %s", e)
            raise RequestError(e) from e

        if response.is_success:
            return response.content

        error = error_from_status(response.status_code, self._response_text(response))
        log.warning("Sound generation failed: %s", error)
        raise error

    @staticmethod
    def _response_text(response: httpx.Response) -> str:
        try:
            return response.text
        except (UnicodeDecodeError, LookupError):
            return ""


class SoundEffectsBuilder:
    """Builder for sound effects requests.

    Setters return a new builder and leave the original untouched, so a
    partially configured builder can be reused as a template. The last value
    given for a field wins.
    """

    def __init__(
        self,
        client: SoundEffectsClient,
        text: str,
        output_format: Optional[OutputFormat] = None,
        duration_seconds: Optional[float] = None,
        prompt_influence: Optional[float] = None,
    ):
        self._client = client
        self._text = text
        self._output_format = output_format
        self._duration_seconds = duration_seconds
        self._prompt_influence = prompt_influence

    @property
    def text(self) -> str:
        return self._text

    def _replace(self, **changes) -> "SoundEffectsBuilder":
        fields = {
            "output_format": self._output_format,
            "duration_seconds": self._duration_seconds,
            "prompt_influence": self._prompt_influence,
        }
        fields.update(changes)
        return SoundEffectsBuilder(self._client, self._text, **fields)

    def output_format(self, output_format: Union[OutputFormat, str]) -> "SoundEffectsBuilder":
        """Set the output format.

        Raises:
            ValidationError: If the format is not one the API accepts.
        """
        return self._replace(output_format=OutputFormat.parse(output_format))

    def duration_seconds(self, duration_seconds: float) -> "SoundEffectsBuilder":
        """Set the duration in seconds (0.5 to 22, checked by the API)."""
        return self._replace(duration_seconds=float(duration_seconds))

    def prompt_influence(self, prompt_influence: float) -> "SoundEffectsBuilder":
        """Set the prompt influence (0 to 1, checked by the API)."""
        return self._replace(prompt_influence=float(prompt_influence))

    def build(self) -> SoundEffectsRequest:
        """Finalize into a request, defaulting the output format."""
        output_format = self._output_format
        if output_format is None:
            output_format = DEFAULT_OUTPUT_FORMAT

        return SoundEffectsRequest(
            text=self._text,
            output_format=output_format,
            duration_seconds=self._duration_seconds,
            prompt_influence=self._prompt_influence,
        )

    async def execute(self) -> bytes:
        """Send the request and return the raw audio bytes.

        Raises:
            SoundEffectsError: Subclass matching the failure, see
                SoundEffectsClient.execute_sfx.
        """
        return await self._client.execute_sfx(self.build())
