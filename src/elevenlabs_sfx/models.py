"""Pydantic models for the ElevenLabs sound effects client."""

from enum import Enum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ValidationError


class OutputFormat(str, Enum):
    """Audio output formats, named codec_samplerate[_bitrate].

    MP3 at 192kbps requires Creator tier or above, PCM at 44.1kHz requires
    Pro tier or above. The mu-law format is what Twilio expects for audio input.
    """
    MP3_22050_32 = "mp3_22050_32"
    MP3_44100_32 = "mp3_44100_32"
    MP3_44100_64 = "mp3_44100_64"
    MP3_44100_96 = "mp3_44100_96"
    MP3_44100_128 = "mp3_44100_128"
    MP3_44100_192 = "mp3_44100_192"
    PCM_8000 = "pcm_8000"
    PCM_16000 = "pcm_16000"
    PCM_22050 = "pcm_22050"
    PCM_24000 = "pcm_24000"
    PCM_44100 = "pcm_44100"
    PCM_48000 = "pcm_48000"
    ULAW_8000 = "ulaw_8000"
    ALAW_8000 = "alaw_8000"
    OPUS_48000_32 = "opus_48000_32"
    OPUS_48000_64 = "opus_48000_64"
    OPUS_48000_96 = "opus_48000_96"

    @classmethod
    def parse(cls, value: Union["OutputFormat", str]) -> "OutputFormat":
        """Resolve a member or its string value.

        Raises:
            ValidationError: If the value is not a known format.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                f"Invalid output format: {value!r}",
                details={"allowed": [f.value for f in cls]},
            ) from None

    @property
    def codec(self) -> str:
        """Codec name, e.g. "mp3"."""
        return self.value.split("_")[0]

    @property
    def sample_rate(self) -> int:
        """Sample rate in Hz."""
        return int(self.value.split("_")[1])

    @property
    def file_extension(self) -> str:
        """File extension to use when saving audio in this format."""
        return self.codec


DEFAULT_OUTPUT_FORMAT = OutputFormat.MP3_44100_128

# Documented service limits; not enforced client-side
MIN_DURATION_SECONDS = 0.5
MAX_DURATION_SECONDS = 22.0
SERVICE_DEFAULT_PROMPT_INFLUENCE = 0.3


class SoundEffectsRequest(BaseModel):
    """Request body for a sound generation call.

    Built by SoundEffectsBuilder and immutable afterwards.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    text: str = Field(..., description="Description of the sound effect")
    output_format: Optional[OutputFormat] = Field(
        None,
        description="Codec, sample rate and bitrate of the generated audio",
    )
    duration_seconds: Optional[float] = Field(
        None,
        description=(
            f"Duration in seconds, {MIN_DURATION_SECONDS} to {MAX_DURATION_SECONDS}. "
            "When unset the service picks a duration from the prompt"
        ),
    )
    prompt_influence: Optional[float] = Field(
        None,
        description=(
            "How closely generation follows the prompt, 0 to 1. "
            f"When unset the service uses {SERVICE_DEFAULT_PROMPT_INFLUENCE}"
        ),
    )

    def to_payload(self) -> Dict[str, Any]:
        """JSON body for the API, leaving unset fields out."""
        return self.model_dump(mode="json", exclude_none=True)
