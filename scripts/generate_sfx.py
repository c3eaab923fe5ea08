#!/usr/bin/env python3
"""Generate a sound effect and save it to disk.

Usage:
    python scripts/generate_sfx.py "Orange juice pouring into the glass"
    python scripts/generate_sfx.py "Whoosh flyby swish" --duration 4.5 --prompt-influence 0.75
    python scripts/generate_sfx.py "Rain on a tin roof" --output-format pcm_44100

Reads ELEVENLABS_API_KEY (and optional ELEVENLABS_BASE_URL) from the
environment or a .env file.
"""

import argparse
import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import Optional

from elevenlabs_sfx import (
    ConfigurationError,
    OutputFormat,
    SoundEffectsClient,
    SoundEffectsError,
    get_settings,
)


async def generate(
    client: SoundEffectsClient,
    prompt: str,
    output_dir: Path,
    output_format: OutputFormat,
    duration: Optional[float] = None,
    prompt_influence: Optional[float] = None,
) -> Path:
    """Run one request and write the audio to output_dir/<timestamp>.<ext>."""
    builder = client.sound_effects(prompt).output_format(output_format)
    if duration is not None:
        builder = builder.duration_seconds(duration)
    if prompt_influence is not None:
        builder = builder.prompt_influence(prompt_influence)

    audio = await builder.execute()

    output_dir.mkdir(parents=True, exist_ok=True)
    output_path = output_dir / f"{int(time.time())}.{output_format.file_extension}"
    output_path.write_bytes(audio)
    return output_path


async def _run(args: argparse.Namespace) -> Path:
    settings = get_settings()
    output_dir = args.output_dir or Path(settings.output_dir)
    async with SoundEffectsClient.from_settings(settings) as client:
        return await generate(
            client,
            args.prompt,
            output_dir,
            OutputFormat.parse(args.output_format),
            duration=args.duration,
            prompt_influence=args.prompt_influence,
        )


def main() -> None:
    """Entry point for the generation script."""
    parser = argparse.ArgumentParser(description="Generate a sound effect with ElevenLabs")
    parser.add_argument("prompt", help="Description of the sound effect")
    parser.add_argument(
        "--output-format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.MP3_44100_128.value,
        help="Audio format (default: mp3_44100_128)",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=None,
        help="Duration in seconds, 0.5 to 22 (default: chosen by the API)",
    )
    parser.add_argument(
        "--prompt-influence",
        type=float,
        default=None,
        help="Prompt influence, 0 to 1 (default: 0.3, applied by the API)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory (default: ./outputs)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        output_path = asyncio.run(_run(args))
    except (SoundEffectsError, ConfigurationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Audio saved to {output_path}")


if __name__ == "__main__":
    main()
