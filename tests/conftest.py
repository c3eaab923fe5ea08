"""Shared pytest fixtures for elevenlabs_sfx tests."""

import json
import tempfile
from pathlib import Path

import httpx
import pytest

from elevenlabs_sfx import SoundEffectsClient

TEST_BASE_URL = "https://sfx.test/v1"
TEST_API_KEY = "test-api-key"


def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "integration: marks integration tests")
    config.addinivalue_line("markers", "requires_api: requires live API access")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_payload(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def make_client():
    """Build a client wired to an httpx.MockTransport around a handler."""

    def _make(handler) -> SoundEffectsClient:
        return SoundEffectsClient(
            TEST_API_KEY,
            base_url=TEST_BASE_URL,
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def fake_audio():
    """Bytes standing in for an MP3 payload."""
    return b"ID3\x04\x00\x00\x00\x00\x00\x00" + bytes(range(256)) * 2


@pytest.fixture
def recording_handler():
    """Factory for RecordingHandler instances."""
    return RecordingHandler
