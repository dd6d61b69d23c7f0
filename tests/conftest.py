# ABOUTME: Shared pytest fixtures for filedigest tests.
# ABOUTME: Provides sample files of known content and a sink that records progress events.

from pathlib import Path

import pytest

from filedigest.core.types import ProgressUpdate

SAMPLE_CONTENT = b"The quick brown fox jumps over the lazy dog"


class RecordingSink:
    """EventSink that keeps every event it receives, in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, ProgressUpdate]] = []

    def emit(self, event: str, update: ProgressUpdate) -> None:
        self.events.append((event, update))

    @property
    def updates(self) -> list[ProgressUpdate]:
        return [update for _, update in self.events]


@pytest.fixture
def recording_sink() -> RecordingSink:
    """A fresh sink that records progress events."""
    return RecordingSink()


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A small file with known content (smaller than one default chunk)."""
    path = tmp_path / "fox.txt"
    path.write_bytes(SAMPLE_CONTENT)
    return path


@pytest.fixture
def empty_file(tmp_path: Path) -> Path:
    """A zero-length file."""
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    return path


@pytest.fixture
def multi_chunk_file(tmp_path: Path) -> Path:
    """A 1000-byte file; with chunk_size=64 it spans 16 chunks, the last partial."""
    path = tmp_path / "multi.bin"
    path.write_bytes(bytes(range(256)) * 3 + bytes(232))
    return path
