# ABOUTME: Digest engine, coordinator, and supporting types for filedigest.
# ABOUTME: Re-exports the public API used by shells and tests.

from filedigest.core.cancellation import CancellationSignal
from filedigest.core.commands import DigestCommands, EmitterSink
from filedigest.core.coordinator import DigestCoordinator
from filedigest.core.engine import (
    CHUNK_SIZE,
    DigestCancelledError,
    DigestError,
    DigestIOError,
    NotAFileError,
    PathNotFoundError,
    SinkUnavailableError,
    compute_digest,
)
from filedigest.core.events import HASH_PROGRESS_EVENT, CallbackSink, EventSink, NullSink
from filedigest.core.types import DigestResult, ProgressUpdate

__all__ = [
    "CHUNK_SIZE",
    "HASH_PROGRESS_EVENT",
    "CallbackSink",
    "CancellationSignal",
    "DigestCancelledError",
    "DigestCommands",
    "DigestCoordinator",
    "DigestError",
    "DigestIOError",
    "DigestResult",
    "EmitterSink",
    "EventSink",
    "NotAFileError",
    "NullSink",
    "PathNotFoundError",
    "ProgressUpdate",
    "SinkUnavailableError",
    "compute_digest",
]
