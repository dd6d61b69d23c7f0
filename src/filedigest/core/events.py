# ABOUTME: EventSink protocol through which the engine reports progress to its shell.
# ABOUTME: Includes a callback adapter and a no-op sink for headless use.

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from filedigest.core.types import ProgressUpdate

HASH_PROGRESS_EVENT = "hash-progress"


@runtime_checkable
class EventSink(Protocol):
    """Receiver for events emitted while a digest is being computed.

    Implementations raise if the event cannot be delivered; the engine treats
    that as fatal to the computation.
    """

    def emit(self, event: str, update: ProgressUpdate) -> None: ...


class CallbackSink:
    """Adapts a plain ``callback(update)`` function into an EventSink."""

    def __init__(self, callback: Callable[[ProgressUpdate], None]) -> None:
        self._callback = callback

    def emit(self, event: str, update: ProgressUpdate) -> None:
        self._callback(update)


class NullSink:
    """Discards every event."""

    def emit(self, event: str, update: ProgressUpdate) -> None:
        return None
