# ABOUTME: The two calls a shell makes: start_digest and cancel_digest.
# ABOUTME: Translates between shell-facing payload dicts and the coordinator's typed API.

from collections.abc import Callable
from typing import Any

from filedigest.core.coordinator import DigestCoordinator
from filedigest.core.settings import Settings
from filedigest.core.types import ProgressUpdate

Emitter = Callable[[str, dict[str, Any]], None]


class EmitterSink:
    """EventSink that forwards serialized events to a shell ``emit(name, payload)``."""

    def __init__(self, emit: Emitter) -> None:
        self._emit = emit

    def emit(self, event: str, update: ProgressUpdate) -> None:
        self._emit(event, update.to_dict())


class DigestCommands:
    """Shell boundary over a single DigestCoordinator.

    Errors surface as DigestError subclasses whose message is meant to be
    shown to the user as-is.
    """

    def __init__(self, emit: Emitter, settings: Settings | None = None) -> None:
        settings = settings or Settings()
        self.coordinator = DigestCoordinator(
            EmitterSink(emit),
            chunk_size=settings.chunk_size,
            algorithm=settings.algorithm,
        )

    async def start_digest(self, file_path: str) -> dict[str, Any]:
        """Hash ``file_path`` and return ``{hex, base64, elapsed_ms, bytes, path}``."""
        result = await self.coordinator.start(file_path)
        return result.to_dict()

    def cancel_digest(self) -> None:
        self.coordinator.cancel_current()
