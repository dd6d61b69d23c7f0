# ABOUTME: Single-slot coordinator that allows at most one active digest computation.
# ABOUTME: Starting a new computation cancels the previous one; cancel_current is always safe.

import logging
import threading
from pathlib import Path

from filedigest.core.cancellation import CancellationSignal
from filedigest.core.engine import CHUNK_SIZE, DEFAULT_ALGORITHM, compute_digest
from filedigest.core.events import EventSink
from filedigest.core.types import DigestResult

logger = logging.getLogger(__name__)


class DigestCoordinator:
    """Serializes digest requests behind one cancellation slot.

    The slot holds the signal of the most recently started computation that
    has not finished. The lock guards only the take/install/clear steps and
    is never held while the engine runs, so a long computation does not block
    a concurrent ``start`` or ``cancel_current``.
    """

    def __init__(
        self,
        sink: EventSink,
        *,
        chunk_size: int = CHUNK_SIZE,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        self._sink = sink
        self._chunk_size = chunk_size
        self._algorithm = algorithm
        self._lock = threading.Lock()
        self._active: CancellationSignal | None = None

    @property
    def is_busy(self) -> bool:
        """Whether a computation currently owns the slot."""
        with self._lock:
            return self._active is not None

    async def start(self, path: str | Path) -> DigestResult:
        """Hash ``path``, superseding any computation already in flight.

        The engine's outcome, result or DigestError, is passed through
        unchanged. The slot is cleared afterwards unless a newer computation
        has already claimed it.
        """
        signal = CancellationSignal()
        with self._lock:
            previous, self._active = self._active, signal
        if previous is not None:
            logger.debug("Superseding in-flight computation for %s", path)
            previous.cancel()

        try:
            return await compute_digest(
                path,
                signal,
                self._sink,
                chunk_size=self._chunk_size,
                algorithm=self._algorithm,
            )
        finally:
            with self._lock:
                if self._active is signal:
                    self._active = None

    def cancel_current(self) -> None:
        """Cancel the active computation, if any. A no-op when idle."""
        with self._lock:
            signal, self._active = self._active, None
        if signal is not None:
            logger.debug("Cancellation requested for active computation")
            signal.cancel()
