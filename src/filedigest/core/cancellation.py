# ABOUTME: Shared cancellation flag for an in-flight digest computation.
# ABOUTME: Once cancelled the flag stays set and is visible to every holder.

import threading


class CancellationSignal:
    """A one-way flag shared between the coordinator and the engine.

    Holders observe it with ``is_cancelled`` at their check points. There is
    no reset: a fresh signal is created for each computation.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation. Safe to call repeatedly and from any thread."""
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        state = "cancelled" if self.is_cancelled else "active"
        return f"<CancellationSignal {state}>"
