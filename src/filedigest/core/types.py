# ABOUTME: Data structures exchanged between the digest engine and its callers.
# ABOUTME: ProgressUpdate is emitted per chunk; DigestResult is produced once on success.

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class ProgressUpdate:
    """Snapshot of how far a digest computation has progressed.

    One is produced per chunk read. ``processed`` never decreases across the
    lifetime of a single computation.
    """

    processed: int
    total: int

    @property
    def percent(self) -> int:
        """Whole percentage complete, truncated. 0 when the total is 0."""
        if self.total <= 0:
            return 0
        return min(100, self.processed * 100 // self.total)

    def to_dict(self) -> dict[str, int]:
        """Payload shape of the ``hash-progress`` event."""
        return {"processed": self.processed, "total": self.total, "percent": self.percent}


@dataclass(frozen=True)
class DigestResult:
    """Final outcome of a successful digest computation."""

    hex: str
    base64: str
    elapsed_ms: int
    bytes: int
    path: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
