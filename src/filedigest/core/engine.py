# ABOUTME: Streaming digest engine: reads a file in chunks, hashes, and reports progress.
# ABOUTME: Checks a cancellation signal before every read so a cancel takes effect within one chunk.

import asyncio
import base64
import hashlib
import logging
import os
import stat
import time
from pathlib import Path

from filedigest.core.cancellation import CancellationSignal
from filedigest.core.events import HASH_PROGRESS_EVENT, EventSink
from filedigest.core.types import DigestResult, ProgressUpdate

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4 * 1024 * 1024  # 4 MiB
DEFAULT_ALGORITHM = "sha256"
SUPPORTED_ALGORITHMS: tuple[str, ...] = (
    "sha256",
    "sha1",
    "sha224",
    "sha384",
    "sha512",
    "md5",
    "blake2b",
    "blake2s",
    "sha3_256",
    "sha3_512",
)


class DigestError(Exception):
    """Base class for every failure a digest computation can report."""


class PathNotFoundError(DigestError):
    """Raised when the requested path does not exist."""


class NotAFileError(DigestError):
    """Raised when the path exists but is not a regular file."""


class DigestIOError(DigestError):
    """Raised when reading metadata, opening, or reading the file fails."""


class DigestCancelledError(DigestError):
    """Raised when the cancellation signal is observed at a check point."""


class SinkUnavailableError(DigestError):
    """Raised when a progress event cannot be delivered to the shell."""


async def _stat_source(path: Path) -> os.stat_result:
    """Stat the path once, mapping every failure onto the DigestError taxonomy."""
    try:
        info = await asyncio.to_thread(path.stat)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise PathNotFoundError(f"File does not exist: {path}") from exc
    except OSError as exc:
        raise DigestIOError(f"Failed to read file metadata: {exc}") from exc
    if not stat.S_ISREG(info.st_mode):
        raise NotAFileError(f"Path is not a file: {path}")
    return info


async def compute_digest(
    path: str | Path,
    signal: CancellationSignal,
    sink: EventSink,
    *,
    chunk_size: int = CHUNK_SIZE,
    algorithm: str = DEFAULT_ALGORITHM,
) -> DigestResult:
    """Compute the digest of a file, emitting one progress event per chunk.

    Blocking file I/O runs in a worker thread so the event loop stays free
    for concurrent start/cancel requests. The signal is checked before every
    read; a cancelled computation never returns a partial result.

    Args:
        path: File to hash.
        signal: Cancellation flag for this computation.
        sink: Receiver for ``hash-progress`` events.
        chunk_size: Maximum bytes read and hashed per iteration.
        algorithm: hashlib algorithm name.

    Returns:
        DigestResult with hex and base64 encodings of the digest.

    Raises:
        PathNotFoundError: If the path does not exist.
        NotAFileError: If the path is not a regular file.
        DigestIOError: If metadata lookup, open, or a read fails.
        DigestCancelledError: If the signal was triggered mid-computation.
        SinkUnavailableError: If a progress event could not be delivered.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    if algorithm not in SUPPORTED_ALGORITHMS:
        raise ValueError(f"Unsupported algorithm: {algorithm}")
    hasher = hashlib.new(algorithm)

    source = Path(path)
    total = (await _stat_source(source)).st_size

    try:
        stream = await asyncio.to_thread(open, source, "rb")
    except OSError as exc:
        raise DigestIOError(f"Failed to open file: {exc}") from exc

    logger.debug(
        "Hashing %s (%d bytes, %s, chunk size %d)", source, total, algorithm, chunk_size
    )
    started = time.monotonic()
    processed = 0
    with stream:
        while True:
            if signal.is_cancelled:
                logger.debug("Cancellation observed for %s after %d bytes", source, processed)
                raise DigestCancelledError("Hash operation was cancelled")

            try:
                chunk = await asyncio.to_thread(stream.read, chunk_size)
            except OSError as exc:
                raise DigestIOError(f"Failed to read file: {exc}") from exc
            if not chunk:
                break

            hasher.update(chunk)
            processed += len(chunk)

            try:
                sink.emit(HASH_PROGRESS_EVENT, ProgressUpdate(processed=processed, total=total))
            except Exception as exc:
                raise SinkUnavailableError(f"Failed to emit progress event: {exc}") from exc

    raw = hasher.digest()
    elapsed_ms = int((time.monotonic() - started) * 1000)
    logger.info("Hashed %s: %d bytes in %d ms", source, total, elapsed_ms)

    return DigestResult(
        hex=raw.hex(),
        base64=base64.b64encode(raw).decode("ascii"),
        elapsed_ms=elapsed_ms,
        bytes=total,
        path=str(path),
    )
