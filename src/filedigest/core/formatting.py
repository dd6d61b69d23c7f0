# ABOUTME: Human-readable formatting of byte counts, durations, and throughput.
# ABOUTME: Used by the CLI when reporting a finished digest.

_UNITS = ("B", "KB", "MB", "GB", "TB")
_STEP = 1024


def _trim(value: float) -> str:
    """Two decimals at most, without trailing zeros ("1.50" -> "1.5")."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_bytes(num_bytes: float) -> str:
    """Format a byte count using 1024-based units, e.g. 1536 -> '1.5 KB'."""
    if num_bytes <= 0:
        return "0 B"
    value = float(num_bytes)
    index = 0
    while value >= _STEP and index < len(_UNITS) - 1:
        value /= _STEP
        index += 1
    return f"{_trim(value)} {_UNITS[index]}"


def format_duration(ms: int) -> str:
    """Format milliseconds as ms, seconds, minutes, or hours."""
    if ms < 1000:
        return f"{ms}ms"
    if ms < 60_000:
        return f"{ms / 1000:.2f}s"
    if ms < 3_600_000:
        return f"{ms / 60_000:.2f}m"
    return f"{ms / 3_600_000:.2f}h"


def format_throughput(num_bytes: int, ms: int) -> str:
    """Average rate over the elapsed time, e.g. '512 KB/s'."""
    if ms <= 0:
        return "0 B/s"
    return f"{format_bytes(num_bytes / (ms / 1000))}/s"
