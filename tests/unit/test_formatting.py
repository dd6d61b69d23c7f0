# ABOUTME: Unit tests for human-readable byte, duration, and throughput formatting.
# ABOUTME: Validates unit boundaries and trailing-zero trimming.

import pytest

from filedigest.core.formatting import format_bytes, format_duration, format_throughput


class TestFormatBytes:
    """Tests for format_bytes."""

    @pytest.mark.parametrize(
        ("num_bytes", "expected"),
        [
            (0, "0 B"),
            (512, "512 B"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (4 * 1024 * 1024, "4 MB"),
            (int(2.25 * 1024**3), "2.25 GB"),
            (5 * 1024**4, "5 TB"),
        ],
    )
    def test_units(self, num_bytes: int, expected: str) -> None:
        assert format_bytes(num_bytes) == expected

    def test_caps_at_terabytes(self) -> None:
        """Values beyond TB stay expressed in TB."""
        assert format_bytes(2048 * 1024**4) == "2048 TB"


class TestFormatDuration:
    """Tests for format_duration."""

    @pytest.mark.parametrize(
        ("ms", "expected"),
        [
            (0, "0ms"),
            (999, "999ms"),
            (1000, "1.00s"),
            (1500, "1.50s"),
            (90_000, "1.50m"),
            (5_400_000, "1.50h"),
        ],
    )
    def test_ranges(self, ms: int, expected: str) -> None:
        assert format_duration(ms) == expected


class TestFormatThroughput:
    """Tests for format_throughput."""

    def test_zero_elapsed(self) -> None:
        """No elapsed time reports zero rather than dividing by zero."""
        assert format_throughput(1024, 0) == "0 B/s"

    def test_rate(self) -> None:
        assert format_throughput(2 * 1024 * 1024, 2000) == "1 MB/s"
