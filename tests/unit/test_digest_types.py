# ABOUTME: Unit tests for ProgressUpdate and DigestResult.
# ABOUTME: Validates percent truncation, the zero-total case, and payload shapes.

import dataclasses

import pytest

from filedigest.core.types import DigestResult, ProgressUpdate


class TestProgressUpdate:
    """Tests for the ProgressUpdate snapshot."""

    def test_percent_quarter(self) -> None:
        """50 of 200 bytes is 25 percent."""
        assert ProgressUpdate(processed=50, total=200).percent == 25

    def test_percent_truncates(self) -> None:
        """Percent is floored, never rounded up."""
        assert ProgressUpdate(processed=2, total=3).percent == 66
        assert ProgressUpdate(processed=999, total=1000).percent == 99

    def test_percent_zero_total(self) -> None:
        """A zero total yields 0 regardless of processed."""
        assert ProgressUpdate(processed=0, total=0).percent == 0
        assert ProgressUpdate(processed=10, total=0).percent == 0

    def test_percent_complete(self) -> None:
        """Processing every byte is 100 percent."""
        assert ProgressUpdate(processed=200, total=200).percent == 100

    def test_percent_capped_when_file_grew(self) -> None:
        """Reading past the stat size still reports at most 100."""
        assert ProgressUpdate(processed=300, total=200).percent == 100

    def test_to_dict(self) -> None:
        """Payload carries processed, total, and percent."""
        update = ProgressUpdate(processed=50, total=200)
        assert update.to_dict() == {"processed": 50, "total": 200, "percent": 25}

    def test_is_immutable(self) -> None:
        """Updates are frozen snapshots."""
        update = ProgressUpdate(processed=1, total=2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            update.processed = 2  # type: ignore[misc]


class TestDigestResult:
    """Tests for the DigestResult dataclass."""

    def test_to_dict_field_names(self) -> None:
        """Serialized result uses the shell-facing field names."""
        result = DigestResult(
            hex="ab", base64="qw==", elapsed_ms=12, bytes=1, path="/tmp/x"
        )
        assert result.to_dict() == {
            "hex": "ab",
            "base64": "qw==",
            "elapsed_ms": 12,
            "bytes": 1,
            "path": "/tmp/x",
        }
