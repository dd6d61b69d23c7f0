# ABOUTME: Unit tests for shell-side path sanitizing and validation.
# ABOUTME: Validates quote stripping and rejection of blank or reserved-character input.

import pytest

from filedigest.core.validators import is_valid_file_path, sanitize_path


class TestSanitizePath:
    """Tests for sanitize_path."""

    def test_strips_whitespace_and_quotes(self) -> None:
        """Paths pasted with quotes are cleaned."""
        assert sanitize_path('  "/tmp/my file.iso"  ') == "/tmp/my file.iso"
        assert sanitize_path("'/tmp/x.bin'") == "/tmp/x.bin"

    def test_plain_path_unchanged(self) -> None:
        assert sanitize_path("/tmp/x.bin") == "/tmp/x.bin"


class TestIsValidFilePath:
    """Tests for is_valid_file_path."""

    @pytest.mark.parametrize(
        "path",
        ["/tmp/file.bin", "relative/dir/file", "archive.tar.gz", r"C:\Users\me\file.iso", "/no/such/file"],
    )
    def test_accepts(self, path: str) -> None:
        assert is_valid_file_path(path)

    @pytest.mark.parametrize(
        "path",
        ["", "   ", "README", "/tmp/bad|name", "/tmp/what?.bin", "<file>.txt", "/tmp/a*b", "/tmp/a:b"],
    )
    def test_rejects(self, path: str) -> None:
        assert not is_valid_file_path(path)
