# ABOUTME: Shell-side cleanup and sanity checks for user-entered file paths.
# ABOUTME: Strips quotes pasted along with a path and rejects obviously invalid input.

import re

# Windows-reserved characters. ':' is left out so drive letters pass.
_INVALID_CHARS_RE = re.compile(r'[<>"|?*]')
_DRIVE_PREFIX_RE = re.compile(r"^[A-Za-z]:[\\/]")


def sanitize_path(raw: str) -> str:
    """Trim whitespace and drop quote characters around or inside a path."""
    return raw.strip().replace('"', "").replace("'", "")


def is_valid_file_path(raw: str) -> bool:
    """Cheap plausibility check before a path is handed to the engine.

    Existence is not checked here; the engine reports that itself.
    """
    if not raw or not raw.strip():
        return False
    if _INVALID_CHARS_RE.search(raw):
        return False
    if ":" in raw and not _DRIVE_PREFIX_RE.match(raw):
        return False
    if "/" in raw or "\\" in raw:
        return True
    return "." in raw
