"""Read a whole source file into memory."""

from pathlib import Path


def load_text(path: Path) -> str:
    """Return the file's text; raises OSError if it cannot be read."""
    return path.read_text(encoding="utf-8", errors="replace")
