"""
Sandboxed file access for the optional file tools.

All paths are resolved against a root directory and must stay inside it.
"""

import logging
from pathlib import Path

from demo_server.errors import FileOperationError

logger = logging.getLogger(__name__)

BLOCKED_PREFIXES = ("/etc", "/sys", "/proc")
SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(num_bytes: int) -> str:
    """Human-readable size, e.g. ``"1.5 KB"``."""
    if num_bytes <= 0:
        return "0 B"
    size = float(num_bytes)
    unit = 0
    while size >= 1024 and unit < len(SIZE_UNITS) - 1:
        size /= 1024
        unit += 1
    return f"{size:.1f} {SIZE_UNITS[unit]}"


class FileWorkspace:
    def __init__(self, root: str | Path = ".") -> None:
        self.root = Path(root).resolve()

    def resolve(self, path: str) -> Path:
        """Map a caller-supplied path onto the workspace, rejecting escapes."""
        value = path.strip()
        if not value:
            raise FileOperationError("File path cannot be empty")
        if ".." in value:
            raise FileOperationError(f"Path traversal is not allowed: {value}")
        if value.startswith(BLOCKED_PREFIXES):
            raise FileOperationError(f"Access to system directories is not allowed: {value}")

        target = (self.root / value).resolve()
        if not target.is_relative_to(self.root):
            raise FileOperationError(f"Path is outside the workspace: {value}")
        return target

    def read(self, path: str) -> str:
        target = self.resolve(path)
        if not target.exists():
            raise FileOperationError(f"File not found: {path}")
        if not target.is_file():
            raise FileOperationError(f"Not a regular file: {path}")

        try:
            text = target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading %s: %s", target, e)
            raise FileOperationError(f"Error reading file: {path}") from e
        logger.info("Read %d chars from %s", len(text), target)
        return text

    def write(self, path: str, content: str) -> None:
        target = self.resolve(path)
        try:
            target.write_text(content, encoding="utf-8")
        except OSError as e:
            logger.error("Error writing %s: %s", target, e)
            raise FileOperationError(f"Error writing file: {path}") from e
        logger.info("Wrote %d chars to %s", len(content), target)

    def list(self, path: str = ".") -> list[str]:
        """Directory entries sorted by name, formatted for display."""
        target = self.resolve(path)
        if not target.exists():
            raise FileOperationError(f"Directory not found: {path}")
        if not target.is_dir():
            raise FileOperationError(f"Not a directory: {path}")

        lines = []
        for entry in sorted(target.iterdir(), key=lambda p: p.name):
            if entry.is_dir():
                lines.append(f"[DIR]  {entry.name}")
            else:
                lines.append(f"[FILE] {entry.name} ({format_size(entry.stat().st_size)})")
        return lines
