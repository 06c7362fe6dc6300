"""Helper utilities for http-probe.

Timing and header-formatting helpers shared by the client, dispatcher and
beautifier.
"""

import time


class Timer:
    """Context manager for timing operations."""

    def __init__(self):
        self.start_time: float = 0.0
        self.end_time: float = 0.0

    def __enter__(self) -> "Timer":
        self.start_time = time.monotonic()
        return self

    def __exit__(self, *args) -> None:
        self.end_time = time.monotonic()

    @property
    def elapsed(self) -> float:
        """Get elapsed time in seconds, live while the block is running."""
        if self.end_time:
            return max(self.end_time - self.start_time, 0.0)
        return max(time.monotonic() - self.start_time, 0.0)


def canonical_header_key(key: str) -> str:
    """Canonicalize a header name the way it is displayed on the wire.

    Each dash separated part gets an upper-case first letter and lower-case
    rest: ``content-type`` becomes ``Content-Type``. Names containing
    spaces or other invalid characters are returned unchanged.
    """
    if not key or any(c in key for c in " \t:"):
        return key
    return "-".join(part[:1].upper() + part[1:].lower() for part in key.split("-"))


def format_seconds(seconds: float) -> str:
    """Format seconds as fixed-point decimal text (never scientific)."""
    return f"{seconds:f}"


def header_line_size(key: str, value: str, encoding: str = "utf-8") -> int:
    """Byte size of a header serialized as ``Key: Value\\n``."""
    return len(f"{key}: {value}\n".encode(encoding, errors="replace"))
