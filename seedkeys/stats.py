"""Timing helpers for verbose output."""

import time

__all__ = [
    "format_time",
    "stopwatch",
]


def stopwatch():
    """Generator that yields elapsed time since last yield."""
    t = time.perf_counter()
    while True:
        now = time.perf_counter()
        yield now - t
        t = now


def format_time(seconds: float) -> str:
    """Format seconds as human-readable time."""
    if seconds < 0:
        return "--"
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    if seconds < 10:
        return f"{seconds:.1f}s"
    if seconds < 120:
        return f"{int(seconds)}s"
    m = int(seconds // 60)
    s = int(seconds % 60)
    if s == 0:
        return f"{m}m"
    return f"{m}m{s}s"
