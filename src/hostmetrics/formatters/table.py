"""Table formatter for human-readable output."""

from __future__ import annotations

from typing import Any

from .base import BaseFormatter

# Keys holding byte counts; shown humanized next to the raw value.
_BYTE_KEYS = frozenset(
    {
        "mem_total", "mem_used", "mem_free",
        "swap_total", "swap_used", "swap_free",
        "disk_total", "disk_used", "disk_free",
        "netrx", "nettx",
    }
)


def _bytes_to_human(n: float) -> str:
    """Convert bytes to human-readable string."""
    value = float(n)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if abs(value) < 1024.0:
            return f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} PB"


def _format_value(key: str, value: float) -> str:
    if key in _BYTE_KEYS:
        return f"{value:.0f} ({_bytes_to_human(value)})"
    if key.startswith("cpu_"):
        return f"{value * 100:.1f}%"
    return f"{value:.2f}"


class TableFormatter(BaseFormatter):
    """Format snapshot as human-readable table."""

    def format(self, snapshot: dict[str, Any]) -> str:
        lines: list[str] = []

        ts = snapshot.get("timestamp", "")
        lines.append(f"{'=' * 60}")
        lines.append(f"  Host Metrics - {ts}")
        if snapshot.get("hostname"):
            lines.append(f"  Hostname: {snapshot['hostname']}")
        lines.append(f"{'=' * 60}")

        for group in snapshot.get("metrics", []):
            lines.append("")
            for key, value in group.items():
                lines.append(f"  {key:<12} {_format_value(key, value)}")

        lines.append("")
        lines.append(f"{'=' * 60}")

        return "\n".join(lines)
