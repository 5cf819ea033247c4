"""Filesystem usage collector."""

from __future__ import annotations

from ..providers import ProcStats
from .base import BaseCollector


class DiskCollector(BaseCollector):
    """Collect usage of a single mount point (root by default)."""

    def __init__(self, stats: ProcStats, path: str = "/") -> None:
        super().__init__(stats)
        self.path = path

    @property
    def name(self) -> str:
        return "disk"

    def collect(self) -> dict[str, float]:
        usage = self.stats.disk_usage(self.path)
        return {
            "disk_total": float(usage.total),
            "disk_used": float(usage.used),
            "disk_free": float(usage.free),
        }
