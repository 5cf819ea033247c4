"""System info collectors."""

from __future__ import annotations

from .base import BaseCollector


class UptimeCollector(BaseCollector):
    """Collect seconds since boot."""

    @property
    def name(self) -> str:
        return "uptime"

    def collect(self) -> dict[str, float]:
        return {"uptime": float(self.stats.uptime())}
