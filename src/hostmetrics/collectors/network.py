"""Network metrics collector."""

from __future__ import annotations

from ..errors import InterfaceNotFound
from ..providers import ProcStats
from .base import BaseCollector


class NetworkCollector(BaseCollector):
    """Collect byte counters of one named interface."""

    def __init__(self, stats: ProcStats, interface_name: str = "eth0") -> None:
        super().__init__(stats)
        self.interface_name = interface_name

    @property
    def name(self) -> str:
        return "network"

    def collect(self) -> dict[str, float]:
        for iface_name, counters in self.stats.net_io_counters().items():
            if iface_name == self.interface_name:
                return {
                    "netrx": float(counters.bytes_recv),
                    "nettx": float(counters.bytes_sent),
                }
        raise InterfaceNotFound(name=self.interface_name)
