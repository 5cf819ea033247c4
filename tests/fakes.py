"""Test doubles for platform statistics."""

from __future__ import annotations

from collections import namedtuple
from typing import Any

from hostmetrics.errors import PlatformReadError

svmem = namedtuple("svmem", ["total", "available", "percent", "used", "free"])
sswap = namedtuple("sswap", ["total", "used", "free", "percent", "sin", "sout"])
sdiskusage = namedtuple("sdiskusage", ["total", "used", "free", "percent"])
snetio = namedtuple(
    "snetio",
    ["bytes_sent", "bytes_recv", "packets_sent", "packets_recv", "errin", "errout", "dropin", "dropout"],
)
scputimes = namedtuple(
    "scputimes",
    ["user", "nice", "system", "idle", "iowait", "irq", "softirq", "steal", "guest", "guest_nice"],
)


def cpu_times(user=0.0, nice=0.0, system=0.0, idle=0.0, iowait=0.0, irq=0.0, softirq=0.0,
              steal=0.0, guest=0.0, guest_nice=0.0) -> scputimes:
    return scputimes(user, nice, system, idle, iowait, irq, softirq, steal, guest, guest_nice)


class FakeStats:
    """In-memory stand-in for ProcStats.

    ``cpu`` is a list of cpu_times results returned one per call. Names in
    ``failing`` raise PlatformReadError when called.
    """

    def __init__(self, *, interfaces: dict[str, Any] | None = None, cpu: list[Any] | None = None) -> None:
        self.interfaces = interfaces if interfaces is not None else {
            "lo": snetio(10, 10, 1, 1, 0, 0, 0, 0),
            "eth0": snetio(2000, 1000, 20, 10, 0, 0, 0, 0),
        }
        self.cpu = list(cpu) if cpu is not None else [cpu_times(user=100, system=50, idle=800, iowait=50)]
        self.failing: set[str] = set()
        self.calls: list[str] = []

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failing:
            raise PlatformReadError(source=name, message="boom")

    def load_avg(self):
        self._call("load_avg")
        return 0.5, 0.25, 0.125

    def virtual_memory(self):
        self._call("virtual_memory")
        return svmem(total=8000, available=5000, percent=37.5, used=3000, free=4000)

    def swap_memory(self):
        self._call("swap_memory")
        return sswap(total=2000, used=500, free=1500, percent=25.0, sin=0, sout=0)

    def disk_usage(self, path):
        self._call("disk_usage")
        return sdiskusage(total=100000, used=40000, free=60000, percent=40.0)

    def uptime(self):
        self._call("uptime")
        return 3600.0

    def cpu_times(self):
        self._call("cpu_times")
        if len(self.cpu) > 1:
            return self.cpu.pop(0)
        return self.cpu[0]

    def net_io_counters(self):
        self._call("net_io_counters")
        return self.interfaces

    def hostname(self):
        self._call("hostname")
        return "node-1.example"
