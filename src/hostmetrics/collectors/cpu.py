"""CPU and load collectors."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..providers import ProcStats
from .base import BaseCollector

_CPU_KEYS = ("cpu_user", "cpu_sys", "cpu_idle", "cpu_stolen", "cpu_wait", "cpu_busy")


@dataclass(frozen=True, slots=True)
class CPUSample:
    """Cumulative CPU time counters, in seconds since boot.

    ``total`` covers every tracked category, including ones not reported
    individually (nice, irq, softirq, guest...).
    """

    user: float
    system: float
    idle: float
    steal: float
    iowait: float
    total: float

    @classmethod
    def from_times(cls, times: Any) -> CPUSample:
        """Build a sample from a psutil ``scputimes`` tuple.

        Fields the platform does not report (steal, iowait off Linux) are 0.
        """
        fields = times._asdict()
        total = sum(fields.values())
        return cls(
            user=float(fields.get("user", 0.0)),
            system=float(fields.get("system", 0.0)),
            idle=float(fields.get("idle", 0.0)),
            steal=float(fields.get("steal", 0.0)),
            iowait=float(fields.get("iowait", 0.0)),
            total=float(total),
        )


def cpu_percent(previous: CPUSample | None, current: CPUSample) -> dict[str, float]:
    """Return the fraction of CPU time spent per category between two samples.

    With no previous sample, or when the total did not advance (same tick,
    counters reset by a reboot), every value is 0.0.
    """
    if previous is None:
        return dict.fromkeys(_CPU_KEYS, 0.0)

    delta_total = current.total - previous.total
    if delta_total <= 0:
        return dict.fromkeys(_CPU_KEYS, 0.0)

    user = (current.user - previous.user) / delta_total
    sys_ = (current.system - previous.system) / delta_total
    idle = (current.idle - previous.idle) / delta_total
    stolen = (current.steal - previous.steal) / delta_total
    wait = (current.iowait - previous.iowait) / delta_total

    return {
        "cpu_user": user,
        "cpu_sys": sys_,
        "cpu_idle": idle,
        "cpu_stolen": stolen,
        "cpu_wait": wait,
        "cpu_busy": user + sys_,
    }


class CPUCollector(BaseCollector):
    """Collect CPU utilization as deltas between successive calls.

    Keeps the last cumulative sample; the first call reports zeros.
    """

    def __init__(self, stats: ProcStats) -> None:
        super().__init__(stats)
        self.last_sample: CPUSample | None = None

    @property
    def name(self) -> str:
        return "cpu"

    def collect(self) -> dict[str, float]:
        current = CPUSample.from_times(self.stats.cpu_times())
        result = cpu_percent(self.last_sample, current)
        self.last_sample = current
        return result


class LoadCollector(BaseCollector):
    """Collect 1/5/15 minute load averages."""

    @property
    def name(self) -> str:
        return "load"

    def collect(self) -> dict[str, float]:
        load1, load5, load15 = self.stats.load_avg()
        return {
            "load1": float(load1),
            "load5": float(load5),
            "load15": float(load15),
        }
