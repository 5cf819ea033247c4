"""Host metrics collection cycle."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from .collectors import (
    CPUCollector,
    DiskCollector,
    LoadCollector,
    MemoryCollector,
    NetworkCollector,
    SwapCollector,
    UptimeCollector,
)
from .collectors.base import BaseCollector
from .collectors.cpu import CPUSample
from .errors import ConfigurationError, InterfaceNotFound
from .providers import ProcStats

if TYPE_CHECKING:
    from .config import Settings

log = logging.getLogger(__name__)


class HostCollector:
    """Sample the metrics of the host whose proc tree lives at *proc_root*.

    One instance per agent process. The CPU producer keeps the previous
    cumulative sample between cycles, so calls must not overlap.
    """

    def __init__(
        self,
        proc_root: str | None,
        interface_name: str = "eth0",
        *,
        disk_path: str = "/",
        stats: ProcStats | None = None,
    ) -> None:
        if not proc_root:
            raise ConfigurationError(
                setting="HOST_PROC",
                message="must be set to be able to send host metrics",
            )
        if not os.path.isdir(proc_root):
            raise ConfigurationError(
                setting="HOST_PROC",
                message=f"{proc_root} is not a directory",
            )

        self.proc_root = proc_root
        self._interface_name = interface_name
        self.stats = stats if stats is not None else ProcStats(proc_root)

        self._cpu = CPUCollector(self.stats)
        self.collectors: list[BaseCollector] = [
            LoadCollector(self.stats),
            MemoryCollector(self.stats),
            SwapCollector(self.stats),
            DiskCollector(self.stats, path=disk_path),
            UptimeCollector(self.stats),
            self._cpu,
            NetworkCollector(self.stats, interface_name=interface_name),
        ]
        log.debug(
            "host collector ready",
            extra={"proc_root": proc_root, "interface": interface_name},
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> HostCollector:
        return cls(
            settings.proc_root,
            settings.network_interface,
            disk_path=settings.disk_path,
        )

    @property
    def interface_name(self) -> str:
        return self._interface_name

    @property
    def last_cpu_sample(self) -> CPUSample | None:
        return self._cpu.last_sample

    def get_host_metrics(self) -> list[dict[str, float]]:
        """Run every producer once, in order.

        A missing network interface is logged and its metrics omitted; any
        other failure propagates and nothing gathered so far is returned.
        """
        metrics: list[dict[str, float]] = []
        for collector in self.collectors:
            try:
                metrics.append(collector.collect())
            except InterfaceNotFound as e:
                log.warning(
                    "skipping network metrics: %s",
                    e,
                    extra={"collector": collector.name, "interface": e.name},
                )
        return metrics

    def get_hostname(self) -> str:
        return self.stats.hostname()
