"""Host metric producers."""

from __future__ import annotations

from .base import BaseCollector
from .cpu import CPUCollector, CPUSample, LoadCollector, cpu_percent
from .disk import DiskCollector
from .memory import MemoryCollector, SwapCollector
from .network import NetworkCollector
from .system import UptimeCollector

__all__ = [
    "BaseCollector",
    "CPUCollector",
    "CPUSample",
    "DiskCollector",
    "LoadCollector",
    "MemoryCollector",
    "NetworkCollector",
    "SwapCollector",
    "UptimeCollector",
    "cpu_percent",
]
