"""Memory and swap collectors."""

from __future__ import annotations

from .base import BaseCollector


class MemoryCollector(BaseCollector):
    """Collect virtual memory totals in bytes."""

    @property
    def name(self) -> str:
        return "memory"

    def collect(self) -> dict[str, float]:
        vm = self.stats.virtual_memory()
        return {
            "mem_total": float(vm.total),
            "mem_used": float(vm.used),
            "mem_free": float(vm.free),
        }


class SwapCollector(BaseCollector):
    """Collect swap totals in bytes."""

    @property
    def name(self) -> str:
        return "swap"

    def collect(self) -> dict[str, float]:
        swap = self.stats.swap_memory()
        return {
            "swap_total": float(swap.total),
            "swap_used": float(swap.used),
            "swap_free": float(swap.free),
        }
