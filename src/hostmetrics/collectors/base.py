"""Base collector interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..providers import ProcStats


class BaseCollector(ABC):
    """Abstract base class for all metric producers.

    A producer returns one mapping of metric name to float, or raises.
    """

    def __init__(self, stats: ProcStats) -> None:
        self.stats = stats

    @property
    @abstractmethod
    def name(self) -> str:
        """Producer name used in logs."""
        ...

    @abstractmethod
    def collect(self) -> dict[str, float]:
        """Collect and return metrics as a name -> float mapping."""
        ...
