"""Base formatter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseFormatter(ABC):
    """Render one host snapshot.

    A snapshot holds ``timestamp``, optionally ``hostname``, and ``metrics``:
    the ordered list of name -> float mappings from one collection cycle.
    """

    @abstractmethod
    def format(self, snapshot: dict[str, Any]) -> str:
        """Render *snapshot*; metric order within each mapping is preserved."""
        ...
