"""
hostmetrics

Host-level metrics sampler for containerized agents.

Reads load, memory, swap, disk, uptime, CPU and network statistics from a
mounted process-info root (e.g. ``/host/proc``) so an agent running inside a
container reports the figures of the machine it runs on.
"""

from __future__ import annotations

from .core import HostCollector
from .errors import ConfigurationError, InterfaceNotFound, PlatformReadError

__all__ = [
    "__version__",
    "ConfigurationError",
    "HostCollector",
    "InterfaceNotFound",
    "PlatformReadError",
]

__version__ = "0.1.0"
