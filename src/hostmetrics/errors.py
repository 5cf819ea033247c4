from __future__ import annotations

from dataclasses import dataclass


class HostMetricsError(Exception):
    """Base class for errors raised by hostmetrics itself."""


@dataclass(slots=True, eq=False)
class ConfigurationError(HostMetricsError):
    """A required setting is missing or unusable.

    Raised while building a collector; no collector is produced.
    """

    setting: str
    message: str

    def __str__(self) -> str:
        return f"{self.setting}: {self.message}"


@dataclass(slots=True, eq=False)
class InterfaceNotFound(HostMetricsError):
    """The configured network interface is not reported by the platform."""

    name: str

    def __str__(self) -> str:
        return f"interface {self.name} not found"


@dataclass(slots=True, eq=False)
class PlatformReadError(HostMetricsError):
    """An underlying platform statistics read failed.

    The original exception is kept as ``__cause__``.
    """

    source: str
    message: str

    def __str__(self) -> str:
        return f"{self.source}: {self.message}"
