from __future__ import annotations

import os
from dataclasses import dataclass, field


def _get_str(name: str, default: str) -> str:
    return os.getenv(name, default)


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw not in {"0", "false", "False"}


@dataclass(frozen=True, slots=True)
class Settings:
    service_name: str = field(default_factory=lambda: _get_str("SERVICE_NAME", "hostmetrics"))

    # Process-info root of the monitored host, e.g. /host/proc. Required.
    proc_root: str = field(default_factory=lambda: _get_str("HOST_PROC", ""))
    network_interface: str = field(
        default_factory=lambda: _get_str("METRICS_NETWORK_INTERFACE", "eth0")
    )
    disk_path: str = field(default_factory=lambda: _get_str("METRICS_DISK_PATH", "/"))

    interval_seconds: float = field(
        default_factory=lambda: _get_float("METRICS_INTERVAL", 60.0)
    )
    include_hostname: bool = field(default_factory=lambda: _get_bool("INCLUDE_HOSTNAME", True))


settings = Settings()
