"""Platform statistics providers.

Thin pass-throughs to psutil and the proc filesystem, pointed at a
process-info root other than our own.
"""

from __future__ import annotations

import contextlib
import socket
import time
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import psutil

from .errors import PlatformReadError

_READ_ERRORS = (OSError, ValueError, psutil.Error)


class ProcStats:
    """Read host statistics from *proc_root* (e.g. ``/host/proc``).

    psutil resolves its Linux proc files through the module-level
    ``psutil.PROCFS_PATH``; each call swaps it to *proc_root* and restores
    it afterwards. Not thread-safe.
    """

    def __init__(self, proc_root: str | Path) -> None:
        self.proc_root = Path(proc_root)

    @contextlib.contextmanager
    def _read(self, source: str) -> Iterator[None]:
        previous = psutil.PROCFS_PATH
        psutil.PROCFS_PATH = str(self.proc_root)
        try:
            yield
        except _READ_ERRORS as e:
            raise PlatformReadError(source=source, message=str(e) or type(e).__name__) from e
        finally:
            psutil.PROCFS_PATH = previous

    def load_avg(self) -> tuple[float, float, float]:
        """Return the 1/5/15 minute load averages from ``<root>/loadavg``."""
        with self._read("loadavg"):
            fields = (self.proc_root / "loadavg").read_text().split()
            if len(fields) < 3:
                raise ValueError(f"unexpected loadavg content: {' '.join(fields)!r}")
            return float(fields[0]), float(fields[1]), float(fields[2])

    def virtual_memory(self) -> Any:
        with self._read("meminfo"):
            return psutil.virtual_memory()

    def swap_memory(self) -> Any:
        with self._read("swap"):
            return psutil.swap_memory()

    def disk_usage(self, path: str) -> Any:
        with self._read("disk"):
            return psutil.disk_usage(path)

    def uptime(self) -> float:
        """Seconds since the host booted."""
        with self._read("uptime"):
            boot_ts = psutil.boot_time()
        return max(0.0, time.time() - float(boot_ts))

    def cpu_times(self) -> Any:
        with self._read("cpu"):
            return psutil.cpu_times(percpu=False)

    def net_io_counters(self) -> dict[str, Any]:
        """Per-interface I/O counters keyed by interface name."""
        with self._read("network"):
            return psutil.net_io_counters(pernic=True)

    def hostname(self) -> str:
        with self._read("hostname"):
            return socket.gethostname()
