"""Tests for platform statistics read from an alternate proc root."""

from __future__ import annotations

import psutil
import pytest

from hostmetrics.errors import PlatformReadError
from hostmetrics.providers import ProcStats

from fakes import cpu_times, snetio


def test_load_avg_reads_proc_root(proc_root) -> None:
    (proc_root / "loadavg").write_text("0.52 0.58 0.59 3/512 12345\n")
    assert ProcStats(proc_root).load_avg() == (0.52, 0.58, 0.59)


def test_load_avg_missing_file(proc_root) -> None:
    with pytest.raises(PlatformReadError) as exc_info:
        ProcStats(proc_root).load_avg()
    assert exc_info.value.source == "loadavg"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)


def test_load_avg_malformed(proc_root) -> None:
    (proc_root / "loadavg").write_text("garbage\n")
    with pytest.raises(PlatformReadError):
        ProcStats(proc_root).load_avg()


def test_psutil_reads_use_proc_root(proc_root, monkeypatch) -> None:
    seen = []

    def fake_cpu_times(percpu=False):
        seen.append(psutil.PROCFS_PATH)
        return cpu_times(user=1.0)

    before = psutil.PROCFS_PATH
    monkeypatch.setattr(psutil, "cpu_times", fake_cpu_times)

    assert ProcStats(proc_root).cpu_times().user == 1.0
    assert seen == [str(proc_root)]
    assert psutil.PROCFS_PATH == before


def test_psutil_error_is_wrapped(proc_root, monkeypatch) -> None:
    def denied():
        raise psutil.AccessDenied()

    before = psutil.PROCFS_PATH
    monkeypatch.setattr(psutil, "virtual_memory", denied)

    with pytest.raises(PlatformReadError) as exc_info:
        ProcStats(proc_root).virtual_memory()

    assert exc_info.value.source == "meminfo"
    assert isinstance(exc_info.value.__cause__, psutil.AccessDenied)
    assert psutil.PROCFS_PATH == before


def test_other_errors_are_not_wrapped(proc_root, monkeypatch) -> None:
    def broken():
        raise RuntimeError("bug")

    monkeypatch.setattr(psutil, "swap_memory", broken)
    with pytest.raises(RuntimeError):
        ProcStats(proc_root).swap_memory()


def test_net_io_counters_per_interface(proc_root, monkeypatch) -> None:
    counters = {"eth0": snetio(1, 2, 0, 0, 0, 0, 0, 0)}
    monkeypatch.setattr(psutil, "net_io_counters", lambda pernic=False: counters if pernic else None)
    assert ProcStats(proc_root).net_io_counters() == counters


def test_uptime_from_boot_time(proc_root, monkeypatch) -> None:
    monkeypatch.setattr(psutil, "boot_time", lambda: 1000.0)
    monkeypatch.setattr("hostmetrics.providers.time.time", lambda: 4600.0)
    assert ProcStats(proc_root).uptime() == 3600.0


def test_uptime_never_negative(proc_root, monkeypatch) -> None:
    monkeypatch.setattr(psutil, "boot_time", lambda: 5000.0)
    monkeypatch.setattr("hostmetrics.providers.time.time", lambda: 4600.0)
    assert ProcStats(proc_root).uptime() == 0.0


def test_hostname(proc_root, monkeypatch) -> None:
    monkeypatch.setattr("hostmetrics.providers.socket.gethostname", lambda: "host-a")
    assert ProcStats(proc_root).hostname() == "host-a"
