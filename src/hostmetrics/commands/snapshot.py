"""Snapshot and watch command handlers."""

from __future__ import annotations

import argparse
import logging
import os
import signal
import sys
import time
from datetime import UTC, datetime
from typing import Any

from ..config import settings
from ..core import HostCollector
from ..errors import ConfigurationError, PlatformReadError
from ..formatters import get_formatter

log = logging.getLogger(__name__)

# Graceful shutdown flag
_shutdown_requested = False


def _signal_handler(signum: int, frame: Any) -> None:
    global _shutdown_requested
    _shutdown_requested = True
    sys.stderr.write("\n[hostmetrics] Shutdown requested, exiting gracefully...\n")


def _output(data: str, output_file: str | None = None) -> None:
    """Write output to stdout or append to file."""
    if output_file:
        mode = "a" if os.path.exists(output_file) else "w"
        with open(output_file, mode) as f:
            f.write(data + "\n")
    else:
        sys.stdout.write(data + "\n")
        sys.stdout.flush()


def build_collector(args: argparse.Namespace) -> HostCollector:
    """Create a collector from CLI flags, falling back to environment settings."""
    return HostCollector(
        args.proc_root or settings.proc_root,
        args.interface or settings.network_interface,
        disk_path=args.disk_path or settings.disk_path,
    )


def build_snapshot(collector: HostCollector, *, include_hostname: bool = True) -> dict[str, Any]:
    """Run one collection cycle and wrap it with a timestamp (and hostname)."""
    snapshot: dict[str, Any] = {
        "timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
    }
    if include_hostname:
        snapshot["hostname"] = collector.get_hostname()
    snapshot["metrics"] = collector.get_host_metrics()
    return snapshot


def cmd_snapshot(args: argparse.Namespace) -> int:
    """Take a single snapshot.

    The first CPU read has no baseline, so a warm-up cycle is run and
    discarded before the reported one.
    """
    try:
        collector = build_collector(args)
    except ConfigurationError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2

    formatter = get_formatter(args.format)
    try:
        if args.warmup > 0:
            collector.get_host_metrics()
            time.sleep(args.warmup)
        snapshot = build_snapshot(collector, include_hostname=settings.include_hostname)
    except PlatformReadError as e:
        log.error(
            "collection failed: %s",
            e,
            exc_info=True,
            extra={"proc_root": collector.proc_root},
        )
        return 1

    _output(formatter.format(snapshot), args.output)
    return 0


def cmd_watch(args: argparse.Namespace) -> int:
    """Continuously collect host metrics on one collector."""
    global _shutdown_requested

    interval = float(args.interval)
    if interval <= 0:
        sys.stderr.write("Error: --interval must be > 0\n")
        return 2

    try:
        collector = build_collector(args)
    except ConfigurationError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2

    formatter = get_formatter(args.format)

    _shutdown_requested = False
    previous_handlers = {
        signum: signal.signal(signum, _signal_handler)
        for signum in (signal.SIGINT, signal.SIGTERM)
    }

    count = 0
    max_count = args.count if args.count > 0 else float("inf")

    try:
        while not _shutdown_requested and count < max_count:
            try:
                snapshot = build_snapshot(collector, include_hostname=settings.include_hostname)
            except PlatformReadError as e:
                log.error(
                    "collection failed: %s",
                    e,
                    exc_info=True,
                    extra={"proc_root": collector.proc_root},
                )
                return 1

            _output(formatter.format(snapshot), args.output)

            count += 1

            if count < max_count and not _shutdown_requested:
                time.sleep(interval)
    finally:
        for signum, handler in previous_handlers.items():
            if handler is not None:
                signal.signal(signum, handler)

    return 0
