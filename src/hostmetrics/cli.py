"""CLI interface for the hostmetrics sampler."""

from __future__ import annotations

import argparse
import sys

from .commands.info import cmd_hostname, cmd_version
from .commands.snapshot import cmd_snapshot, cmd_watch
from .config import settings
from .logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build argument parser."""
    parser = argparse.ArgumentParser(
        prog="hostmetrics",
        description="Sample host load, memory, disk, CPU and network metrics",
    )

    # Global options
    parser.add_argument(
        "--version",
        "-V",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: $LOG_LEVEL or INFO)",
    )

    subparsers = parser.add_subparsers(dest="command")

    def add_host_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--proc-root",
            type=str,
            default=None,
            help="Process-info root of the host (default: $HOST_PROC)",
        )
        p.add_argument(
            "--interface",
            type=str,
            default=None,
            help=f"Network interface to report (default: {settings.network_interface})",
        )
        p.add_argument(
            "--disk-path",
            type=str,
            default=None,
            help=f"Mount point for disk usage (default: {settings.disk_path})",
        )

    def add_output_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "--format",
            "-f",
            choices=["json", "jsonl", "table"],
            default="json",
            help="Output format (default: json)",
        )
        p.add_argument(
            "--output",
            "-o",
            type=str,
            default=None,
            help="Output file (default: stdout)",
        )

    # snapshot command
    p_snapshot = subparsers.add_parser(
        "snapshot",
        help="Take a single host metrics snapshot",
    )
    add_host_args(p_snapshot)
    add_output_args(p_snapshot)
    p_snapshot.add_argument(
        "--warmup",
        "-w",
        type=float,
        default=1.0,
        help="Seconds between the CPU baseline read and the reported one (default: 1.0, 0 skips)",
    )
    p_snapshot.set_defaults(func=cmd_snapshot)

    # watch command
    p_watch = subparsers.add_parser(
        "watch",
        help="Continuously sample host metrics",
    )
    add_host_args(p_watch)
    add_output_args(p_watch)
    p_watch.add_argument(
        "--interval",
        "-i",
        type=float,
        default=settings.interval_seconds,
        help=f"Interval in seconds (default: {settings.interval_seconds})",
    )
    p_watch.add_argument(
        "--count",
        "-n",
        type=int,
        default=0,
        help="Number of snapshots to take (default: unlimited)",
    )
    p_watch.set_defaults(func=cmd_watch)

    # hostname command
    p_hostname = subparsers.add_parser(
        "hostname",
        help="Show the host name",
    )
    add_host_args(p_hostname)
    p_hostname.set_defaults(func=cmd_hostname)

    # version command
    p_version = subparsers.add_parser(
        "version",
        help="Show version",
    )
    p_version.set_defaults(func=cmd_version)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    if args.version:
        from . import __version__

        sys.stdout.write(f"hostmetrics version {__version__}\n")
        raise SystemExit(0)

    if not args.command:
        parser.print_help()
        raise SystemExit(0)

    rc = int(args.func(args))
    raise SystemExit(rc)
