"""Hostname and version command handlers."""

from __future__ import annotations

import argparse
import sys

from ..errors import ConfigurationError, PlatformReadError
from .snapshot import build_collector


def cmd_hostname(args: argparse.Namespace) -> int:
    """Print the monitored host's name."""
    try:
        hostname = build_collector(args).get_hostname()
    except ConfigurationError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 2
    except PlatformReadError as e:
        sys.stderr.write(f"Error: {e}\n")
        return 1

    sys.stdout.write(hostname + "\n")
    return 0


def cmd_version(args: argparse.Namespace) -> int:
    """Show version."""
    from .. import __version__

    sys.stdout.write(f"hostmetrics version {__version__}\n")
    return 0
