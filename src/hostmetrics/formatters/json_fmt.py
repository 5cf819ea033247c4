"""JSON formatters."""

from __future__ import annotations

import json
from typing import Any

from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Format snapshot as JSON.

    With ``compact=True`` each snapshot is a single line, so successive
    ``watch`` cycles appended to one file form a JSON-lines stream.
    """

    def __init__(self, *, compact: bool = False) -> None:
        self.compact = compact

    def format(self, snapshot: dict[str, Any]) -> str:
        if self.compact:
            return json.dumps(snapshot, ensure_ascii=False, separators=(",", ":"))
        return json.dumps(snapshot, ensure_ascii=False, indent=2)
