"""Type aliases used across the SIMT platform."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
SheetRow = dict[str, Any]  # one spreadsheet row keyed by column header
