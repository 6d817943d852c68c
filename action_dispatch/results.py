"""Normalized dispatch results and the boundary payload built from them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ActionResult:
    success: bool
    output: str | None = None
    error_kind: str | None = None
    error_message: str | None = None

    kind: str | None = None
    # Resolved command line, kept for logging and tests
    command: str | None = None
    elapsed_ms: int | None = None

    def to_payload(self) -> dict[str, Any]:
        """Shape expected by the front end: ``status`` plus result or error text."""
        if self.success:
            return {"status": "success", "result": self.output}
        return {
            "status": "error",
            "error": self.error_message or "Action failed",
            "error_kind": self.error_kind,
        }
