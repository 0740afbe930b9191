"""
Diagnostics Channel - Recoverable Condition Records

Nothing in the valuation core is fatal. Every condition the core recovers
from (a skipped line, a skipped discount, a zero-room fallback, a dropped
price collision) is recorded here so the caller can surface it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Final, Iterator, Optional


logger = logging.getLogger(__name__)


# =============================================================================
# Diagnostic Codes
# =============================================================================

MALFORMED_RECORD: Final = "MALFORMED_RECORD"
INVALID_DISCOUNT: Final = "INVALID_DISCOUNT"
DEGENERATE_ARITHMETIC: Final = "DEGENERATE_ARITHMETIC"
PRICE_COLLISION: Final = "PRICE_COLLISION"
SOURCE_UNAVAILABLE: Final = "SOURCE_UNAVAILABLE"

DIAGNOSTIC_CODES: Final[dict[str, str]] = {
    MALFORMED_RECORD: "Listing line could not be parsed and was skipped",
    INVALID_DISCOUNT: "Discount percentage outside 0-100, mutation skipped",
    DEGENERATE_ARITHMETIC: "Zero rooms, fallback value 0 used",
    PRICE_COLLISION: "Total price already stored, later listing dropped",
    SOURCE_UNAVAILABLE: "Listing source could not be read, fallback used",
}

# Collisions are part of normal registry operation
_LOG_LEVELS: Final[dict[str, int]] = {
    MALFORMED_RECORD: logging.WARNING,
    INVALID_DISCOUNT: logging.WARNING,
    DEGENERATE_ARITHMETIC: logging.DEBUG,
    PRICE_COLLISION: logging.INFO,
    SOURCE_UNAVAILABLE: logging.WARNING,
}


@dataclass(frozen=True)
class Diagnostic:
    """A single recoverable condition reported by the core."""

    code: str
    detail: str
    line_number: Optional[int] = None
    raw: Optional[str] = None
    recorded_at: datetime = field(default_factory=datetime.now)

    @property
    def reason(self) -> str:
        """Human-readable description of the code."""
        return DIAGNOSTIC_CODES.get(self.code, f"Unknown code: {self.code}")

    def render(self) -> str:
        location = f"line {self.line_number}: " if self.line_number is not None else ""
        return f"[{self.code}] {location}{self.detail}"

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "reason": self.reason,
            "detail": self.detail,
            "line_number": self.line_number,
            "raw": self.raw,
        }


class DiagnosticsLog:
    """
    Collects diagnostics for one run and mirrors them to the logger.

    Constructed by the caller and passed into the loader; there is no
    process-wide instance.
    """

    def __init__(self) -> None:
        self._entries: list[Diagnostic] = []

    def record(
        self,
        code: str,
        detail: str,
        line_number: Optional[int] = None,
        raw: Optional[str] = None,
    ) -> Diagnostic:
        if code not in DIAGNOSTIC_CODES:
            raise ValueError(f"Unknown diagnostic code: {code}")

        entry = Diagnostic(code=code, detail=detail, line_number=line_number, raw=raw)
        self._entries.append(entry)
        logger.log(_LOG_LEVELS[code], "%s", entry.render())
        return entry

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def with_code(self, code: str) -> list[Diagnostic]:
        return [d for d in self._entries if d.code == code]

    def counts_by_code(self) -> dict[str, int]:
        """Breakdown of recorded diagnostics by code."""
        counts: dict[str, int] = {}
        for entry in self._entries:
            counts[entry.code] = counts.get(entry.code, 0) + 1
        return counts
