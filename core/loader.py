"""
Loader - Parse and Register Listing Lines

Pipeline order:
1. PARSE - every line independently, failures collected
2. REGISTER - parsed listings inserted in input order
3. REPORT - skipped lines and price collisions go to the diagnostics log
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .diagnostics import MALFORMED_RECORD, PRICE_COLLISION, DiagnosticsLog
from .models import Property
from .parser import parse_lines
from .registry import PropertyRegistry


logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of loading one batch of listing lines."""

    registry: PropertyRegistry
    diagnostics: DiagnosticsLog
    parsed: int = 0
    stored: int = 0
    rejected: int = 0
    collided: list[Property] = field(default_factory=list)
    source_name: str = ""
    fallback_used: bool = False

    @property
    def collisions(self) -> int:
        return len(self.collided)

    def to_dict(self) -> dict:
        return {
            "source": self.source_name,
            "fallback_used": self.fallback_used,
            "parsed": self.parsed,
            "stored": self.stored,
            "rejected": self.rejected,
            "collisions": self.collisions,
            "registry_size": len(self.registry),
        }


def load_registry(
    lines: Iterable[str],
    registry: Optional[PropertyRegistry] = None,
    diagnostics: Optional[DiagnosticsLog] = None,
) -> LoadResult:
    """
    Parse listing lines and insert them into a registry.

    Args:
        lines: Raw '#'-delimited listing lines
        registry: Registry to fill (a new one if omitted)
        diagnostics: Log for skipped lines and collisions (a new one if omitted)

    Returns:
        LoadResult with the registry and load counts
    """
    registry = registry if registry is not None else PropertyRegistry()
    diagnostics = diagnostics if diagnostics is not None else DiagnosticsLog()

    batch = parse_lines(lines)
    for failure in batch.failures:
        diagnostics.record(
            MALFORMED_RECORD,
            failure.reason,
            line_number=failure.line_number,
            raw=failure.line,
        )

    result = LoadResult(
        registry=registry,
        diagnostics=diagnostics,
        parsed=len(batch.records),
        rejected=len(batch.failures),
    )

    for prop in batch.records:
        if registry.insert(prop):
            result.stored += 1
        else:
            result.collided.append(prop)
            diagnostics.record(
                PRICE_COLLISION,
                f"total price {prop.total_price()} already stored, dropped {prop.city} listing",
                raw=prop.to_record(),
            )

    logger.info(
        "Loaded %d listings (%d skipped, %d price collisions)",
        result.stored,
        result.rejected,
        result.collisions,
    )
    return result
