"""
Source loading with sample-data fallback.
"""

import logging
from typing import Optional

from core.diagnostics import SOURCE_UNAVAILABLE, DiagnosticsLog
from core.loader import LoadResult, load_registry
from core.registry import PropertyRegistry

from .base import ListingSource, ListingSourceUnavailable
from .sample import SampleListingSource


logger = logging.getLogger(__name__)


def load_from_source(
    source: ListingSource,
    fallback: Optional[ListingSource] = None,
    registry: Optional[PropertyRegistry] = None,
    diagnostics: Optional[DiagnosticsLog] = None,
) -> LoadResult:
    """
    Load listings from a source, falling back to sample data.

    Args:
        source: Primary listing source
        fallback: Used when the primary source is unavailable
            (default: SampleListingSource)
        registry: Registry to fill
        diagnostics: Diagnostics log for the run

    Returns:
        LoadResult; fallback_used is set when the primary source failed.

    Raises:
        ListingSourceUnavailable: If the fallback is unavailable as well.
    """
    diagnostics = diagnostics if diagnostics is not None else DiagnosticsLog()
    fallback = fallback if fallback is not None else SampleListingSource()

    try:
        lines = source.read_lines()
        active = source
    except ListingSourceUnavailable as e:
        diagnostics.record(
            SOURCE_UNAVAILABLE,
            f"{e.reason}; loading {fallback.name} instead",
            raw=e.source_name,
        )
        lines = fallback.read_lines()
        active = fallback

    result = load_registry(lines, registry=registry, diagnostics=diagnostics)
    result.source_name = active.name
    result.fallback_used = active is not source
    logger.info("Loaded %d properties from %s", len(result.registry), active.name)
    return result
