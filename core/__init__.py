"""
Listing Valuation Engine - Core Business Logic

This package provides the valuation pipeline:
1. Parsing ('#'-delimited listing lines, fault tolerant per line)
2. Valuation (city modifiers, panel floor/insulation modifiers)
3. Registration (price-ordered, price-deduplicating registry)

The core performs no I/O. Recoverable conditions are recorded in a
DiagnosticsLog supplied by the caller.
"""

from .models import Genre, Property, PanelProperty
from .modifiers import CITY_MODIFIERS, DEFAULT_CITY_MODIFIER, city_modifier
from .parser import ParseBatch, ParseFailure, parse_line, parse_lines
from .registry import PropertyRegistry, is_price_collision
from .diagnostics import (
    DIAGNOSTIC_CODES,
    Diagnostic,
    DiagnosticsLog,
)
from .loader import LoadResult, load_registry

__all__ = [
    # Models
    "Genre",
    "Property",
    "PanelProperty",
    # Modifiers
    "CITY_MODIFIERS",
    "DEFAULT_CITY_MODIFIER",
    "city_modifier",
    # Parser
    "ParseBatch",
    "ParseFailure",
    "parse_line",
    "parse_lines",
    # Registry
    "PropertyRegistry",
    "is_price_collision",
    # Diagnostics
    "DIAGNOSTIC_CODES",
    "Diagnostic",
    "DiagnosticsLog",
    # Loader
    "LoadResult",
    "load_registry",
]
