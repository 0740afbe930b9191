"""
Utility modules for the valuation engine.
"""

from .formatting import format_decimal, format_price
from .config import Config, configure_logging

__all__ = ["format_decimal", "format_price", "Config", "configure_logging"]
