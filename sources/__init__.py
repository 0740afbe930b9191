"""
Listing sources for the valuation engine.

Available sources:
- FileListingSource: '#'-delimited listing file on disk
- SampleListingSource: Built-in sample listings used as a fallback
"""

from .base import ListingSource, ListingSourceUnavailable
from .file_source import FileListingSource
from .sample import SAMPLE_RECORDS, SampleListingSource
from .loader import load_from_source

__all__ = [
    "ListingSource",
    "ListingSourceUnavailable",
    "FileListingSource",
    "SampleListingSource",
    "SAMPLE_RECORDS",
    "load_from_source",
]
