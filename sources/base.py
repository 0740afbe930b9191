"""
Base listing source interface.
"""

from abc import ABC, abstractmethod
from typing import List


class ListingSourceUnavailable(Exception):
    """Raised when a listing source can not be read."""

    def __init__(self, source_name: str, reason: str):
        self.source_name = source_name
        self.reason = reason
        super().__init__(f"{source_name}: {reason}")


class ListingSource(ABC):
    """Abstract base class for anything that supplies listing lines."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short description used in logs and diagnostics."""
        pass

    @abstractmethod
    def read_lines(self) -> List[str]:
        """
        Read every listing line from the source.

        Returns:
            Raw '#'-delimited lines, without line terminators.

        Raises:
            ListingSourceUnavailable: If the source can not be read.
        """
        pass
