"""
Listing file source.
"""

from pathlib import Path
from typing import List, Union

from .base import ListingSource, ListingSourceUnavailable


class FileListingSource(ListingSource):
    """Reads listing lines from a flat text file."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @property
    def name(self) -> str:
        return str(self.path)

    def read_lines(self) -> List[str]:
        try:
            with open(self.path, "r", encoding=self.encoding) as f:
                return f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise ListingSourceUnavailable(self.name, str(e)) from e
