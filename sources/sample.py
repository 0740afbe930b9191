"""
Built-in sample listings.

Used when no listing file is available so the report can always run.
"""

from typing import List

from .base import ListingSource


# Budapest, Debrecen and Nyíregyháza listings plus panel flats
SAMPLE_RECORDS = (
    "REALESTATE#Budapest#250000#100#4#CONDOMINIUM",
    "REALESTATE#Debrecen#220000#120#5#FAMILYHOUSE",
    "REALESTATE#Nyíregyháza#110000#60#2#FARM",
    "REALESTATE#Nyíregyháza#250000#160#6#FAMILYHOUSE",
    "REALESTATE#Kisvárda#150000#50#2#CONDOMINIUM",
    "PANEL#Budapest#180000#70#3#CONDOMINIUM#4#no",
    "PANEL#Debrecen#120000#35#2#CONDOMINIUM#0#yes",
    "PANEL#Tiszaújváros#120000#750#3#CONDOMINIUM#10#no",
    "PANEL#Nyíregyháza#170000#80#3#CONDOMINIUM#7#no",
)


class SampleListingSource(ListingSource):
    """Fixed sample data; never unavailable."""

    @property
    def name(self) -> str:
        return "built-in sample data"

    def read_lines(self) -> List[str]:
        return list(SAMPLE_RECORDS)
