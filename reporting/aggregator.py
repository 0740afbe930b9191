"""
Report Aggregator

Computes statistics and filtered views over a snapshot of the registry
and renders them as report lines. Works on a tuple of listings, so the
registry can not change underneath a report.

Output Structure:
1. Average square meter price
2. Cheapest property price
3. Average sqm per room of the most expensive listing in the report city
   (only when the city has a listing)
4. Total price of all properties
5. Condominiums with price not exceeding the average total price
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from core.diagnostics import DiagnosticsLog
from core.models import Genre, Property
from utils.formatting import format_decimal


DEFAULT_REPORT_CITY = "Budapest"

CONDOMINIUM_HEADER = "Condominiums with price not exceeding average:"


@dataclass
class ReportSummary:
    """Headline statistics of one report."""

    property_count: int
    average_price_per_sqm: float
    cheapest_total_price: int
    sum_of_total_prices: int
    average_total_price: float
    city: str
    most_expensive_in_city: Optional[Property] = None
    condominiums: List[Property] = field(default_factory=list)

    def to_dict(self) -> dict:
        top = self.most_expensive_in_city
        return {
            "property_count": self.property_count,
            "average_price_per_sqm": round(self.average_price_per_sqm, 2),
            "cheapest_total_price": self.cheapest_total_price,
            "sum_of_total_prices": self.sum_of_total_prices,
            "average_total_price": round(self.average_total_price, 2),
            "city": self.city,
            "most_expensive_in_city": top.to_dict() if top else None,
            "condominiums": [p.to_dict() for p in self.condominiums],
        }


@dataclass
class ReportDocument:
    """Rendered report lines, written verbatim to every sink."""

    lines: List[str]
    summary: ReportSummary

    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)


class ReportAggregator:
    """Statistics over a fixed set of listings."""

    def __init__(
        self,
        properties: Iterable[Property],
        city: str = DEFAULT_REPORT_CITY,
        diagnostics: Optional[DiagnosticsLog] = None,
    ):
        """
        Args:
            properties: Listings in ascending total-price order (registry order)
            city: City whose most expensive listing is reported
            diagnostics: Receives zero-room fallbacks hit while rendering
        """
        self._properties = tuple(properties)
        self.city = city
        self.diagnostics = diagnostics

    def average_price_per_sqm(self) -> float:
        if not self._properties:
            return 0.0
        return sum(p.price_per_sqm for p in self._properties) / len(self._properties)

    def cheapest_total_price(self) -> int:
        if not self._properties:
            return 0
        return min(p.total_price() for p in self._properties)

    def most_expensive_in_city(self, city: str) -> Optional[Property]:
        """Listing with the highest total price in a city, or None."""
        in_city = [p for p in self._properties if p.city == city]
        if not in_city:
            return None
        return max(in_city, key=lambda p: p.total_price())

    def sum_of_total_prices(self) -> int:
        return sum(p.total_price() for p in self._properties)

    def average_total_price(self) -> float:
        if not self._properties:
            return 0.0
        return self.sum_of_total_prices() / len(self._properties)

    def condominiums_at_or_below_average(self) -> List[Property]:
        threshold = self.average_total_price()
        return [
            p
            for p in self._properties
            if p.genre == Genre.CONDOMINIUM and p.total_price() <= threshold
        ]

    def summary(self) -> ReportSummary:
        return ReportSummary(
            property_count=len(self._properties),
            average_price_per_sqm=self.average_price_per_sqm(),
            cheapest_total_price=self.cheapest_total_price(),
            sum_of_total_prices=self.sum_of_total_prices(),
            average_total_price=self.average_total_price(),
            city=self.city,
            most_expensive_in_city=self.most_expensive_in_city(self.city),
            condominiums=self.condominiums_at_or_below_average(),
        )

    def render(self) -> List[str]:
        return self.build().lines

    def build(self) -> ReportDocument:
        """Compute the summary once and render it."""
        summary = self.summary()

        lines = [
            f"Average square meter price: {format_decimal(summary.average_price_per_sqm)}",
            f"Cheapest property price: {summary.cheapest_total_price}",
        ]
        if summary.most_expensive_in_city is not None:
            avg_sqm = summary.most_expensive_in_city.average_sqm_per_room(self.diagnostics)
            lines.append(
                f"Average sqm per room of most expensive {summary.city} property: "
                f"{format_decimal(avg_sqm)}"
            )
        lines.append(f"Total price of all properties: {summary.sum_of_total_prices}")
        lines.append("")
        lines.append(CONDOMINIUM_HEADER)
        lines.extend(p.render(self.diagnostics) for p in summary.condominiums)

        return ReportDocument(lines=lines, summary=summary)


def build_report(
    properties: Iterable[Property],
    city: str = DEFAULT_REPORT_CITY,
    diagnostics: Optional[DiagnosticsLog] = None,
) -> ReportDocument:
    """Convenience wrapper: aggregate and render in one call."""
    return ReportAggregator(properties, city=city, diagnostics=diagnostics).build()
