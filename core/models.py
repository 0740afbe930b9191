"""
Data models for the listing valuation engine.

Two property kinds share one capability set (priced, comparable,
reportable). PanelProperty layers its floor and insulation modifiers on
top of the base city modifier.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import ClassVar, Optional

from utils.formatting import format_decimal

from .diagnostics import DEGENERATE_ARITHMETIC, INVALID_DISCOUNT, DiagnosticsLog
from .modifiers import (
    apply_modifier,
    city_modifier,
    floor_adjustment,
    insulation_adjustment,
)


logger = logging.getLogger(__name__)

RECORD_DELIMITER = "#"


class Genre(Enum):
    """
    Listing classification used for report filtering.

    Names are matched exactly - no case folding.
    """
    FAMILYHOUSE = "FAMILYHOUSE"
    CONDOMINIUM = "CONDOMINIUM"
    FARM = "FARM"

    @classmethod
    def from_string(cls, value: str) -> Optional["Genre"]:
        """Convert an exact enum name to Genre."""
        return cls.__members__.get(value)


def _report_zero_rooms(detail: str, diagnostics: Optional[DiagnosticsLog]) -> None:
    if diagnostics is not None:
        diagnostics.record(DEGENERATE_ARITHMETIC, detail)
    else:
        logger.debug("%s: %s", DEGENERATE_ARITHMETIC, detail)


def _format_record_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


@total_ordering
@dataclass(eq=False)
class Property:
    """
    A real-estate listing valued by city.

    Ordering and equality use the derived total price only, so two
    listings that price identically compare equal whatever their other
    fields are. The registry relies on this.
    """

    KIND: ClassVar[str] = "REALESTATE"

    city: str
    price_per_sqm: float
    area_sqm: int
    number_of_rooms: float
    genre: Genre

    def __post_init__(self):
        """Validate fields after initialization."""
        if self.price_per_sqm < 0:
            raise ValueError("price_per_sqm must be non-negative")
        if self.area_sqm < 0:
            raise ValueError("area_sqm must be non-negative")
        if self.number_of_rooms < 0:
            raise ValueError("number_of_rooms must be non-negative")
        if not isinstance(self.genre, Genre):
            raise ValueError(f"genre must be a Genre, got {self.genre!r}")

    # -------------------------------------------------------------------------
    # Valuation
    # -------------------------------------------------------------------------

    @property
    def base_price(self) -> float:
        return self.price_per_sqm * self.area_sqm

    def modifier_points(self) -> int:
        """Running multiplier in percentage points."""
        return city_modifier(self.city)

    def total_price(self) -> int:
        """Total price after modifiers, truncated. Never cached."""
        return apply_modifier(self.base_price, self.modifier_points())

    def average_sqm_per_room(self, diagnostics: Optional[DiagnosticsLog] = None) -> float:
        """Area per room; 0 when the listing has no rooms."""
        if self.number_of_rooms == 0:
            _report_zero_rooms(
                f"zero rooms in {self.city} listing, average sqm per room is 0",
                diagnostics,
            )
            return 0.0
        return self.area_sqm / self.number_of_rooms

    def make_discount(
        self,
        percentage: int,
        diagnostics: Optional[DiagnosticsLog] = None,
    ) -> bool:
        """
        Reduce the price per sqm by a percentage.

        Args:
            percentage: Discount in percent, 0-100 inclusive.
            diagnostics: Optional log that receives an INVALID_DISCOUNT entry.

        Returns:
            True if applied, False if the percentage was out of range and
            the listing was left unchanged.
        """
        if not 0 <= percentage <= 100:
            detail = f"discount of {percentage}% rejected for {self.city} listing"
            if diagnostics is not None:
                diagnostics.record(INVALID_DISCOUNT, detail)
            else:
                logger.warning("%s: %s", INVALID_DISCOUNT, detail)
            return False

        self.price_per_sqm = self.price_per_sqm * (100 - percentage) / 100
        return True

    def has_same_total_price_as(self, other: "Property") -> bool:
        return self.total_price() == other.total_price()

    # -------------------------------------------------------------------------
    # Ordering
    # -------------------------------------------------------------------------

    def __eq__(self, other):
        if not isinstance(other, Property):
            return NotImplemented
        return self.total_price() == other.total_price()

    def __lt__(self, other):
        if not isinstance(other, Property):
            return NotImplemented
        return self.total_price() < other.total_price()

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(self, diagnostics: Optional[DiagnosticsLog] = None) -> str:
        return (
            f"City: {self.city}, Price/sqm: {format_decimal(self.price_per_sqm)}, "
            f"Area: {self.area_sqm} sqm, Rooms: {format_decimal(self.number_of_rooms, 1)}, "
            f"Genre: {self.genre.name}, Total Price: {self.total_price()}, "
            f"Avg sqm/room: {format_decimal(self.average_sqm_per_room(diagnostics))}"
        )

    def __str__(self) -> str:
        return self.render()

    def record_fields(self) -> list[str]:
        return [
            self.KIND,
            self.city,
            _format_record_number(self.price_per_sqm),
            str(self.area_sqm),
            _format_record_number(self.number_of_rooms),
            self.genre.name,
        ]

    def to_record(self) -> str:
        """The listing in the '#'-delimited input format."""
        return RECORD_DELIMITER.join(self.record_fields())

    def to_dict(self) -> dict:
        return {
            "kind": self.KIND,
            "city": self.city,
            "price_per_sqm": self.price_per_sqm,
            "area_sqm": self.area_sqm,
            "number_of_rooms": self.number_of_rooms,
            "genre": self.genre.name,
            "total_price": self.total_price(),
            "average_sqm_per_room": round(self.average_sqm_per_room(), 2),
        }


@dataclass(eq=False)
class PanelProperty(Property):
    """A flat in a prefabricated panel block."""

    KIND: ClassVar[str] = "PANEL"

    floor: int = 0
    is_insulated: bool = False

    def modifier_points(self) -> int:
        """City modifier plus additive floor and insulation adjustments."""
        return (
            super().modifier_points()
            + floor_adjustment(self.floor)
            + insulation_adjustment(self.is_insulated)
        )

    def price_per_room(self, diagnostics: Optional[DiagnosticsLog] = None) -> int:
        """Unmodified base price per room, truncated; 0 with no rooms."""
        if self.number_of_rooms == 0:
            _report_zero_rooms(
                f"zero rooms in {self.city} panel, price per room is 0",
                diagnostics,
            )
            return 0
        return int(self.base_price / self.number_of_rooms)

    def render(self, diagnostics: Optional[DiagnosticsLog] = None) -> str:
        insulated = "yes" if self.is_insulated else "no"
        return (
            f"Panel - City: {self.city}, Price/sqm: {format_decimal(self.price_per_sqm)}, "
            f"Area: {self.area_sqm} sqm, Rooms: {format_decimal(self.number_of_rooms, 1)}, "
            f"Genre: {self.genre.name}, Floor: {self.floor}, Insulated: {insulated}, "
            f"Total Price: {self.total_price()}, "
            f"Avg sqm/room: {format_decimal(self.average_sqm_per_room(diagnostics))}"
        )

    def record_fields(self) -> list[str]:
        return super().record_fields() + [
            str(self.floor),
            "yes" if self.is_insulated else "no",
        ]

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["floor"] = self.floor
        data["is_insulated"] = self.is_insulated
        data["price_per_room"] = self.price_per_room()
        return data
