"""
Record Parser - Listing Line to Property

Turns one '#'-delimited line into a Property, a PanelProperty or a
ParseFailure. Failures are returned, never raised, so one bad line can
not stop the rest of the file from loading.

Line layout:
    REALESTATE#<city>#<pricePerSqm>#<areaSqm>#<numberOfRooms>#<GENRE>
    PANEL#<city>#<pricePerSqm>#<areaSqm>#<numberOfRooms>#<GENRE>#<floor>#<yes|no>
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Final, Iterable, Optional, Union

from .diagnostics import MALFORMED_RECORD
from .models import RECORD_DELIMITER, Genre, PanelProperty, Property


# =============================================================================
# Layout Constants
# =============================================================================

KIND_REALESTATE: Final = Property.KIND
KIND_PANEL: Final = PanelProperty.KIND

MIN_FIELDS: Final[int] = 6
MIN_PANEL_FIELDS: Final[int] = 8

INSULATED_TOKEN: Final = "yes"

_INTEGER_PATTERN: Final = re.compile(r"^[+-]?\d+$")
_DECIMAL_PATTERN: Final = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


@dataclass(frozen=True)
class ParseFailure:
    """A line that could not be turned into a listing."""

    line: str
    reason: str
    line_number: Optional[int] = None
    code: str = MALFORMED_RECORD


ParseResult = Union[Property, ParseFailure]


@dataclass
class ParseBatch:
    """Parsed listings in input order plus the lines that were skipped."""

    records: list[Property] = field(default_factory=list)
    failures: list[ParseFailure] = field(default_factory=list)

    @property
    def total_lines(self) -> int:
        return len(self.records) + len(self.failures)


class _FieldError(ValueError):
    pass


def _parse_decimal(value: str, name: str) -> float:
    if not _DECIMAL_PATTERN.match(value):
        raise _FieldError(f"{name} is not a number: {value!r}")
    number = float(value)
    if not math.isfinite(number):
        raise _FieldError(f"{name} is not finite: {value!r}")
    return number


def _parse_integer(value: str, name: str) -> int:
    if not _INTEGER_PATTERN.match(value):
        raise _FieldError(f"{name} is not an integer: {value!r}")
    return int(value)


def parse_line(line: str, line_number: Optional[int] = None) -> ParseResult:
    """
    Parse a single listing line.

    Args:
        line: Raw line, with or without its line terminator.
        line_number: 1-based position in the source, for diagnostics.

    Returns:
        Property or PanelProperty on success, ParseFailure otherwise.
    """
    text = line.rstrip("\r\n")
    parts = text.split(RECORD_DELIMITER)

    def fail(reason: str) -> ParseFailure:
        return ParseFailure(line=text, reason=reason, line_number=line_number)

    if len(parts) < MIN_FIELDS:
        return fail(f"expected at least {MIN_FIELDS} fields, got {len(parts)}")

    kind = parts[0]
    if kind not in (KIND_REALESTATE, KIND_PANEL):
        return fail(f"unknown record kind: {kind!r}")
    if kind == KIND_PANEL and len(parts) < MIN_PANEL_FIELDS:
        return fail(f"PANEL record needs {MIN_PANEL_FIELDS} fields, got {len(parts)}")

    city = parts[1]
    try:
        price_per_sqm = _parse_decimal(parts[2], "price per sqm")
        area_sqm = _parse_integer(parts[3], "area")
        number_of_rooms = _parse_decimal(parts[4], "number of rooms")
        floor = _parse_integer(parts[6], "floor") if kind == KIND_PANEL else 0
    except _FieldError as e:
        return fail(str(e))

    genre = Genre.from_string(parts[5])
    if genre is None:
        return fail(f"unknown genre: {parts[5]!r}")

    try:
        if kind == KIND_PANEL:
            return PanelProperty(
                city=city,
                price_per_sqm=price_per_sqm,
                area_sqm=area_sqm,
                number_of_rooms=number_of_rooms,
                genre=genre,
                floor=floor,
                is_insulated=parts[7].lower() == INSULATED_TOKEN,
            )
        return Property(
            city=city,
            price_per_sqm=price_per_sqm,
            area_sqm=area_sqm,
            number_of_rooms=number_of_rooms,
            genre=genre,
        )
    except ValueError as e:
        return fail(str(e))


def parse_lines(lines: Iterable[str]) -> ParseBatch:
    """
    Parse every line independently.

    Blank lines are not records and are skipped without a failure.
    No deduplication happens here.
    """
    batch = ParseBatch()
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        result = parse_line(line, line_number=line_number)
        if isinstance(result, ParseFailure):
            batch.failures.append(result)
        else:
            batch.records.append(result)
    return batch
