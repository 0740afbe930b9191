"""
Pricing Modifiers

City and panel modifiers used by the total-price derivation. Modifiers are
held in whole percentage points so that additive composition is exact:
Budapest, ground floor and insulation give 130 + 5 + 5 = 140, i.e. x1.40.
"""

from typing import Final


# =============================================================================
# City Modifiers
# =============================================================================

# Exact, case-sensitive city-name match
CITY_MODIFIERS: Final[dict[str, int]] = {
    "Budapest": 130,
    "Debrecen": 120,
    "Nyíregyháza": 115,
}

DEFAULT_CITY_MODIFIER: Final[int] = 100


# =============================================================================
# Panel Modifiers
# =============================================================================

LOW_FLOOR_RANGE: Final[range] = range(0, 3)  # floors 0-2 inclusive
LOW_FLOOR_ADJUSTMENT: Final[int] = 5
TOP_FLOOR: Final[int] = 10
TOP_FLOOR_ADJUSTMENT: Final[int] = -5
INSULATION_ADJUSTMENT: Final[int] = 5

PERCENT: Final[int] = 100


def city_modifier(city: str) -> int:
    """City modifier in percentage points; unknown cities get 100."""
    return CITY_MODIFIERS.get(city, DEFAULT_CITY_MODIFIER)


def floor_adjustment(floor: int) -> int:
    """Additive panel adjustment for the floor the flat is on."""
    if floor in LOW_FLOOR_RANGE:
        return LOW_FLOOR_ADJUSTMENT
    if floor == TOP_FLOOR:
        return TOP_FLOOR_ADJUSTMENT
    return 0


def insulation_adjustment(is_insulated: bool) -> int:
    return INSULATION_ADJUSTMENT if is_insulated else 0


def apply_modifier(base_price: float, modifier_points: int) -> int:
    """Apply a modifier once to the base price and truncate to an integer."""
    return int(base_price * modifier_points / PERCENT)
