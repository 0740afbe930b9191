"""
Tests for the record parser

Verifies:
- Both record kinds parse into the right type
- Malformed lines become ParseFailure values, never exceptions
- One bad line does not stop later lines
- No deduplication at parse time
"""

import pytest
from pathlib import Path
import sys

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core import Genre, PanelProperty, ParseFailure, Property, parse_line, parse_lines
from core.diagnostics import MALFORMED_RECORD


# =============================================================================
# Test: Valid Records
# =============================================================================

class TestValidRecords:

    def test_realestate_record(self):
        result = parse_line("REALESTATE#Budapest#2500#100#4#CONDOMINIUM")

        assert type(result) is Property
        assert result.city == "Budapest"
        assert result.price_per_sqm == 2500.0
        assert result.area_sqm == 100
        assert result.number_of_rooms == 4.0
        assert result.genre is Genre.CONDOMINIUM
        assert result.total_price() == 325000

    def test_panel_record(self):
        result = parse_line("PANEL#Debrecen#120000#35#2#CONDOMINIUM#0#yes")

        assert isinstance(result, PanelProperty)
        assert result.floor == 0
        assert result.is_insulated is True

    @pytest.mark.parametrize("token,expected", [
        ("yes", True),
        ("YES", True),
        ("Yes", True),
        ("no", False),
        ("false", False),
        ("true", False),
        ("", False),
    ])
    def test_insulated_token(self, token, expected):
        result = parse_line(f"PANEL#Budapest#1000#50#2#FARM#3#{token}")
        assert result.is_insulated is expected

    def test_decimal_fields(self):
        result = parse_line("REALESTATE#Szeged#1999.99#45#1.5#FAMILYHOUSE")
        assert result.price_per_sqm == 1999.99
        assert result.number_of_rooms == 1.5

    def test_line_terminator_stripped(self):
        result = parse_line("REALESTATE#Budapest#2500#100#4#FARM\r\n")
        assert result.genre is Genre.FARM

    def test_extra_fields_ignored_for_realestate(self):
        result = parse_line("REALESTATE#Budapest#2500#100#4#FARM#7#yes")
        assert type(result) is Property

    def test_zero_rooms_allowed(self):
        result = parse_line("REALESTATE#Budapest#2500#100#0#FARM")
        assert result.average_sqm_per_room() == 0


# =============================================================================
# Test: Malformed Records
# =============================================================================

class TestMalformedRecords:

    @pytest.mark.parametrize("line", [
        "PANEL#Budapest#abc#70#3#CONDOMINIUM#4#false",
        "REALESTATE#Budapest#2500#10.5#4#CONDOMINIUM",
        "REALESTATE#Budapest#2500#100#four#CONDOMINIUM",
        "REALESTATE#Budapest#nan#100#4#CONDOMINIUM",
        "REALESTATE#Budapest#inf#100#4#CONDOMINIUM",
        "PANEL#Budapest#2500#70#3#CONDOMINIUM#top#no",
    ])
    def test_unparseable_number(self, line):
        result = parse_line(line)
        assert isinstance(result, ParseFailure)
        assert result.code == MALFORMED_RECORD

    @pytest.mark.parametrize("genre", ["condominium", "FLAT", "", " FARM"])
    def test_unknown_genre(self, genre):
        result = parse_line(f"REALESTATE#Budapest#2500#100#4#{genre}")
        assert isinstance(result, ParseFailure)
        assert "genre" in result.reason

    def test_unknown_kind(self):
        result = parse_line("HOUSE#Budapest#2500#100#4#FARM")
        assert isinstance(result, ParseFailure)
        assert "kind" in result.reason

    def test_panel_without_floor_fields(self):
        result = parse_line("PANEL#Budapest#2500#70#3#CONDOMINIUM")
        assert isinstance(result, ParseFailure)
        assert "PANEL" in result.reason

    def test_too_few_fields(self):
        result = parse_line("REALESTATE#Budapest#2500")
        assert isinstance(result, ParseFailure)

    def test_negative_price_rejected(self):
        result = parse_line("REALESTATE#Budapest#-2500#100#4#FARM")
        assert isinstance(result, ParseFailure)

    def test_negative_rooms_rejected(self):
        result = parse_line("PANEL#Debrecen#120000#35#-2#CONDOMINIUM#0#yes")
        assert isinstance(result, ParseFailure)
        assert "number_of_rooms" in result.reason

    def test_failure_keeps_line_and_number(self):
        result = parse_line("garbage", line_number=7)
        assert result.line == "garbage"
        assert result.line_number == 7


# =============================================================================
# Test: Batches
# =============================================================================

class TestParseLines:

    def test_parsing_continues_after_bad_line(self):
        batch = parse_lines([
            "REALESTATE#Budapest#2500#100#4#CONDOMINIUM",
            "PANEL#Budapest#abc#70#3#CONDOMINIUM#4#false",
            "REALESTATE#Debrecen#2200#120#5#FAMILYHOUSE",
        ])

        assert [p.city for p in batch.records] == ["Budapest", "Debrecen"]
        assert len(batch.failures) == 1
        assert batch.failures[0].line_number == 2
        assert batch.total_lines == 3

    def test_input_order_kept_and_no_dedup(self):
        batch = parse_lines([
            "REALESTATE#Debrecen#2200#120#5#FAMILYHOUSE",
            "REALESTATE#Budapest#2500#100#4#CONDOMINIUM",
            "REALESTATE#Budapest#2500#100#4#CONDOMINIUM",
        ])
        assert [p.total_price() for p in batch.records] == [316800, 325000, 325000]

    def test_blank_lines_skipped(self):
        batch = parse_lines(["", "   ", "REALESTATE#Budapest#2500#100#4#FARM", "\n"])
        assert len(batch.records) == 1
        assert batch.failures == []

    def test_round_trip_through_record_format(self):
        panel = parse_line("PANEL#Nyíregyháza#170000#80#3#CONDOMINIUM#7#no")
        assert parse_line(panel.to_record()).total_price() == panel.total_price()
