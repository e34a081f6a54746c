#!filepath: tests/uwp_test/test_codec.py
import pytest

from world_collapse.uwp.codec import (
    PSEUDOHEX,
    decode,
    encode,
    format_profile,
    parse_profile,
)
from world_collapse.uwp.world import Starport
from world_collapse.utils.errors import InvalidSymbolError, OutOfRangeError


def test_round_trip_every_value():
    for v in range(35):
        assert decode(encode(v)) == v


def test_round_trip_every_symbol():
    for s in PSEUDOHEX:
        assert encode(decode(s)) == s


@pytest.mark.parametrize(
    "value, symbol",
    [(0, "0"), (9, "9"), (10, "A"), (15, "F"), (16, "G"), (17, "H"),
     (18, "J"), (23, "O"), (32, "X"), (34, "Z")],
)
def test_encode_known_symbols(value, symbol):
    assert encode(value) == symbol


def test_encode_skips_letter_i():
    assert "I" not in PSEUDOHEX
    assert len(PSEUDOHEX) == 35


def test_encode_negative_clamps_to_zero():
    assert encode(-1) == "0"
    assert encode(-50) == "0"


def test_encode_above_range_raises():
    with pytest.raises(OutOfRangeError):
        encode(35)


def test_decode_is_case_insensitive():
    assert decode("a") == 10
    assert decode("j") == 18


def test_decode_unknown_symbol_raises():
    with pytest.raises(InvalidSymbolError):
        decode("I")
    with pytest.raises(InvalidSymbolError):
        decode("?")


def test_decode_legacy_fallback_warns(captured_logs):
    """strict=False 保留旧行为：未知符号 → 0，并打 warning"""
    assert decode("?", strict=False) == 0
    assert any("legacy" in line for line in captured_logs)


def test_format_profile():
    assert format_profile("A", 5, 6, 6, 9, 9, 9, 14) == "A566999-E"
    assert format_profile(Starport.X, 0, 0, 0, 0, 0, 0, 0) == "X000000-0"


def test_format_profile_negative_law_renders_zero():
    assert format_profile("C", 7, 5, 5, 4, 2, -3, 8) == "C755420-8"


def test_format_profile_rejects_unknown_starport():
    with pytest.raises(InvalidSymbolError):
        format_profile("Q", 5, 6, 6, 9, 9, 9, 14)


def test_parse_profile():
    world = parse_profile("A566999-E", population_exponent=5, naval_base=True)

    assert world.starport == Starport.A
    assert (world.size, world.atmosphere, world.hydrographics) == (5, 6, 6)
    assert (world.population, world.government, world.law) == (9, 9, 9)
    assert world.techlevel == 14
    assert world.population_exponent == 5
    assert world.naval_base is True
    assert world.uwp == "A566999-E"


def test_parse_profile_keyword_fields_override():
    world = parse_profile("A566999-E", starport="C", techlevel=9)

    assert world.starport == Starport.C
    assert world.techlevel == 9
    assert world.uwp == "C566999-9"


def test_parse_profile_lowercase():
    assert parse_profile(" x000000-0 ").starport == Starport.X


@pytest.mark.parametrize("text", ["A566999E", "Z566999-E", "A56699-E", "", "A566999-EE"])
def test_parse_profile_malformed(text):
    with pytest.raises(InvalidSymbolError):
        parse_profile(text)


def test_parse_profile_legacy_fallback():
    with pytest.raises(InvalidSymbolError):
        parse_profile("A5I6999-E")

    world = parse_profile("A5I6999-E", strict=False)
    assert world.atmosphere == 0
