#!filepath: world_collapse/uwp/codec.py
"""
UWP pseudohex codec.

0-15 are plain hex digits; 16-34 continue through the alphabet with
I skipped (G H J K L M N O P Q R S T U V W X Y Z).

    encode(10)  -> "A"
    decode("J") -> 18
    format_profile("A", 5, 6, 6, 9, 9, 9, 14) -> "A566999-E"
"""
from __future__ import annotations

import re

from world_collapse import logs
from world_collapse.utils.errors import InvalidSymbolError, OutOfRangeError

PSEUDOHEX = "0123456789ABCDEFGHJKLMNOPQRSTUVWXYZ"
MAX_VALUE = len(PSEUDOHEX) - 1  # 34

_DECODE = {symbol: value for value, symbol in enumerate(PSEUDOHEX)}

STARPORT_SYMBOLS = "ABCDEX"

_PROFILE_RE = re.compile(
    r"^(?P<starport>[A-Z])(?P<body>[0-9A-Z]{6})-(?P<tl>[0-9A-Z])$"
)

PROFILE_FIELDS = (
    "size",
    "atmosphere",
    "hydrographics",
    "population",
    "government",
    "law",
)


def encode(value: int) -> str:
    """int → pseudohex symbol. Negative values clamp to 0."""
    value = int(value)
    if value < 0:
        value = 0
    if value > MAX_VALUE:
        raise OutOfRangeError(
            f"value {value} exceeds pseudohex range 0-{MAX_VALUE}"
        )
    return PSEUDOHEX[value]


def decode(symbol: str, *, strict: bool = True) -> int:
    """
    pseudohex symbol → int (case-insensitive).

    strict=False keeps the legacy behaviour of decoding unknown
    symbols as 0; a warning is logged every time it happens.
    """
    key = str(symbol).strip().upper()
    value = _DECODE.get(key)
    if value is not None:
        return value

    if strict:
        raise InvalidSymbolError(f"unrecognised pseudohex symbol: {symbol!r}")

    logs.warning(f"[Codec] unrecognised symbol {symbol!r} decoded as 0 (legacy)")
    return 0


def _starport_symbol(starport) -> str:
    symbol = getattr(starport, "value", starport)
    symbol = str(symbol).upper()
    if symbol not in STARPORT_SYMBOLS:
        raise InvalidSymbolError(f"unrecognised starport class: {starport!r}")
    return symbol


def format_profile(
    starport,
    size: int,
    atmosphere: int,
    hydrographics: int,
    population: int,
    government: int,
    law: int,
    techlevel: int,
) -> str:
    """
    Canonical profile string: <port><siz><atm><hyd><pop><gov><law>-<tl>
    """
    body = "".join(
        encode(v)
        for v in (size, atmosphere, hydrographics, population, government, law)
    )
    return f"{_starport_symbol(starport)}{body}-{encode(techlevel)}"


def parse_profile(text: str, *, strict: bool = True, **fields):
    """
    Parse a canonical profile string into a WorldRecord.

    Extra keyword arguments (population_exponent, naval_base, ...)
    are passed through to the record and override parsed fields.
    """
    from world_collapse.uwp.world import WorldRecord

    raw = str(text).strip().upper()
    m = _PROFILE_RE.match(raw)
    if m is None or m.group("starport") not in STARPORT_SYMBOLS:
        raise InvalidSymbolError(f"malformed UWP profile: {text!r}")

    values = {"starport": m.group("starport")}
    for name, symbol in zip(PROFILE_FIELDS, m.group("body")):
        values[name] = decode(symbol, strict=strict)
    values["techlevel"] = decode(m.group("tl"), strict=strict)
    values.update(fields)

    return WorldRecord(**values)
