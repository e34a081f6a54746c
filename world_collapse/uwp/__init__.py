from .codec import encode, decode, format_profile, parse_profile
from .world import WorldRecord, Starport, FrontierStatus, WarZoneLevel

__all__ = [
    "encode", "decode", "format_profile", "parse_profile",
    "WorldRecord", "Starport", "FrontierStatus", "WarZoneLevel",
]
