#!filepath: world_collapse/__init__.py

from .utils.logger import Logging, logs
from .config.app_config import AppConfig
from .utils.errors import (
    WorldCollapseError,
    CodecError,
    OutOfRangeError,
    InvalidSymbolError,
    UnspecifiedRuleError,
)
from .uwp import (
    encode,
    decode,
    format_profile,
    parse_profile,
    WorldRecord,
    Starport,
    FrontierStatus,
    WarZoneLevel,
)
from .dice import Dice, RandomDice, ScriptedDice
from .workflows.virus import run_virus, VirusResult
from .workflows.hard_times import run_hard_times, HardTimesResult

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging",
    "AppConfig",
    "WorldCollapseError", "CodecError", "OutOfRangeError",
    "InvalidSymbolError", "UnspecifiedRuleError",
    "encode", "decode", "format_profile", "parse_profile",
    "WorldRecord", "Starport", "FrontierStatus", "WarZoneLevel",
    "Dice", "RandomDice", "ScriptedDice",
    "run_virus", "VirusResult",
    "run_hard_times", "HardTimesResult",
]
