#!filepath: world_collapse/uwp/world.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from world_collapse.uwp.codec import format_profile


class Starport(str, Enum):
    """Starport class, best → worst."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    X = "X"

    @property
    def rank(self) -> int:
        # 0 = A (best) ... 5 = X (none)
        return _STARPORT_RANK[self]


_STARPORT_RANK = {port: i for i, port in enumerate(Starport)}


class FrontierStatus(str, Enum):
    SAFE = "Safe"
    FRONTIER = "Frontier"
    OUTLANDS = "Outlands"
    WILDS = "Wilds"


class WarZoneLevel(IntEnum):
    NONE = 0
    WAR = 1
    INTENSE = 2
    BLACK = 3


@dataclass(frozen=True, slots=True)
class WorldRecord:
    """
    World Record（单个 mainworld 的 UWP + 上下文）

    - frozen：所有 stage 返回新实例（dataclasses.replace）
    - 数值字段使用整数，不使用 pseudohex
    - war_zone_level 在消费它的 stage 入口 clamp 到 0-3
    """

    starport: Starport = Starport.X
    size: int = 0
    atmosphere: int = 0
    hydrographics: int = 0
    population: int = 0
    government: int = 0
    law: int = 0
    techlevel: int = 0
    population_exponent: int = 0

    war_zone_level: int = 0

    naval_base: bool = False
    scout_base: bool = False
    way_station: bool = False
    depot: bool = False

    frontier_status: FrontierStatus = FrontierStatus.SAFE
    is_isolated_world: bool = False

    def __post_init__(self):
        # 允许直接传 "A" / "Wilds"
        object.__setattr__(self, "starport", Starport(self.starport))
        object.__setattr__(self, "frontier_status", FrontierStatus(self.frontier_status))

    @property
    def uwp(self) -> str:
        return format_profile(
            self.starport,
            self.size,
            self.atmosphere,
            self.hydrographics,
            self.population,
            self.government,
            self.law,
            self.techlevel,
        )

    @property
    def has_any_facility(self) -> bool:
        return self.naval_base or self.scout_base or self.way_station or self.depot

    def __str__(self) -> str:
        return self.uwp
