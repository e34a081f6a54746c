#!filepath: world_collapse/rules/tables.py
"""
Literal rule tables.

Hard Times: pp19-25.  Virus collapse: Traveller: The New Era pp190-191.
Kept as plain data so every value can be checked against the book.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from world_collapse.uwp.world import FrontierStatus, Starport

# =============================================================================
# Starport
# =============================================================================
STARPORT_ORDER: Tuple[Starport, ...] = (
    Starport.A,
    Starport.B,
    Starport.C,
    Starport.D,
    Starport.E,
    Starport.X,
)

# starport → result by degree (index = degree). Degree past the end → X.
STARPORT_REDUCTION: Dict[Starport, Tuple[Starport, ...]] = {
    Starport.A: (Starport.A, Starport.B, Starport.C, Starport.D, Starport.E),
    Starport.B: (Starport.B, Starport.C, Starport.D, Starport.E),
    Starport.C: (Starport.C, Starport.D, Starport.E),
    Starport.D: (Starport.D, Starport.E),
    Starport.E: (Starport.E,),
    Starport.X: (Starport.X,),
}

FACILITY_FIELDS: Tuple[str, ...] = ("naval_base", "scout_base", "way_station", "depot")

# =============================================================================
# Hard Times: Stage 1 Biosphere Shock
# =============================================================================
BIOSPHERE_NO_EFFECT_MAX = 5
BIOSPHERE_TAINT_RANGE = (6, 10)
BIOSPHERE_POP_LOSS_ROLLS = frozenset({9, 10})
BIOSPHERE_UNSPECIFIED_ROLLS = frozenset({11, 12})
BIOSPHERE_DIEBACK_MIN = 13

# atmosphere → tainted atmosphere
ATMOSPHERE_TAINT: Dict[int, int] = {
    3: 2,
    5: 4,
    6: 7,
    8: 9,
}

STAGE3_TL_DM = -3
DIEBACK_STARPORT = Starport.D
INSIDIOUS_ATMOSPHERE = 12

BIOSPHERE_STARPORT_A_DM = 1
BIOSPHERE_HIGH_POP = 9
BIOSPHERE_HIGH_POP_DM = 1


# =============================================================================
# Hard Times: Stage 2 Starport & Base Attrition
# =============================================================================
@dataclass(frozen=True)
class AttritionDMRow:
    """
    One starport class row of the attrition DM table.

    war_zone: DM indexed by war zone level 0-3
    population: ((pop_below, dm), ...) cumulative
    tech_base / tech_max: DM = tech_base - TL, capped at tech_max (may go negative)
    tech_below: tech DM only applies when TL < tech_below (None = always)
    """

    frontier: Dict[FrontierStatus, int]
    war_zone: Tuple[int, int, int, int]
    isolated: int
    population: Tuple[Tuple[int, int], ...]
    tech_base: int
    tech_max: int
    tech_below: Optional[int] = None


STARPORT_ATTRITION_DM: Dict[Starport, AttritionDMRow] = {
    Starport.A: AttritionDMRow(
        frontier={FrontierStatus.FRONTIER: 2, FrontierStatus.OUTLANDS: 3, FrontierStatus.WILDS: 3},
        war_zone=(0, 1, 2, 3),
        isolated=2,
        population=((5, 1), (3, 1)),
        tech_base=11,
        tech_max=8,
    ),
    Starport.B: AttritionDMRow(
        frontier={FrontierStatus.OUTLANDS: 2, FrontierStatus.WILDS: 3},
        war_zone=(0, 1, 2, 2),
        isolated=3,
        population=((5, 1), (3, 1)),
        tech_base=9,
        tech_max=7,
    ),
    Starport.C: AttritionDMRow(
        frontier={FrontierStatus.OUTLANDS: 1, FrontierStatus.WILDS: 2},
        war_zone=(0, 1, 1, 2),
        isolated=4,
        population=((3, 1),),
        tech_base=8,
        tech_max=5,
        tech_below=7,
    ),
    Starport.D: AttritionDMRow(
        frontier={FrontierStatus.WILDS: 1},
        war_zone=(0, 0, 0, 1),
        isolated=1,
        population=(),
        tech_base=7,
        tech_max=3,
        tech_below=7,
    ),
}

# bases eliminated outright when starport drops this many classes or more
BASE_WIPE_DEGREES = 2

NAVAL_BASE_ELIMINATION = 7
SCOUT_BASE_ELIMINATION = 8

BASE_ELIMINATION_FRONTIER_DM: Dict[FrontierStatus, int] = {
    FrontierStatus.SAFE: 0,
    FrontierStatus.FRONTIER: 3,
    FrontierStatus.OUTLANDS: 5,
    FrontierStatus.WILDS: 0,
}
BASE_ELIMINATION_WAR_DM: Tuple[int, int, int, int] = (0, 1, 2, 2)

# =============================================================================
# Virus: Step 1 Maximum Sustainable Population
# =============================================================================
MSP_BASE = 10
MSP_UNINHABITABLE_ATMOSPHERES = frozenset({0, 1, 2, 3, 10, 11, 12})

# (size_below, penalty) cumulative
MSP_SIZE_PENALTIES: Tuple[Tuple[int, int], ...] = ((8, 1), (5, 1))

MSP_ATMOSPHERE_PENALTIES: Dict[int, int] = {
    4: 2,
    5: 1,
    7: 1,
    9: 1,
    13: 3,
    14: 3,
    15: 3,
}

MSP_HYDROGRAPHICS_PENALTIES: Dict[int, int] = {
    0: 2,
    1: 3,
    2: 3,
    10: 3,
}

# =============================================================================
# Virus: Step 2 Tech level decline
# =============================================================================
# (tl_below, dice, modifier); tl_below None = everything else
TECH_DECLINE_BANDS: Tuple[Tuple[Optional[int], int, int], ...] = (
    (9, 1, -3),
    (11, 1, 0),
    (15, 2, 0),
    (None, 3, 0),
)

# =============================================================================
# Virus: Steps 3/4 population
# =============================================================================
EXPONENT_DECAY_DIVISOR = 4
EXPONENT_WRAP_BASE = 9
LOW_POPULATION = 6
LOW_POPULATION_EXPONENT_RESET = 5

# =============================================================================
# Virus: Step 5 facilities (removed when 1D10 < threshold)
# =============================================================================
FACILITY_LOSS_THRESHOLDS: Dict[str, int] = {
    "naval_base": 9,
    "scout_base": 8,
    "way_station": 10,
    "depot": 10,
}

# =============================================================================
# Virus: Step 6 government / law
# =============================================================================
BALKANIZED_GOVERNMENT = 7
# Technologically Elevated Dictator → Non-Charismatic Dictatorship
TED_GOVERNMENT = 11
TED_MIN_POPULATION = 5

# index = max(2D - 7 + population, 0)
GOVERNMENT_TABLE: Tuple[int, ...] = (
    0,   # 0  no formal structure / tribal
    0,   # 1
    2,   # 2  participating democracy
    4,   # 3  representative democracy
    10,  # 4  charismatic dictatorship
    12,  # 5  charismatic oligarchy
    11,  # 6  non-charismatic dictatorship
    13,  # 7  religious dictatorship
    15,  # 8  totalitarian oligarchy
    14,  # 9  religious autocracy
    8,   # 10 civil service bureaucracy
    3,   # 11 self-perpetuating oligarchy
    9,   # 12 impersonal bureaucracy
    9,   # 13
    9,   # 14
    9,   # 15
)
GOVERNMENT_TABLE_OVERFLOW = 11

LAW_RANGE = (0, 18)
