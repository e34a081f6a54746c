#!filepath: world_collapse/engines/starport_attrition_engine.py
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from world_collapse import logs
from world_collapse.dice.base import Dice
from world_collapse.engines.base import BaseEngine
from world_collapse.rules.helpers import (
    clamp_war_zone,
    enforce_postconditions,
    reduce_starport,
    without_facilities,
)
from world_collapse.rules.tables import (
    BASE_ELIMINATION_FRONTIER_DM,
    BASE_ELIMINATION_WAR_DM,
    BASE_WIPE_DEGREES,
    NAVAL_BASE_ELIMINATION,
    SCOUT_BASE_ELIMINATION,
    STARPORT_ATTRITION_DM,
)
from world_collapse.uwp.world import FrontierStatus, WorldRecord
from world_collapse.utils.errors import UnspecifiedRuleError


# =============================================================================
# Degrees of Change strategy
# =============================================================================
class DegreesOfChangeTable(ABC):
    """
    attrition roll → number of starport classes lost.

    The book table is not part of the transcription, so the engine never
    ships one; callers inject it.
    """

    @abstractmethod
    def degrees(self, roll: int) -> int:
        ...


class ThresholdDegreesOfChange(DegreesOfChangeTable):
    """
    Table given as {min_roll: degrees}; the highest threshold <= roll wins,
    below every threshold → 0.
    """

    def __init__(self, thresholds: Mapping[int, int]):
        if not thresholds:
            raise ValueError("ThresholdDegreesOfChange needs at least one threshold")
        self._thresholds = sorted((int(k), int(v)) for k, v in thresholds.items())

    def degrees(self, roll: int) -> int:
        result = 0
        for threshold, degrees in self._thresholds:
            if roll >= threshold:
                result = degrees
        return result


# =============================================================================
# DM helpers
# =============================================================================
def starport_attrition_dm(world: WorldRecord) -> int:
    """DM on the 1D attrition roll; 0 for classes without a row (E, X)."""
    row = STARPORT_ATTRITION_DM.get(world.starport)
    if row is None:
        return 0

    dm = row.frontier.get(world.frontier_status, 0)
    dm += row.war_zone[clamp_war_zone(world.war_zone_level)]

    if world.is_isolated_world:
        dm += row.isolated

    for pop_below, bonus in row.population:
        if world.population < pop_below:
            dm += bonus

    if row.tech_below is None or world.techlevel < row.tech_below:
        # "11 - TL (max +8)": capped above only, high TL gives a negative DM
        dm += min(row.tech_base - world.techlevel, row.tech_max)

    return dm


def bases_always_lost(world: WorldRecord) -> bool:
    # Wilds + any war zone
    return (
        world.frontier_status == FrontierStatus.WILDS
        and clamp_war_zone(world.war_zone_level) > 0
    )


def base_elimination_dm(world: WorldRecord) -> int:
    return (
        BASE_ELIMINATION_FRONTIER_DM[world.frontier_status]
        + BASE_ELIMINATION_WAR_DM[clamp_war_zone(world.war_zone_level)]
    )


@dataclass(frozen=True, slots=True)
class StarportAttritionResult:
    world: WorldRecord
    # True when the 1D attrition roll was made
    applied: bool = False
    roll: Optional[int] = None
    dm: int = 0
    degrees: int = 0


# =============================================================================
# Engine
# =============================================================================
class StarportAttritionEngine(BaseEngine[StarportAttritionResult]):
    """
    Hard Times Stage 2: Starport & base attrition.

    1D + DM → Degrees of Change → starport loses that many classes.
    Two or more classes lost → every base gone; otherwise naval base lost
    on 2D+DM 7+, scout base on 2D+DM 8+.
    Classes E and X have no DM row: no attrition roll, base checks only.

    Without a DegreesOfChangeTable the stage cannot be evaluated:
      strict=False → passthrough (warning)
      strict=True  → UnspecifiedRuleError
    """

    def __init__(
        self,
        dice: Dice,
        degrees_table: Optional[DegreesOfChangeTable] = None,
        strict: bool = False,
    ):
        super().__init__(dice)
        self.degrees_table = degrees_table
        self.strict = strict

    def process(self, world: WorldRecord) -> StarportAttritionResult:
        world = replace(world, war_zone_level=clamp_war_zone(world.war_zone_level))

        if self.degrees_table is None:
            msg = "[StarportAttrition] Degrees of Change table not transcribed"
            if self.strict:
                raise UnspecifiedRuleError(msg)
            logs.warning(f"{msg} -> world passed through unchanged")
            return StarportAttritionResult(world=enforce_postconditions(world))

        if world.starport not in STARPORT_ATTRITION_DM:
            # no class row: port stays, bases still face elimination
            world = enforce_postconditions(self._base_attrition(world))
            logs.debug(
                f"[StarportAttrition] no DM row for class {world.starport.value} "
                f"-> port unchanged, bases checked"
            )
            return StarportAttritionResult(world=world)

        dm = starport_attrition_dm(world)
        roll = self.dice.d6() + dm
        degrees = self.degrees_table.degrees(roll)

        world = replace(world, starport=reduce_starport(world.starport, degrees))

        if degrees >= BASE_WIPE_DEGREES:
            world = without_facilities(world)
        else:
            world = self._base_attrition(world)

        world = enforce_postconditions(world)
        logs.debug(
            f"[StarportAttrition] roll={roll} (dm={dm}) degrees={degrees} -> {world.uwp}"
        )
        return StarportAttritionResult(
            world=world, applied=True, roll=roll, dm=dm, degrees=degrees
        )

    def _base_attrition(self, world: WorldRecord) -> WorldRecord:
        if bases_always_lost(world):
            return replace(world, naval_base=False, scout_base=False)

        dm = base_elimination_dm(world)
        naval_base, scout_base = world.naval_base, world.scout_base

        if naval_base and self.dice.throw() + dm >= NAVAL_BASE_ELIMINATION:
            naval_base = False
        if scout_base and self.dice.throw() + dm >= SCOUT_BASE_ELIMINATION:
            scout_base = False

        return replace(world, naval_base=naval_base, scout_base=scout_base)
