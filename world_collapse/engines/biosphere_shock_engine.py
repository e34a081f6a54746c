#!filepath: world_collapse/engines/biosphere_shock_engine.py
from __future__ import annotations

from dataclasses import dataclass, replace

from world_collapse import logs
from world_collapse.engines.base import BaseEngine
from world_collapse.rules.helpers import (
    clamp_war_zone,
    enforce_postconditions,
    worse_starport,
)
from world_collapse.rules.tables import (
    ATMOSPHERE_TAINT,
    BIOSPHERE_DIEBACK_MIN,
    BIOSPHERE_HIGH_POP,
    BIOSPHERE_HIGH_POP_DM,
    BIOSPHERE_NO_EFFECT_MAX,
    BIOSPHERE_POP_LOSS_ROLLS,
    BIOSPHERE_STARPORT_A_DM,
    BIOSPHERE_TAINT_RANGE,
    BIOSPHERE_UNSPECIFIED_ROLLS,
    DIEBACK_STARPORT,
    INSIDIOUS_ATMOSPHERE,
    STAGE3_TL_DM,
)
from world_collapse.uwp.world import Starport, WorldRecord


@dataclass(frozen=True, slots=True)
class BiosphereShockResult:
    world: WorldRecord
    roll: int
    # TL DM handed to Hard Times Stage 3; never applied here
    stage3_tl_dm: int = 0


class BiosphereShockEngine(BaseEngine[BiosphereShockResult]):
    """
    Hard Times Stage 1: Biosphere shock.

    Roll 2D + war zone level + 1 if starport A + 1 if population 9+:

        <= 5   no effect
        6-10   atmosphere tainted (3→2, 5→4, 6→7, 8→9)
        9-10   also population -1, Stage 3 TL DM -3
        11-12  unreadable in the transcription: no effect
        13+    dieback: pop/gov/law/exponent 0, starport D at best, atmosphere C
    """

    def shock_roll(self, world: WorldRecord) -> int:
        roll = self.dice.throw() + clamp_war_zone(world.war_zone_level)
        if world.starport == Starport.A:
            roll += BIOSPHERE_STARPORT_A_DM
        if world.population >= BIOSPHERE_HIGH_POP:
            roll += BIOSPHERE_HIGH_POP_DM
        return roll

    def process(self, world: WorldRecord) -> BiosphereShockResult:
        world = replace(world, war_zone_level=clamp_war_zone(world.war_zone_level))
        roll = self.shock_roll(world)
        stage3_tl_dm = 0

        if roll <= BIOSPHERE_NO_EFFECT_MAX:
            logs.debug(f"[BiosphereShock] roll={roll} no effect")
            return BiosphereShockResult(world=enforce_postconditions(world), roll=roll)

        lo, hi = BIOSPHERE_TAINT_RANGE
        if lo <= roll <= hi:
            world = replace(
                world,
                atmosphere=ATMOSPHERE_TAINT.get(world.atmosphere, world.atmosphere),
            )

        if roll in BIOSPHERE_POP_LOSS_ROLLS:
            world = replace(world, population=world.population - 1)
            stage3_tl_dm = STAGE3_TL_DM

        if roll in BIOSPHERE_UNSPECIFIED_ROLLS:
            logs.warning(
                f"[BiosphereShock] roll={roll}: effect not transcribed, world unchanged"
            )

        if roll >= BIOSPHERE_DIEBACK_MIN:
            world = replace(
                world,
                population=0,
                government=0,
                law=0,
                population_exponent=0,
                starport=worse_starport(world.starport, DIEBACK_STARPORT),
                atmosphere=INSIDIOUS_ATMOSPHERE,
            )

        world = enforce_postconditions(world)
        logs.debug(
            f"[BiosphereShock] roll={roll} -> {world.uwp} stage3_tl_dm={stage3_tl_dm}"
        )
        return BiosphereShockResult(world=world, roll=roll, stage3_tl_dm=stage3_tl_dm)
