#!filepath: world_collapse/steps/virus/government_step.py
from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.step import PipelineStep
from world_collapse.rules.helpers import clamp
from world_collapse.rules.tables import (
    BALKANIZED_GOVERNMENT,
    LAW_RANGE,
    TED_GOVERNMENT,
    TED_MIN_POPULATION,
)


class GovernmentStep(PipelineStep):
    """
    Virus Step 6: government / law re-roll

      2D <= population + size - techlevel   → 7 (balkanization)
      population 5+ and 1D10 < tldr         → 11 (TED, counted as non-charismatic dictator)
      otherwise                             → GOVERNMENT_TABLE[2D - 7 + population]

      law = 2D - 7 + government（默认不 clamp）
    """

    stage = "virus.government"

    def __init__(
            self,
            engine=None,
            inst=None,
            clamp_law: bool = False,
            law_range: Tuple[int, int] = LAW_RANGE,
    ):
        super().__init__(engine=engine, inst=inst)
        self.clamp_law = clamp_law
        self.law_range = law_range

    def apply(self, ctx: CollapseContext) -> CollapseContext:
        world = ctx.world

        with self.inst.timer(self.stage):
            if world.population < 1:
                ctx.world = replace(world, government=0, law=0)
                return ctx

            balkanization = world.population + world.size - world.techlevel

            if self.engine.balkanization_throw() <= balkanization:
                government = BALKANIZED_GOVERNMENT
            elif (
                world.population >= TED_MIN_POPULATION
                and self.engine.dictator_roll() < ctx.tldr
            ):
                government = TED_GOVERNMENT
            else:
                government = self.engine.new_government(world.population)

            law = self.engine.law_level(government)
            if self.clamp_law:
                law = clamp(law, *self.law_range)

            ctx.world = replace(world, government=government, law=law)
            self.inst.metrics.record(self.stage, government=government, law=law)

        return ctx
