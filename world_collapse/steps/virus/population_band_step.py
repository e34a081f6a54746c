#!filepath: world_collapse/steps/virus/population_band_step.py
from __future__ import annotations

from dataclasses import replace

from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.step import PipelineStep
from world_collapse.rules.helpers import round_half_up
from world_collapse.rules.tables import LOW_POPULATION, LOW_POPULATION_EXPONENT_RESET


class PopulationBandStep(PipelineStep):
    """
    Virus Step 4: 低人口世界（population < 6）

      - techlevel - 1
      - exponent == 1 → population - 1，exponent 重置为 5（人口归零则两者为 0）
      - 否则 exponent 减半（四舍五入）
    """

    stage = "virus.population_band"

    def apply(self, ctx: CollapseContext) -> CollapseContext:
        world = ctx.world
        if world.population >= LOW_POPULATION:
            return ctx

        with self.inst.timer(self.stage):
            techlevel = max(world.techlevel - 1, 0)
            population = world.population
            exponent = world.population_exponent

            if exponent == 1:
                population -= 1
                if population < 1:
                    population, exponent = 0, 0
                else:
                    exponent = LOW_POPULATION_EXPONENT_RESET
            else:
                exponent = round_half_up(exponent / 2)

            ctx.world = replace(
                world,
                techlevel=techlevel,
                population=population,
                population_exponent=exponent,
            )

        return ctx
