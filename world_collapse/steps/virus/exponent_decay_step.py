#!filepath: world_collapse/steps/virus/exponent_decay_step.py
from __future__ import annotations

from dataclasses import replace

from world_collapse.engines.virus_engine import exponent_decline
from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.step import PipelineStep
from world_collapse.rules.tables import EXPONENT_WRAP_BASE


class ExponentDecayStep(PipelineStep):
    """
    Virus Step 3: tech decline eats into the population exponent.

    exponent -= round(tldr / 4); dropping below 1 borrows from population
    (population - 1, exponent wraps to 9 + exponent).
    """

    stage = "virus.exponent_decay"

    def apply(self, ctx: CollapseContext) -> CollapseContext:
        if ctx.tldr <= 0:
            return ctx

        world = ctx.world
        with self.inst.timer(self.stage):
            population = world.population
            exponent = world.population_exponent - exponent_decline(ctx.tldr)

            if exponent < 1:
                population -= 1
                if population < 1:
                    population, exponent = 0, 0
                else:
                    exponent = EXPONENT_WRAP_BASE + exponent

            ctx.world = replace(
                world, population=population, population_exponent=exponent
            )

        return ctx
