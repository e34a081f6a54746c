#!filepath: world_collapse/steps/virus/sustainable_population_step.py
from __future__ import annotations

from dataclasses import replace

from world_collapse import logs
from world_collapse.engines.virus_engine import calculate_msp
from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.step import PipelineStep
from world_collapse.rules.helpers import without_facilities
from world_collapse.uwp.world import Starport


class SustainablePopulationStep(PipelineStep):
    """
    Virus Step 1: Maximum Sustainable Population

      MSP <= 0          → 完全崩溃（X 港、无人口、无设施），pipeline 终止
      MSP < population  → population = MSP，exponent 重掷 1D9

    size / atmosphere / hydrographics / techlevel 在崩溃时保持不变。
    """

    stage = "virus.msp"

    def apply(self, ctx: CollapseContext) -> CollapseContext:
        world = ctx.world

        with self.inst.timer(self.stage):
            msp = calculate_msp(world.size, world.atmosphere, world.hydrographics)
            ctx.msp = msp
            self.inst.metrics.record(self.stage, msp=msp)

            if msp <= 0:
                ctx.world = replace(
                    without_facilities(world),
                    starport=Starport.X,
                    population=0,
                    government=0,
                    law=0,
                    population_exponent=0,
                )
                ctx.abort(f"MSP={msp}, world cannot sustain population")
                return ctx

            if msp < world.population:
                logs.debug(f"[{self.step_name}] population {world.population} -> MSP {msp}")
                ctx.world = replace(
                    world,
                    population=msp,
                    population_exponent=self.engine.reroll_exponent(),
                )

        return ctx
