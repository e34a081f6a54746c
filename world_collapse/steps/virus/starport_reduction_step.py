#!filepath: world_collapse/steps/virus/starport_reduction_step.py
from __future__ import annotations

from dataclasses import replace

from world_collapse import logs
from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.step import PipelineStep
from world_collapse.rules.helpers import reduce_starport, without_facilities
from world_collapse.rules.tables import FACILITY_LOSS_THRESHOLDS
from world_collapse.uwp.world import Starport, WorldRecord


class StarportReductionStep(PipelineStep):
    """
    Virus Step 5: starport / base reduction

    1D vs tldr:
      roll > tldr  → 降 1 级；未降到 X 时每个设施独立掷 1D10（< 阈值即失去）
      roll == tldr → 降 2 级，设施全部失去
      roll < tldr  → X，设施全部失去
    """

    stage = "virus.starport"

    def apply(self, ctx: CollapseContext) -> CollapseContext:
        world = ctx.world

        with self.inst.timer(self.stage):
            if world.population < 1:
                ctx.world = replace(without_facilities(world), starport=Starport.X)
                return ctx

            roll = self.engine.starport_roll()

            if roll > ctx.tldr:
                world = replace(world, starport=reduce_starport(world.starport, 1))
                if world.starport == Starport.X:
                    world = without_facilities(world)
                else:
                    world = self._facility_checks(world)
            elif roll == ctx.tldr:
                world = replace(
                    without_facilities(world),
                    starport=reduce_starport(world.starport, 2),
                )
            else:
                world = replace(without_facilities(world), starport=Starport.X)

            logs.debug(
                f"[{self.step_name}] roll={roll} tldr={ctx.tldr} -> starport {world.starport.value}"
            )
            ctx.world = world
            self.inst.metrics.record(self.stage, roll=roll, starport=world.starport.value)

        return ctx

    def _facility_checks(self, world: WorldRecord) -> WorldRecord:
        # one 1D10 per facility, always rolled in table order
        lost = {}
        for name, threshold in FACILITY_LOSS_THRESHOLDS.items():
            if self.engine.facility_roll() < threshold:
                lost[name] = False
        return replace(world, **lost)
