#!filepath: world_collapse/steps/virus/tech_decline_step.py
from __future__ import annotations

from dataclasses import replace

from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.step import PipelineStep


class TechDeclineStep(PipelineStep):
    """Virus Step 2: roll tech level decline (tldr) by TL band."""

    stage = "virus.tech_decline"

    def apply(self, ctx: CollapseContext) -> CollapseContext:
        world = ctx.world

        with self.inst.timer(self.stage):
            tldr = self.engine.tech_level_decline(world.techlevel)
            ctx.tldr = tldr
            ctx.world = replace(world, techlevel=max(world.techlevel - tldr, 0))
            self.inst.metrics.record(self.stage, tldr=tldr, techlevel=ctx.world.techlevel)

        return ctx
