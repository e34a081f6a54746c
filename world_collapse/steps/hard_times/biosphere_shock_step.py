#!filepath: world_collapse/steps/hard_times/biosphere_shock_step.py
from __future__ import annotations

from world_collapse.engines.biosphere_shock_engine import BiosphereShockEngine
from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.step import PipelineStep


class BiosphereShockStep(PipelineStep):
    """Hard Times Stage 1. Publishes stage3_tl_dm on the context."""

    stage = "hard_times.biosphere"

    def __init__(self, engine: BiosphereShockEngine, inst=None):
        super().__init__(engine=engine, inst=inst)

    def apply(self, ctx: CollapseContext) -> CollapseContext:
        with self.inst.timer(self.stage):
            result = self.engine.process(ctx.world)

        ctx.world = result.world
        ctx.shock_roll = result.roll
        ctx.stage3_tl_dm = result.stage3_tl_dm
        self.inst.metrics.record(
            self.stage, roll=result.roll, stage3_tl_dm=result.stage3_tl_dm
        )
        return ctx
