#!filepath: world_collapse/steps/hard_times/starport_attrition_step.py
from __future__ import annotations

from world_collapse.engines.starport_attrition_engine import StarportAttritionEngine
from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.step import PipelineStep


class StarportAttritionStep(PipelineStep):
    """Hard Times Stage 2. Reads the world left by Stage 1."""

    stage = "hard_times.starport"

    def __init__(self, engine: StarportAttritionEngine, inst=None):
        super().__init__(engine=engine, inst=inst)

    def apply(self, ctx: CollapseContext) -> CollapseContext:
        with self.inst.timer(self.stage):
            result = self.engine.process(ctx.world)

        ctx.world = result.world
        ctx.attrition_roll = result.roll
        ctx.attrition_degrees = result.degrees
        if result.applied:
            self.inst.metrics.record(
                self.stage, roll=result.roll, dm=result.dm, degrees=result.degrees
            )
        return ctx
