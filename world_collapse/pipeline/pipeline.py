#!filepath: world_collapse/pipeline/pipeline.py
from __future__ import annotations

from typing import List

from world_collapse import logs
from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.step import PipelineStep
from world_collapse.rules.helpers import enforce_postconditions
from world_collapse.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class CollapsePipeline:
    """
    CollapsePipeline = 调度器（Scheduler）

    - Pipeline 负责顺序 / 上下文 / 提前终止
    - Step 自己定义时间语义边界（via PipelineStep.timed）
    - 结束时统一执行 post-condition
    """

    def __init__(
            self,
            steps: List[PipelineStep],
            name: str = "collapse",
            inst: Instrumentation | None = None,
    ):
        self.steps = steps
        self.name = name
        self.inst = inst if inst is not None else NoOpInstrumentation()

    def run(self, ctx: CollapseContext) -> CollapseContext:
        # report covers this world only
        self.inst.reset()
        label = f"{self.name} {ctx.world.uwp}"
        logs.debug(f"[Pipeline:{self.name}] ====== START {ctx.world.uwp} ======")

        for step in self.steps:
            with step.timed():
                ctx = step.run(ctx)

            if ctx.abort_pipeline:
                logs.debug(
                    f"[Pipeline:{self.name}] aborted at {step.step_name}: {ctx.abort_reason}"
                )
                break

        ctx.world = enforce_postconditions(ctx.world)

        logs.debug(f"[Pipeline:{self.name}] ====== DONE {ctx.world.uwp} ======")
        self.inst.log_report(label)
        return ctx
