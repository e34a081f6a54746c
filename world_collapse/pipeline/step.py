#!filepath: world_collapse/pipeline/step.py
from __future__ import annotations

from world_collapse.pipeline.context import CollapseContext
from world_collapse.rules.helpers import enforce_postconditions
from world_collapse.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline Step 基类

    职责：
      1. 调用 engine 的规则计算，把结果写回 ctx
      2. 提供 Step 级时间语义边界（parent scope）

    规则：
      - Step 不持有跨调用状态
      - 子类实现 apply；run 在每个 step 之后执行 post-condition
      - Instrumentation 是可选横切关注点，Step 行为不依赖 inst 是否存在
    """

    stage: str = ''  # e.g. "virus.tech_decline"

    def __init__(self, engine=None, inst: Instrumentation | None = None):
        self.engine = engine
        # 永远保证 inst 可用（No-op 语义）
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    @property
    def step_name(self) -> str:
        """默认使用类名作为 Step 名称。"""
        return self.__class__.__name__

    def timed(self):
        """
        Step 级 parent scope（record=False，不进入 timeline）
        """
        return self.inst.timer(self.step_name, record=False)

    def run(self, ctx: CollapseContext) -> CollapseContext:
        """apply + post-conditions; a step run on its own is still safe."""
        ctx = self.apply(ctx)
        ctx.world = enforce_postconditions(ctx.world)
        return ctx

    def apply(self, ctx: CollapseContext) -> CollapseContext:
        raise NotImplementedError(f"{self.step_name}.apply")
