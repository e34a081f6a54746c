#!filepath: world_collapse/pipeline/context.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from world_collapse.uwp.world import WorldRecord


@dataclass
class CollapseContext:
    """
    CollapseContext = 单次 pipeline 运行的唯一上下文

    规则：
    - Pipeline 负责构造
    - Step 读取 world，写回新的 world（WorldRecord 本身不可变）
    - 跨 step 的中间值（msp / tldr / stage3_tl_dm）显式放在这里
    """

    world: WorldRecord

    # -------- Virus --------
    msp: Optional[int] = None
    tldr: int = 0  # tech level decline rolled in step 2

    # -------- Hard Times --------
    shock_roll: Optional[int] = None
    stage3_tl_dm: int = 0
    attrition_roll: Optional[int] = None
    attrition_degrees: int = 0

    # -------- PipelineRuntime flags --------
    abort_pipeline: bool = False
    abort_reason: Optional[str] = None

    def abort(self, reason: str) -> None:
        self.abort_pipeline = True
        self.abort_reason = reason
