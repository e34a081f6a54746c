#!filepath: world_collapse/workflows/hard_times.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from world_collapse import logs
from world_collapse.config.rules_config import HardTimesConfig
from world_collapse.dice.base import Dice
from world_collapse.engines.biosphere_shock_engine import BiosphereShockEngine
from world_collapse.engines.starport_attrition_engine import (
    DegreesOfChangeTable,
    StarportAttritionEngine,
    ThresholdDegreesOfChange,
)
from world_collapse.observability.instrumentation import Instrumentation
from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.pipeline import CollapsePipeline
from world_collapse.steps.hard_times.biosphere_shock_step import BiosphereShockStep
from world_collapse.steps.hard_times.starport_attrition_step import StarportAttritionStep
from world_collapse.uwp.world import WorldRecord


@dataclass(frozen=True, slots=True)
class HardTimesResult:
    world: WorldRecord
    shock_roll: int
    # forwarded to Stage 3 (tech level); caller applies it
    stage3_tl_dm: int
    attrition_roll: Optional[int]
    attrition_degrees: int


def degrees_table_from_config(cfg: HardTimesConfig) -> Optional[DegreesOfChangeTable]:
    if not cfg.degrees_of_change:
        return None
    return ThresholdDegreesOfChange(cfg.degrees_of_change)


def build_hard_times_pipeline(
        dice: Dice,
        cfg: Optional[HardTimesConfig] = None,
        degrees_table: Optional[DegreesOfChangeTable] = None,
        inst: Optional[Instrumentation] = None,
) -> CollapsePipeline:
    """
    Hard Times pipeline

    Semantic Order:
        BiosphereShock      (Stage 1, emits stage3_tl_dm)
        → StarportAttrition (Stage 2, needs a Degrees of Change table)

    degrees_table 参数优先于 cfg.degrees_of_change。
    """
    cfg = cfg or HardTimesConfig()
    if degrees_table is None:
        degrees_table = degrees_table_from_config(cfg)

    return CollapsePipeline(
        steps=[
            BiosphereShockStep(engine=BiosphereShockEngine(dice), inst=inst),
            StarportAttritionStep(
                engine=StarportAttritionEngine(
                    dice,
                    degrees_table=degrees_table,
                    strict=cfg.strict_unspecified,
                ),
                inst=inst,
            ),
        ],
        name="hard_times",
        inst=inst,
    )


@logs.catch("hard times failed", log_time=False)
def run_hard_times(
        world: WorldRecord,
        dice: Dice,
        cfg: Optional[HardTimesConfig] = None,
        degrees_table: Optional[DegreesOfChangeTable] = None,
        inst: Optional[Instrumentation] = None,
) -> HardTimesResult:
    """Hard Times Stage 1 → Stage 2 over a single world."""
    pipeline = build_hard_times_pipeline(
        dice, cfg=cfg, degrees_table=degrees_table, inst=inst
    )
    ctx = pipeline.run(CollapseContext(world=world))

    return HardTimesResult(
        world=ctx.world,
        shock_roll=ctx.shock_roll,
        stage3_tl_dm=ctx.stage3_tl_dm,
        attrition_roll=ctx.attrition_roll,
        attrition_degrees=ctx.attrition_degrees,
    )
