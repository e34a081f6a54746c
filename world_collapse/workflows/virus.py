#!filepath: world_collapse/workflows/virus.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from world_collapse import logs
from world_collapse.config.rules_config import VirusConfig
from world_collapse.dice.base import Dice
from world_collapse.engines.virus_engine import VirusEngine
from world_collapse.observability.instrumentation import Instrumentation
from world_collapse.pipeline.context import CollapseContext
from world_collapse.pipeline.pipeline import CollapsePipeline
from world_collapse.steps.virus.exponent_decay_step import ExponentDecayStep
from world_collapse.steps.virus.government_step import GovernmentStep
from world_collapse.steps.virus.population_band_step import PopulationBandStep
from world_collapse.steps.virus.starport_reduction_step import StarportReductionStep
from world_collapse.steps.virus.sustainable_population_step import SustainablePopulationStep
from world_collapse.steps.virus.tech_decline_step import TechDeclineStep
from world_collapse.uwp.world import WorldRecord


@dataclass(frozen=True, slots=True)
class VirusResult:
    world: WorldRecord
    msp: int
    tldr: int
    # True when MSP <= 0 ended the pipeline at step 1
    collapsed: bool


def build_virus_pipeline(
        dice: Dice,
        cfg: Optional[VirusConfig] = None,
        inst: Optional[Instrumentation] = None,
) -> CollapsePipeline:
    """
    Virus collapse pipeline

    Semantic Order:
        SustainablePopulation   (MSP clamp / full collapse)
        → TechDecline           (tldr)
        → ExponentDecay         (tldr → population exponent)
        → PopulationBand        (population < 6)
        → StarportReduction     (1D vs tldr, facilities)
        → Government            (government + law)
    """
    cfg = cfg or VirusConfig()
    engine = VirusEngine(dice)

    return CollapsePipeline(
        steps=[
            SustainablePopulationStep(engine=engine, inst=inst),
            TechDeclineStep(engine=engine, inst=inst),
            ExponentDecayStep(engine=engine, inst=inst),
            PopulationBandStep(engine=engine, inst=inst),
            StarportReductionStep(engine=engine, inst=inst),
            GovernmentStep(
                engine=engine,
                inst=inst,
                clamp_law=cfg.clamp_law,
                law_range=(cfg.law_min, cfg.law_max),
            ),
        ],
        name="virus",
        inst=inst,
    )


@logs.catch("virus collapse failed", log_time=False)
def run_virus(
        world: WorldRecord,
        dice: Dice,
        cfg: Optional[VirusConfig] = None,
        inst: Optional[Instrumentation] = None,
) -> VirusResult:
    """One Virus collapse pass over a single world."""
    pipeline = build_virus_pipeline(dice, cfg=cfg, inst=inst)
    ctx = pipeline.run(CollapseContext(world=world))

    return VirusResult(
        world=ctx.world,
        msp=ctx.msp,
        tldr=ctx.tldr,
        collapsed=ctx.abort_pipeline,
    )
