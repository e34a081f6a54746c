#!filepath: tests/workflows_test/test_virus_workflow.py
from __future__ import annotations

import random

import pytest

from world_collapse import RandomDice, ScriptedDice, WorldRecord, run_virus
from world_collapse.config.rules_config import VirusConfig
from world_collapse.observability.instrumentation import Instrumentation
from world_collapse.rules.tables import FACILITY_FIELDS
from world_collapse.uwp.world import Starport
from world_collapse.workflows.virus import build_virus_pipeline


def test_virus_full_pass_on_garden_world():
    world = WorldRecord(
        starport="A", size=7, atmosphere=5, hydrographics=5, population=9,
        government=9, law=9, techlevel=14, population_exponent=5,
        naval_base=True, scout_base=True, way_station=True, depot=True,
    )
    # d9 exponent, 2D decline, 1D starport, 2D balkanization, 1D10 dictator, 2D law
    dice = ScriptedDice([4, 6, 5, 10, 2, 7])

    result = run_virus(world, dice)

    assert dice.remaining == 0
    assert result.msp == 8
    assert result.tldr == 6
    assert result.collapsed is False
    assert result.world.uwp == "X7558BB-8"
    assert result.world.population_exponent == 2
    assert not result.world.has_any_facility


def test_virus_mild_pass_keeps_bases():
    world = WorldRecord(
        starport="B", size=8, atmosphere=6, hydrographics=7, population=7,
        government=4, law=6, techlevel=10, population_exponent=3,
        naval_base=True, scout_base=True,
    )
    dice = ScriptedDice([1, 4, 10, 9, 1, 1, 3, 5])

    result = run_virus(world, dice)
    w = result.world

    assert dice.remaining == 0
    assert result.tldr == 1
    assert w.uwp == "C867775-9"
    assert w.population_exponent == 3
    assert w.naval_base and w.scout_base
    assert not w.way_station and not w.depot


@pytest.mark.parametrize("clamp_law, expected_law", [(False, -5), (True, 0)])
def test_virus_small_world_law(clamp_law, expected_law):
    world = WorldRecord(
        starport="C", size=2, atmosphere=6, hydrographics=5, population=3,
        government=2, law=2, techlevel=9, population_exponent=4,
    )
    dice = ScriptedDice([6, 6, 4, 2, 2])

    result = run_virus(world, dice, cfg=VirusConfig(clamp_law=clamp_law))
    w = result.world

    assert w.starport == Starport.E
    assert (w.population, w.population_exponent, w.techlevel) == (3, 1, 2)
    assert w.government == 0
    assert w.law == expected_law


def test_virus_uninhabitable_world_collapses_without_dice():
    world = WorldRecord(
        starport="B", size=5, atmosphere=11, hydrographics=2, population=4,
        government=3, law=5, techlevel=13, population_exponent=6, depot=True,
    )

    result = run_virus(world, ScriptedDice([]))

    assert result.collapsed is True
    assert result.msp == 0
    assert result.tldr == 0
    assert result.world.uwp == "X5B2000-D"
    assert not result.world.depot


def test_virus_records_step_timeline_and_metrics():
    inst = Instrumentation(enabled=True)
    world = WorldRecord(starport="C", size=2, atmosphere=6, hydrographics=5,
                        population=3, techlevel=9, population_exponent=4)

    run_virus(world, ScriptedDice([6, 6, 4, 2, 2]), inst=inst)

    assert list(inst.timeline) == [
        "virus.msp",
        "virus.tech_decline",
        "virus.exponent_decay",
        "virus.population_band",
        "virus.starport",
        "virus.government",
    ]
    assert inst.metrics.metrics["virus.msp"] == {"msp": 8}
    assert inst.metrics.metrics["virus.tech_decline"] == {"tldr": 6, "techlevel": 3}
    assert inst.metrics.metrics["virus.starport"] == {"roll": 6, "starport": "E"}
    assert inst.metrics.metrics["virus.government"] == {"government": 0, "law": -5}


def test_virus_instrumentation_is_reset_per_world():
    inst = Instrumentation(enabled=True)
    garden = WorldRecord(starport="C", size=2, atmosphere=6, hydrographics=5,
                         population=3, techlevel=9, population_exponent=4)
    vacuum = WorldRecord(starport="C", size=2, atmosphere=0, population=3)

    run_virus(garden, ScriptedDice([6, 6, 4, 2, 2]), inst=inst)
    run_virus(vacuum, ScriptedDice([]), inst=inst)

    assert list(inst.timeline) == ["virus.msp"]
    assert inst.metrics.metrics == {"virus.msp": {"msp": 0}}


def test_virus_pipeline_step_order():
    pipeline = build_virus_pipeline(ScriptedDice([]))

    assert [s.step_name for s in pipeline.steps] == [
        "SustainablePopulationStep",
        "TechDeclineStep",
        "ExponentDecayStep",
        "PopulationBandStep",
        "StarportReductionStep",
        "GovernmentStep",
    ]


def _random_world(rng: random.Random) -> WorldRecord:
    return WorldRecord(
        starport=rng.choice("ABCDEX"),
        size=rng.randint(0, 10),
        atmosphere=rng.randint(0, 15),
        hydrographics=rng.randint(0, 10),
        population=rng.randint(0, 12),
        government=rng.randint(0, 15),
        law=rng.randint(0, 18),
        techlevel=rng.randint(0, 20),
        population_exponent=rng.randint(1, 9),
        naval_base=rng.random() < 0.5,
        scout_base=rng.random() < 0.5,
        way_station=rng.random() < 0.5,
        depot=rng.random() < 0.5,
    )


@pytest.mark.parametrize("seed", range(200))
def test_virus_postconditions_hold_for_random_worlds(seed):
    before = _random_world(random.Random(seed))

    after = run_virus(before, RandomDice(seed)).world

    assert after.population >= 0
    assert 0 <= after.population_exponent <= 9
    assert after.techlevel >= 0
    assert after.starport.rank >= before.starport.rank
    for name in FACILITY_FIELDS:
        assert not (getattr(after, name) and not getattr(before, name))
    if after.population == 0:
        assert after.population_exponent == 0
        assert (after.government, after.law) == (0, 0)
        assert not after.has_any_facility
