#!filepath: world_collapse/rules/helpers.py
from __future__ import annotations

import math
from dataclasses import replace

from world_collapse.rules.tables import FACILITY_FIELDS, STARPORT_REDUCTION
from world_collapse.uwp.world import Starport, WorldRecord


def clamp(x: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, x))


def clamp_war_zone(level: int) -> int:
    return clamp(int(level), 0, 3)


def round_half_up(x: float) -> int:
    # 0.5 → 1, 1.5 → 2 (not banker's rounding)
    return math.floor(x + 0.5)


def reduce_starport(starport, degrees: int) -> Starport:
    """
    Reduce starport by `degrees` classes: A→B→C→D→E→X.
    Anything past E is X; E reduced by any degree is X.
    """
    starport = Starport(starport)
    if degrees <= 0:
        return starport

    steps = STARPORT_REDUCTION[starport]
    if degrees >= len(steps):
        return Starport.X
    return steps[degrees]


def worse_starport(a, b) -> Starport:
    """The lower quality of two starports."""
    a, b = Starport(a), Starport(b)
    return a if a.rank >= b.rank else b


def without_facilities(world: WorldRecord) -> WorldRecord:
    return replace(world, **{name: False for name in FACILITY_FIELDS})


def enforce_postconditions(world: WorldRecord) -> WorldRecord:
    """
    Applied at the end of every stage:
      - population, population_exponent, techlevel >= 0
      - population 0 → exponent 0, government 0, law 0, no facilities
    """
    world = replace(
        world,
        population=max(world.population, 0),
        population_exponent=max(world.population_exponent, 0),
        techlevel=max(world.techlevel, 0),
    )

    if world.population == 0:
        world = replace(
            without_facilities(world),
            population_exponent=0,
            government=0,
            law=0,
        )

    return world
