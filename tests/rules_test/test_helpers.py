#!filepath: tests/rules_test/test_helpers.py
import pytest

from world_collapse.rules.helpers import (
    clamp,
    clamp_war_zone,
    enforce_postconditions,
    reduce_starport,
    round_half_up,
    worse_starport,
)
from world_collapse.uwp.world import Starport, WorldRecord


@pytest.mark.parametrize(
    "port, degrees, expected",
    [
        ("A", 2, "C"),
        ("E", 1, "X"),
        ("D", 5, "X"),
        ("A", 1, "B"),
        ("A", 4, "E"),
        ("A", 5, "X"),
        ("B", 3, "E"),
        ("B", 4, "X"),
        ("C", 2, "E"),
        ("C", 3, "X"),
        ("D", 1, "E"),
        ("E", 3, "X"),
        ("X", 1, "X"),
        ("A", 0, "A"),
    ],
)
def test_reduce_starport(port, degrees, expected):
    assert reduce_starport(port, degrees) == Starport(expected)


def test_worse_starport():
    assert worse_starport("A", "D") == Starport.D
    assert worse_starport("D", "A") == Starport.D
    assert worse_starport("E", "D") == Starport.E
    assert worse_starport(Starport.X, Starport.D) == Starport.X


def test_clamp_war_zone():
    assert clamp_war_zone(-5) == 0
    assert clamp_war_zone(10) == 3
    assert clamp_war_zone(2) == 2


def test_clamp():
    assert clamp(-1, 0, 18) == 0
    assert clamp(20, 0, 18) == 18
    assert clamp(7, 0, 18) == 7


@pytest.mark.parametrize(
    "x, expected",
    [(0.25, 0), (0.5, 1), (1.5, 2), (2.5, 3), (3.5, 4), (4.5, 5), (0, 0)],
)
def test_round_half_up(x, expected):
    assert round_half_up(x) == expected


def test_postconditions_zero_population_wipes_institutions():
    world = WorldRecord(
        starport="B",
        population=-2,
        government=6,
        law=4,
        population_exponent=3,
        naval_base=True,
        scout_base=True,
        way_station=True,
        depot=True,
    )

    out = enforce_postconditions(world)

    assert out.population == 0
    assert out.population_exponent == 0
    assert out.government == 0
    assert out.law == 0
    assert not out.has_any_facility
    # starport 不属于 post-condition
    assert out.starport == Starport.B


def test_postconditions_clamp_negative_counters():
    world = WorldRecord(population=4, techlevel=-2, population_exponent=-1, law=-3)

    out = enforce_postconditions(world)

    assert out.techlevel == 0
    assert out.population_exponent == 0
    # law 不 clamp（Virus law 可以为负）
    assert out.law == -3


def test_postconditions_leave_populated_world_alone(terra):
    assert enforce_postconditions(terra) == terra
