#!filepath: tests/engines_test/test_biosphere_shock_engine.py
from world_collapse.dice import ScriptedDice
from world_collapse.engines.biosphere_shock_engine import BiosphereShockEngine
from world_collapse.uwp.world import Starport, WorldRecord


def _world(**kw) -> WorldRecord:
    base = dict(
        starport="B",
        size=6,
        atmosphere=5,
        hydrographics=5,
        population=5,
        government=4,
        law=5,
        techlevel=10,
        population_exponent=3,
    )
    base.update(kw)
    return WorldRecord(**base)


def _shock(world: WorldRecord, throw: int):
    dice = ScriptedDice([throw])
    result = BiosphereShockEngine(dice).process(world)
    assert dice.history == [(2, 6, throw)]
    return result


def test_low_roll_no_effect():
    world = _world()
    result = _shock(world, 5)

    assert result.roll == 5
    assert result.world == world
    assert result.stage3_tl_dm == 0


def test_roll_6_to_8_taints_atmosphere():
    result = _shock(_world(atmosphere=6), 7)

    assert result.world.atmosphere == 7
    assert result.world.population == 5
    assert result.stage3_tl_dm == 0


def test_taint_leaves_other_atmospheres():
    assert _shock(_world(atmosphere=7), 8).world.atmosphere == 7


def test_roll_9_taints_and_loses_population():
    result = _shock(_world(atmosphere=5), 9)

    assert result.roll == 9
    assert result.world.atmosphere == 4
    assert result.world.population == 4
    assert result.stage3_tl_dm == -3
    # stage3 TL DM is handed forward, never applied
    assert result.world.techlevel == 10


def test_roll_10_from_dms():
    world = _world(starport="A", population=9, war_zone_level=1, atmosphere=8)
    result = _shock(world, 7)  # 7 + 1 war + 1 A + 1 pop 9+

    assert result.roll == 10
    assert result.world.atmosphere == 9
    assert result.world.population == 8
    assert result.stage3_tl_dm == -3


def test_roll_11_is_unspecified_no_op(captured_logs):
    world = _world(atmosphere=5)
    result = _shock(world, 11)

    assert result.world == world
    assert result.stage3_tl_dm == 0
    assert any("not transcribed" in line for line in captured_logs)


def test_dieback():
    world = _world(
        starport="A",
        population=9,
        war_zone_level=3,
        naval_base=True,
        scout_base=True,
    )
    result = _shock(world, 12)  # 12 + 3 + 1 + 1

    assert result.roll == 17
    w = result.world
    assert (w.population, w.government, w.law, w.population_exponent) == (0, 0, 0, 0)
    assert w.atmosphere == 12
    assert w.starport == Starport.D
    assert not w.has_any_facility
    assert result.stage3_tl_dm == 0


def test_dieback_never_improves_starport():
    for port in ("E", "X"):
        result = _shock(_world(starport=port, war_zone_level=3), 12)
        assert result.world.starport == Starport(port)


def test_war_zone_clamped_high():
    result = _shock(_world(war_zone_level=10), 2)

    assert result.roll == 5
    assert result.world.war_zone_level == 3


def test_war_zone_clamped_low():
    result = _shock(_world(war_zone_level=-5, atmosphere=3), 6)

    assert result.roll == 6
    assert result.world.war_zone_level == 0
    assert result.world.atmosphere == 2


def test_population_loss_to_zero_wipes_institutions():
    world = _world(starport="C", population=1, naval_base=True, way_station=True)
    result = _shock(world, 9)

    w = result.world
    assert w.population == 0
    assert w.population_exponent == 0
    assert (w.government, w.law) == (0, 0)
    assert not w.has_any_facility

