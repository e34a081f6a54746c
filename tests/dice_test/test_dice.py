#!filepath: tests/dice_test/test_dice.py
import pytest

from world_collapse.dice import RandomDice, ScriptedDice
from world_collapse.utils.errors import ScriptExhaustedError


def test_random_dice_same_seed_same_sequence():
    a = RandomDice(seed=1234)
    b = RandomDice(seed=1234)

    assert [a.roll(2, 6) for _ in range(20)] == [b.roll(2, 6) for _ in range(20)]


def test_random_dice_bounds():
    dice = RandomDice(seed=7)
    for _ in range(300):
        assert 3 <= dice.roll(3, 6) <= 18
        assert 1 <= dice.roll(1, 9) <= 9
        assert 2 <= dice.throw() <= 12
        assert -5 <= dice.flux() <= 5
        assert dice.d66() // 10 in range(1, 7)
        assert dice.d66() % 10 in range(1, 7)


def test_random_dice_zero_count():
    assert RandomDice(seed=1).roll(0, 6) == 0


@pytest.mark.parametrize("count, sides", [(-1, 6), (1, 0)])
def test_invalid_roll_arguments(count, sides):
    with pytest.raises(ValueError):
        RandomDice().roll(count, sides)


def test_scripted_dice_returns_script_in_order():
    dice = ScriptedDice([3, 11, 1])

    assert dice.roll(1, 6) == 3
    assert dice.throw() == 11
    assert dice.roll(1, 10) == 1
    assert dice.history == [(1, 6, 3), (2, 6, 11), (1, 10, 1)]
    assert dice.remaining == 0


def test_scripted_dice_exhausted():
    dice = ScriptedDice([])
    with pytest.raises(ScriptExhaustedError):
        dice.roll(1, 6)


def test_scripted_dice_rejects_impossible_value():
    with pytest.raises(ValueError):
        ScriptedDice([13]).throw()
    with pytest.raises(ValueError):
        ScriptedDice([0]).roll(1, 6)


def test_flux_and_d66_use_single_dice():
    assert ScriptedDice([6, 1]).flux() == 5
    assert ScriptedDice([1, 6]).flux() == -5
    assert ScriptedDice([5, 2]).d66() == 52
