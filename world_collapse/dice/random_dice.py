#!filepath: world_collapse/dice/random_dice.py
import random
from typing import Optional

from world_collapse.dice.base import Dice, check_roll_args


class RandomDice(Dice):
    """
    基于独立 random.Random 实例的骰子。
    seed 相同 → 掷骰序列相同。
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.random = random.Random(seed)

    def roll(self, count: int, sides: int) -> int:
        check_roll_args(count, sides)
        return sum(self.random.randint(1, sides) for _ in range(count))
