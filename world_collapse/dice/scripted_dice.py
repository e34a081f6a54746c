#!filepath: world_collapse/dice/scripted_dice.py
from __future__ import annotations

from collections import deque
from typing import Iterable, List, Tuple

from world_collapse.dice.base import Dice, check_roll_args
from world_collapse.utils.errors import ScriptExhaustedError


class ScriptedDice(Dice):
    """
    按脚本返回掷骰结果（测试 / 回放用）。

    每次 roll(count, sides) 消耗一个脚本值，该值即为总和，
    必须落在 count..count*sides 之内。
    history 记录 (count, sides, result)。
    """

    def __init__(self, values: Iterable[int]):
        self._values = deque(values)
        self.history: List[Tuple[int, int, int]] = []

    @property
    def remaining(self) -> int:
        return len(self._values)

    def roll(self, count: int, sides: int) -> int:
        check_roll_args(count, sides)
        if not self._values:
            raise ScriptExhaustedError(
                f"no scripted value left for {count}d{sides} "
                f"(after {len(self.history)} rolls)"
            )

        value = self._values.popleft()
        if not count <= value <= count * sides:
            raise ValueError(
                f"scripted value {value} impossible for {count}d{sides}"
            )

        self.history.append((count, sides, value))
        return value
