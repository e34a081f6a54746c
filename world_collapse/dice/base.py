#!filepath: world_collapse/dice/base.py
from __future__ import annotations

from abc import ABC, abstractmethod


class Dice(ABC):
    """
    Dice capability（规则引擎唯一随机来源）

    - 引擎只依赖 roll(count, sides)
    - throw / flux / d66 是组合派生
    - 实现必须每个调用方一个实例（seeded RNG 内部状态随调用推进）
    """

    @abstractmethod
    def roll(self, count: int, sides: int) -> int:
        """sum of `count` independent uniform rolls over 1..sides"""
        raise NotImplementedError

    def d6(self, count: int = 1) -> int:
        return self.roll(count, 6)

    def throw(self) -> int:
        """2D"""
        return self.roll(2, 6)

    def flux(self) -> int:
        """1D - 1D, range -5..5 (same distribution as 2D-7)"""
        return self.roll(1, 6) - self.roll(1, 6)

    def d66(self) -> int:
        """tens die * 10 + ones die, e.g. 5 and 2 → 52"""
        return self.roll(1, 6) * 10 + self.roll(1, 6)


def check_roll_args(count: int, sides: int) -> None:
    if count < 0:
        raise ValueError(f"dice count must be >= 0, got {count}")
    if sides < 1:
        raise ValueError(f"dice sides must be >= 1, got {sides}")
