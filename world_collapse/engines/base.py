#!filepath: world_collapse/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from world_collapse.dice.base import Dice
from world_collapse.uwp.world import WorldRecord

StageResult = TypeVar("StageResult")


class BaseEngine(ABC, Generic[StageResult]):
    """
    Hard Times stage engine（Rule Engine Layer）

    - 一个 WorldRecord 进，一个 stage 结果出（结果内含新的 WorldRecord）
    - 随机性只来自注入的 Dice
    - 不做 I/O；是否记录 metrics 由 Step 决定
    """

    def __init__(self, dice: Dice):
        self.dice = dice

    @abstractmethod
    def process(self, world: WorldRecord) -> StageResult:
        raise NotImplementedError
