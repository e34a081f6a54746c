#!filepath: world_collapse/engines/virus_engine.py
"""
Virus collapse rules (Traveller: The New Era pp190-191).

VirusEngine 只负责规则计算（查表 + 掷骰），不负责顺序；
顺序由 steps/virus/* + CollapsePipeline 决定。
"""
from __future__ import annotations

from world_collapse.dice.base import Dice
from world_collapse.rules.helpers import round_half_up
from world_collapse.rules.tables import (
    EXPONENT_DECAY_DIVISOR,
    GOVERNMENT_TABLE,
    GOVERNMENT_TABLE_OVERFLOW,
    MSP_ATMOSPHERE_PENALTIES,
    MSP_BASE,
    MSP_HYDROGRAPHICS_PENALTIES,
    MSP_SIZE_PENALTIES,
    MSP_UNINHABITABLE_ATMOSPHERES,
    TECH_DECLINE_BANDS,
)


def calculate_msp(size: int, atmosphere: int, hydrographics: int) -> int:
    """
    Maximum Sustainable Population. May be negative.
    """
    if atmosphere in MSP_UNINHABITABLE_ATMOSPHERES:
        return 0

    msp = MSP_BASE
    for size_below, penalty in MSP_SIZE_PENALTIES:
        if size < size_below:
            msp -= penalty
    msp -= MSP_ATMOSPHERE_PENALTIES.get(atmosphere, 0)
    msp -= MSP_HYDROGRAPHICS_PENALTIES.get(hydrographics, 0)
    return msp


def exponent_decline(tech_decline: int) -> int:
    return round_half_up(tech_decline / EXPONENT_DECAY_DIVISOR)


def government_from_table(index: int) -> int:
    index = max(index, 0)
    if index >= len(GOVERNMENT_TABLE):
        return GOVERNMENT_TABLE_OVERFLOW
    return GOVERNMENT_TABLE[index]


class VirusEngine:
    """
    Dice-driven parts of the Virus collapse.
    Every method consumes dice in a fixed order so scripted replays line up.
    """

    def __init__(self, dice: Dice):
        self.dice = dice

    def reroll_exponent(self) -> int:
        return self.dice.roll(1, 9)

    def tech_level_decline(self, techlevel: int) -> int:
        """Decline amount (tldr), not the new tech level."""
        for tl_below, count, modifier in TECH_DECLINE_BANDS:
            if tl_below is None or techlevel < tl_below:
                return max(self.dice.d6(count) + modifier, 0)
        raise AssertionError("TECH_DECLINE_BANDS must end with an open band")

    def starport_roll(self) -> int:
        return self.dice.d6()

    def facility_roll(self) -> int:
        return self.dice.roll(1, 10)

    def balkanization_throw(self) -> int:
        return self.dice.throw()

    def dictator_roll(self) -> int:
        return self.dice.roll(1, 10)

    def new_government(self, population: int) -> int:
        return government_from_table(self.dice.throw() - 7 + population)

    def law_level(self, government: int) -> int:
        return self.dice.throw() - 7 + government
