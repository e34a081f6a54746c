from .base import Dice
from .random_dice import RandomDice
from .scripted_dice import ScriptedDice

__all__ = ["Dice", "RandomDice", "ScriptedDice"]
