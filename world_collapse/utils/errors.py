# world_collapse/utils/errors.py
class WorldCollapseError(RuntimeError):
    """
    Base class for every error the rule engine signals on purpose.
    CLI catches it and prints the message without a traceback.
    """


class CodecError(WorldCollapseError, ValueError):
    """UWP pseudohex codec failure."""


class OutOfRangeError(CodecError):
    """Numeric value is above the codec's representable domain (0-34)."""


class InvalidSymbolError(CodecError):
    """Character (or profile string) that the codec does not recognise."""


class UnspecifiedRuleError(WorldCollapseError):
    """
    Raised when a rule stage has no transcribed table to evaluate,
    e.g. Hard Times starport attrition without a Degrees of Change table.
    """


class ScriptExhaustedError(WorldCollapseError):
    """ScriptedDice was asked for more rolls than it was given."""
