"""
dicepool - notation parser and roller for numeric and narrative dice.
"""

from dicepool.core.result import ErrorCode, Result
from dicepool.modules.rng import (
    DiceNotationError,
    DiceParser,
    DiceRoller,
    DieDescriptor,
    DieKind,
    RollResult,
    parse,
    roll,
    try_parse,
)

__version__ = "0.1.0"

__all__ = [
    'DiceNotationError', 'DiceParser', 'DiceRoller', 'DieDescriptor', 'DieKind',
    'ErrorCode', 'Result', 'RollResult', 'parse', 'roll', 'try_parse',
]
