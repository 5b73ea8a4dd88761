"""
RNG Module - dice notation and rolling.

Provides:
- Notation parsing for narrative dice (bd, sb, dd, pd, cd, fd) and numeric
  dice (2d6, 1d20, ...)
- Rolling with an injectable or seeded random source
- Roll records for audit trails and JSON output

Usage:
    from dicepool.modules.rng import parse, DiceRoller

    die = parse("2d6")
    print(die.roll())               # "7"

    roller = DiceRoller(seed=42)
    print(roller.roll("pd").get_breakdown())
"""

from .faces import DieKind, FACE_TABLES, SYMBOLIC_CODES, faces_for
from .dice_parser import DiceParser, DiceNotationError, DieDescriptor, parse, try_parse
from .roller import DiceRoller, RandomSource, RollResult, roll
from .events import ROLL_RECORD_SCHEMA, validate_roll_record

__all__ = [
    'DieKind', 'FACE_TABLES', 'SYMBOLIC_CODES', 'faces_for',
    'DiceParser', 'DiceNotationError', 'DieDescriptor', 'parse', 'try_parse',
    'DiceRoller', 'RandomSource', 'RollResult', 'roll',
    'ROLL_RECORD_SCHEMA', 'validate_roll_record',
]
