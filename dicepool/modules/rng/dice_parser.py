"""
Dice notation parser.

Supported notation:
- bd, sb, dd, pd, cd, fd  (boost, setback, difficulty, proficiency,
  challenge and force dice)
- NdS                     (N dice with S sides each, e.g. 2d6)

Codes and the ``d`` separator are matched exactly; ``BD`` or ``2D6`` are
rejected rather than folded to lowercase.
"""

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Tuple

from dicepool.core.config import DEFAULT_MAX_VALUE
from dicepool.core.logging_config import get_logger
from dicepool.core.result import ErrorCode, Result
from .faces import DieKind, SYMBOLIC_CODES, faces_for

if TYPE_CHECKING:
    from .roller import RandomSource

logger = get_logger(__name__)

# Base-10 unsigned integer, optional leading plus sign
UNSIGNED_PATTERN = re.compile(r'\+?[0-9]+')


class DiceNotationError(ValueError):
    """
    Raised when notation cannot be turned into a die.

    Attributes:
        code: ErrorCode.MALFORMED_NOTATION or ErrorCode.VALUE_TOO_LARGE
        input: The rejected notation, as given
        limit: The bound that was exceeded (VALUE_TOO_LARGE only)
    """

    def __init__(self, code: ErrorCode, input: str, limit: Optional[int] = None):
        self.code = code
        self.input = input
        self.limit = limit
        if code is ErrorCode.VALUE_TOO_LARGE:
            message = f"Input: '{input}' too large to form a dice please use numbers <= {limit}"
        else:
            message = f"Could not parse the input: '{input}' to form a dice"
        super().__init__(message)

    @classmethod
    def malformed(cls, input: str) -> 'DiceNotationError':
        return cls(ErrorCode.MALFORMED_NOTATION, input)

    @classmethod
    def too_large(cls, input: str, limit: int) -> 'DiceNotationError':
        return cls(ErrorCode.VALUE_TOO_LARGE, input, limit)


@dataclass(frozen=True)
class DieDescriptor:
    """
    A parsed die, ready to roll any number of times.

    Symbolic dice carry no parameters (count and sides stay 0). Numeric dice
    carry the number of dice and the sides per die.
    """
    kind: DieKind
    count: int = 0
    sides: int = 0

    def __post_init__(self):
        if self.kind.is_symbolic and (self.count or self.sides):
            raise ValueError(f"{self.kind.value} dice take no count or sides")
        if self.count < 0 or self.sides < 0:
            raise ValueError(f"count and sides must be non-negative, got {self.count}d{self.sides}")

    @classmethod
    def numeric(cls, count: int, sides: int) -> 'DieDescriptor':
        return cls(DieKind.NUMERIC, count, sides)

    @classmethod
    def symbolic(cls, kind: DieKind) -> 'DieDescriptor':
        return cls(kind)

    @property
    def is_symbolic(self) -> bool:
        return self.kind.is_symbolic

    @property
    def faces(self) -> Tuple[str, ...]:
        """Face table of a symbolic die; empty for numeric dice."""
        if not self.is_symbolic:
            return ()
        return faces_for(self.kind)

    @property
    def notation(self) -> str:
        if self.is_symbolic:
            return self.kind.code
        return f"{self.count}d{self.sides}"

    def __str__(self) -> str:
        return self.notation

    def roll(self, rng: Optional["RandomSource"] = None) -> str:
        """
        Roll this die once.

        Args:
            rng: Random source exposing randint(lo, hi); defaults to the
                 process-global ``random`` module

        Returns:
            A face glyph for symbolic dice, the decimal sum for numeric dice
        """
        from .roller import roll
        return roll(self, rng)


class DiceParser:
    """
    Parser for die notation.

    Args:
        max_value: Largest accepted count or side value. None disables the
                   bound entirely.
    """

    def __init__(self, max_value: Optional[int] = DEFAULT_MAX_VALUE):
        if max_value is not None and max_value < 0:
            raise ValueError(f"max_value must be non-negative, got {max_value}")
        self.max_value = max_value

    def parse(self, notation: str) -> DieDescriptor:
        """
        Parse notation into a DieDescriptor.

        Examples:
            "bd"  → DieDescriptor(kind=DieKind.BOOST)
            "2d6" → DieDescriptor(kind=DieKind.NUMERIC, count=2, sides=6)
            " 3 d 8 " → DieDescriptor(kind=DieKind.NUMERIC, count=3, sides=8)

        Args:
            notation: Notation string

        Returns:
            DieDescriptor

        Raises:
            DiceNotationError: If notation is malformed or a value exceeds
                               max_value
        """
        if not isinstance(notation, str):
            raise TypeError(f"notation must be a string, got {type(notation).__name__}")

        kind = SYMBOLIC_CODES.get(notation)
        if kind is not None:
            return DieDescriptor.symbolic(kind)

        parts = notation.split('d')
        if len(parts) != 2:
            logger.debug(f"Rejected '{notation}': expected one 'd' separator, found {len(parts) - 1}")
            raise DiceNotationError.malformed(notation)

        count_part, sides_part = (part.strip() for part in parts)
        if not (UNSIGNED_PATTERN.fullmatch(count_part) and UNSIGNED_PATTERN.fullmatch(sides_part)):
            logger.debug(f"Rejected '{notation}': count and sides must be unsigned integers")
            raise DiceNotationError.malformed(notation)

        try:
            count = int(count_part)
            sides = int(sides_part)
        except ValueError:
            # Beyond the interpreter's integer string digit limit
            logger.debug(f"Rejected '{notation}': value has too many digits")
            if self.max_value is not None:
                raise DiceNotationError.too_large(notation, self.max_value)
            raise DiceNotationError.malformed(notation)

        if self.max_value is not None and (count > self.max_value or sides > self.max_value):
            logger.debug(f"Rejected '{notation}': exceeds limit {self.max_value}")
            raise DiceNotationError.too_large(notation, self.max_value)

        return DieDescriptor.numeric(count, sides)

    def validate(self, notation: str) -> bool:
        """
        Check if notation is valid without keeping the result.

        Returns:
            True if valid, False otherwise
        """
        try:
            self.parse(notation)
            return True
        except DiceNotationError:
            return False

    def try_parse(self, notation: str) -> Result:
        """
        Parse without raising.

        Returns:
            Result.ok(DieDescriptor) on success, otherwise Result.fail with
            ErrorCode.MALFORMED_NOTATION or ErrorCode.VALUE_TOO_LARGE
        """
        try:
            return Result.ok(self.parse(notation))
        except DiceNotationError as e:
            return Result.fail(str(e), e.code)


def parse(notation: str, max_value: Optional[int] = DEFAULT_MAX_VALUE) -> DieDescriptor:
    """Parse notation with a one-off DiceParser. See DiceParser.parse."""
    return DiceParser(max_value).parse(notation)


def try_parse(notation: str, max_value: Optional[int] = DEFAULT_MAX_VALUE) -> Result:
    """Parse notation without raising. See DiceParser.try_parse."""
    return DiceParser(max_value).try_parse(notation)
