"""
Die evaluation: turns a DieDescriptor into a random result.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Tuple, Union

from dicepool.core.config import DEFAULT_MAX_VALUE
from dicepool.core.logging_config import get_logger
from .dice_parser import DiceParser, DieDescriptor
from .faces import DieKind, faces_for

logger = get_logger(__name__)


class RandomSource(Protocol):
    """Anything that draws a uniform integer from [a, b] inclusive."""

    def randint(self, a: int, b: int) -> int:
        ...


def roll_face(kind: DieKind, rng: RandomSource) -> Tuple[int, str]:
    """Pick one face of a symbolic die. Returns (index, glyph)."""
    faces = faces_for(kind)
    index = rng.randint(0, len(faces) - 1)
    return index, faces[index]


def roll_dice(count: int, sides: int, rng: RandomSource) -> List[int]:
    """
    Roll count dice of the given sides.

    A zero-sided die scores 0 and never consults the random source.
    """
    if sides < 1:
        return [0] * count
    return [rng.randint(1, sides) for _ in range(count)]


def sum_dice(count: int, sides: int, rng: RandomSource) -> int:
    """Total of count dice, drawn one at a time without keeping the values."""
    if sides < 1:
        return 0
    return sum(rng.randint(1, sides) for _ in range(count))


def roll(descriptor: DieDescriptor, rng: Optional[RandomSource] = None) -> str:
    """
    Roll a die once.

    Args:
        descriptor: Parsed die
        rng: Random source; defaults to the process-global ``random`` module

    Returns:
        The face glyph for symbolic dice, or the decimal sum for numeric dice
        ("0" when no dice are rolled)
    """
    if rng is None:
        rng = random

    if descriptor.kind is DieKind.NUMERIC:
        return str(sum_dice(descriptor.count, descriptor.sides, rng))

    _, face = roll_face(descriptor.kind, rng)
    return face


@dataclass
class RollResult:
    """Complete result of a single roll."""
    descriptor: DieDescriptor              # What was rolled
    result: str                            # Face glyph or decimal total
    rolls: List[int] = field(default_factory=list)  # Individual die values (numeric)
    face_index: Optional[int] = None       # Position in the face table (symbolic)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def notation(self) -> str:
        return self.descriptor.notation

    @property
    def total(self) -> Optional[int]:
        """Numeric total, or None for symbolic dice."""
        if self.descriptor.is_symbolic:
            return None
        return int(self.result)

    def get_breakdown(self) -> str:
        """
        Human-readable breakdown of the roll.

        Examples:
            "2d6: [3,5] = 8"
            "bd: ✶℧ (face 4 of 6)"
        """
        if self.descriptor.is_symbolic:
            return f"{self.notation}: {self.result} (face {self.face_index + 1} of {len(self.descriptor.faces)})"
        rolls_str = ','.join(str(r) for r in self.rolls)
        return f"{self.notation}: [{rolls_str}] = {self.result}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-ready dictionary (see events.ROLL_RECORD_SCHEMA)."""
        return {
            'notation': self.notation,
            'kind': self.descriptor.kind.value,
            'result': self.result,
            'rolls': list(self.rolls),
            'face_index': self.face_index,
            'breakdown': self.get_breakdown(),
            'metadata': self.metadata
        }


class DiceRoller:
    """
    Rolls dice from notation or descriptors with its own random generator.

    Give each thread its own roller; a seeded roller replays the same
    sequence of results.
    """

    def __init__(self, seed: Optional[int] = None, max_value: Optional[int] = DEFAULT_MAX_VALUE):
        """
        Initialize roller.

        Args:
            seed: Random seed for deterministic rolls (testing/replay)
            max_value: Bound used when parsing notation strings
        """
        self.rng = random.Random(seed)
        self.seed = seed
        self.parser = DiceParser(max_value)

    def resolve(self, die: Union[str, DieDescriptor]) -> DieDescriptor:
        """
        Turn notation into a descriptor; descriptors pass through.

        Raises:
            DiceNotationError: If notation is invalid
        """
        if isinstance(die, DieDescriptor):
            return die
        return self.parser.parse(die)

    def roll(
        self,
        die: Union[str, DieDescriptor],
        metadata: Optional[Dict[str, Any]] = None
    ) -> RollResult:
        """
        Roll one die.

        Args:
            die: Notation (e.g. "2d6", "pd") or a parsed DieDescriptor
            metadata: Additional context carried into the result

        Returns:
            RollResult with breakdown

        Raises:
            DiceNotationError: If notation is invalid
        """
        descriptor = self.resolve(die)

        if descriptor.kind is DieKind.NUMERIC:
            rolls = roll_dice(descriptor.count, descriptor.sides, self.rng)
            result = RollResult(
                descriptor=descriptor,
                result=str(sum(rolls)),
                rolls=rolls,
                metadata=metadata or {}
            )
        else:
            index, face = roll_face(descriptor.kind, self.rng)
            result = RollResult(
                descriptor=descriptor,
                result=face,
                face_index=index,
                metadata=metadata or {}
            )

        logger.debug(result.get_breakdown())
        return result

    def roll_many(self, die: Union[str, DieDescriptor], times: int) -> List[RollResult]:
        """
        Roll the same die several times, parsing notation only once.

        Raises:
            DiceNotationError: If notation is invalid
            ValueError: If times is negative
        """
        if times < 0:
            raise ValueError(f"times must be non-negative, got {times}")
        descriptor = self.resolve(die)
        return [self.roll(descriptor) for _ in range(times)]

    def set_seed(self, seed: int):
        """Change random seed (for testing/replay)."""
        self.seed = seed
        self.rng = random.Random(seed)
