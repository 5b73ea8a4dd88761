"""
Face tables for the narrative (symbolic) dice.

Each table lists every printed face in order. Repeated glyphs are deliberate:
a face appearing twice on a six-sided die comes up 2/6 of the time.

Glyphs:
    ▢  blank
    ✶  success        ▼  failure
    ℧  advantage      ⎔  threat
    ⎈  triumph        ⎊  despair
    ●  dark side      ○  light side
"""

from enum import Enum
from typing import Dict, Optional, Tuple


class DieKind(Enum):
    """Every die family the notation can name."""
    BOOST = "boost"
    SETBACK = "setback"
    DIFFICULTY = "difficulty"
    PROFICIENCY = "proficiency"
    CHALLENGE = "challenge"
    FORCE = "force"
    NUMERIC = "numeric"

    @property
    def is_symbolic(self) -> bool:
        return self is not DieKind.NUMERIC

    @property
    def code(self) -> Optional[str]:
        """Two-letter notation code, or None for numeric dice."""
        return KIND_CODES.get(self)


BOOST = ("▢", "▢", "✶", "✶℧", "℧℧", "℧")
SETBACK = ("▢", "▢", "▼", "▼", "⎔", "⎔")
DIFFICULTY = ("▢", "▼", "▼▼", "⎔", "⎔", "⎔", "⎔⎔", "▼⎔")
PROFICIENCY = ("▢", "✶", "✶", "✶✶", "✶✶", "℧", "⎈", "℧℧", "℧℧", "✶℧", "✶℧", "✶℧")
CHALLENGE = ("▼", "▼", "▼▼", "▼▼", "⎔", "⎔", "▼⎔", "▼⎔", "⎔⎔", "⎔⎔", "⎊", "▢")
FORCE = ("●", "●", "●", "●", "●", "●", "●●", "○", "○", "○○", "○○", "○○")

FACE_TABLES: Dict[DieKind, Tuple[str, ...]] = {
    DieKind.BOOST: BOOST,
    DieKind.SETBACK: SETBACK,
    DieKind.DIFFICULTY: DIFFICULTY,
    DieKind.PROFICIENCY: PROFICIENCY,
    DieKind.CHALLENGE: CHALLENGE,
    DieKind.FORCE: FORCE,
}

# Reserved notation codes, matched exactly (case-sensitive)
SYMBOLIC_CODES: Dict[str, DieKind] = {
    "bd": DieKind.BOOST,
    "sb": DieKind.SETBACK,
    "dd": DieKind.DIFFICULTY,
    "pd": DieKind.PROFICIENCY,
    "cd": DieKind.CHALLENGE,
    "fd": DieKind.FORCE,
}

KIND_CODES: Dict[DieKind, str] = {kind: code for code, kind in SYMBOLIC_CODES.items()}


def faces_for(kind: DieKind) -> Tuple[str, ...]:
    """
    Return the face table for a symbolic die kind.

    Raises:
        KeyError: If kind is DieKind.NUMERIC
    """
    return FACE_TABLES[kind]
