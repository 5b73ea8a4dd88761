"""
Serialized roll records.

A roll record is the dictionary produced by RollResult.to_dict(). The CLI
emits one per line in --json mode, validated against ROLL_RECORD_SCHEMA.
"""

from typing import Any, Dict

import jsonschema

from .faces import DieKind


ROLL_RECORD_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "notation": {
            "type": "string",
            "description": "Notation of the die that was rolled (2d6, bd, etc.)"
        },
        "kind": {
            "type": "string",
            "enum": [kind.value for kind in DieKind],
            "description": "Die family"
        },
        "result": {
            "type": "string",
            "description": "Face glyph or decimal total"
        },
        "rolls": {
            "type": "array",
            "items": {"type": "integer", "minimum": 0},
            "description": "Individual die values (numeric dice only)"
        },
        "face_index": {
            "type": ["integer", "null"],
            "minimum": 0,
            "description": "Position of the rolled face in its table (symbolic dice only)"
        },
        "breakdown": {
            "type": "string",
            "description": "Human-readable breakdown"
        },
        "metadata": {
            "type": "object",
            "description": "Caller-supplied context"
        }
    },
    "required": ["notation", "kind", "result", "breakdown"]
}


def validate_roll_record(data: Dict[str, Any]) -> None:
    """
    Validate a roll record against ROLL_RECORD_SCHEMA.

    Raises:
        jsonschema.ValidationError: If data doesn't match schema
    """
    jsonschema.validate(data, ROLL_RECORD_SCHEMA)
