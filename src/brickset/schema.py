"""JSON schema and validation for set data files."""

import json
from pathlib import Path
from typing import Any, List

import jsonschema

from .domain.entities import MAX_PIECES

_OPTIONAL_STRING = {"type": ["string", "null"]}

# JSON Schema for a set data file: an array with one object per set
LEGO_SET_SCHEMA = {
    "type": "array",
    "items": {
        "type": "object",
        "required": ["number", "name", "pieces"],
        "properties": {
            "number": _OPTIONAL_STRING,
            "name": _OPTIONAL_STRING,
            "year": {"type": ["integer", "null"]},
            "theme": {
                "type": ["string", "null"],
                "description": "null when the set has no theme, distinct from an empty theme"
            },
            "subtheme": _OPTIONAL_STRING,
            "pieces": {"type": "integer", "minimum": 0, "maximum": MAX_PIECES},
            "minifigs": {"type": ["integer", "null"], "minimum": 0},
            "tags": {
                "type": ["array", "null"],
                "items": {"type": "string"}
            },
            "dimensions": {
                "type": ["object", "null"],
                "required": ["width", "height", "depth"],
                "properties": {
                    "width": {"type": "number"},
                    "height": {"type": "number"},
                    "depth": {"type": "number"}
                }
            },
            "weight": {"type": ["number", "null"]},
            "packagingType": _OPTIONAL_STRING,
            "availability": _OPTIONAL_STRING
        }
    }
}


def validate_set_data(data: Any) -> List[str]:
    """Validate decoded set data against LEGO_SET_SCHEMA.

    Returns:
        List of validation error messages, empty when the data is valid
    """
    validator = jsonschema.Draft7Validator(LEGO_SET_SCHEMA)
    errors = []
    for error in validator.iter_errors(data):
        path = " -> ".join(str(p) for p in error.absolute_path) if error.absolute_path else "root"
        errors.append(f"Validation error at {path}: {error.message}")
    return errors


def validate_set_file(file_path: Path) -> List[str]:
    """Validate a set data JSON file.

    Returns:
        List of validation error messages
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        return [f"JSON parsing error: {e.msg} at line {e.lineno}, column {e.colno}"]
    except OSError as e:
        return [f"Error reading file: {e}"]
    return validate_set_data(data)
