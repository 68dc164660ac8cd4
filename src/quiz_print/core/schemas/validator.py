"""
Schema Validation Utilities

Validates incoming quiz payloads against quiz.schema.json before they are
turned into model objects.

Only shape and types are checked here. A correct answer index that points
past the option list is valid input: the renderer prints such a question with
no option marked.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_quiz(data: Any) -> None:
    """
    Validate a quiz payload against the quiz schema.

    All violations are collected so a caller can report them in one go;
    the first (shallowest) one becomes the exception message.

    Args:
        data: Decoded JSON payload

    Raises:
        ValidationError: If data does not match the schema
    """
    validator = jsonschema.Draft7Validator(_load_schema("quiz"))
    problems = sorted(validator.iter_errors(data), key=lambda e: list(e.absolute_path))
    if not problems:
        return

    first = problems[0]
    path = _format_path(first.absolute_path)
    raise ValidationError(
        f"Schema validation failed at {path or '<root>'}: {first.message}",
        path=path,
        errors=[f"{_format_path(e.absolute_path) or '<root>'}: {e.message}" for e in problems],
    )


def _format_path(parts) -> str:
    """Render a jsonschema path deque as questions[0].options."""
    out = ""
    for part in parts:
        if isinstance(part, int):
            out += f"[{part}]"
        else:
            out += f".{part}" if out else str(part)
    return out
