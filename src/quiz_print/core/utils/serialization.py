"""
Serialization Utilities

to/from JSON helpers for the quiz model.

- `quiz_to_dict` / `quiz_from_dict` wrap the model methods
- `quiz_from_dict` validates against the schema first (opt-out with validate=False)
- `load_quiz` reads a UTF-8 JSON file, as exported by the web client
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from ..models.quiz import Quiz
from ..schemas.validator import ValidationError, validate_quiz

logger = logging.getLogger(__name__)


def quiz_to_dict(quiz: Quiz) -> dict[str, Any]:
    """
    Serialize a Quiz to a dictionary.

    The output can be written to JSON and will pass schema validation.
    """
    return quiz.to_dict()


def quiz_from_dict(data: dict[str, Any], *, validate: bool = True) -> Quiz:
    """
    Deserialize a Quiz from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to validate against the schema first

    Returns:
        Quiz instance

    Raises:
        ValidationError: If validate=True and data is invalid
        ValueError: If data cannot be turned into model objects
    """
    if validate:
        validate_quiz(data)
    try:
        return Quiz.from_dict(data)
    except KeyError as e:
        raise ValueError(f"Missing field in quiz payload: {e}") from e


def load_quiz(path: Path) -> Quiz:
    """
    Load and validate a quiz from a JSON file.

    Raises:
        ValidationError: If the file is not valid JSON or fails the schema
        OSError: If the file cannot be read
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValidationError(
            f"Invalid JSON in {path.name}: {e.msg}",
            path="",
            errors=[f"line {e.lineno} column {e.colno}: {e.msg}"],
        ) from e

    quiz = quiz_from_dict(data)
    logger.debug(f"Loaded quiz {quiz.title!r} with {quiz.question_count} questions from {path}")
    return quiz
