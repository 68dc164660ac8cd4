"""Schema validation for quiz payloads."""

from .validator import ValidationError, validate_quiz

__all__ = ["ValidationError", "validate_quiz"]
