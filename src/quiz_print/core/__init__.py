"""
Quiz Print Core Package

Shared content model and loading utilities. The builder only ever sees the
frozen, already-resolved models defined here; fetching quizzes and resolving
subject codes to display names happens in the calling application.
"""

from .models import Quiz, QuizQuestion
from .schemas import ValidationError, validate_quiz
from .utils import load_quiz, quiz_from_dict, quiz_to_dict

__all__ = [
    "Quiz",
    "QuizQuestion",
    "ValidationError",
    "validate_quiz",
    "load_quiz",
    "quiz_from_dict",
    "quiz_to_dict",
]
