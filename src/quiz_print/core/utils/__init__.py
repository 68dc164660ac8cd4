"""Core utilities: quiz serialization and loading."""

from .serialization import load_quiz, quiz_from_dict, quiz_to_dict

__all__ = ["load_quiz", "quiz_from_dict", "quiz_to_dict"]
