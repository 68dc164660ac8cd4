"""
Core Models Package

Immutable content models consumed by the layout engine.

All models are frozen dataclasses: a quiz is read-only for the whole render,
so the same value can be rendered repeatedly (or concurrently, each call on
its own drawing surface) without defensive copies.
"""

from .quiz import Quiz, QuizQuestion

__all__ = [
    "Quiz",
    "QuizQuestion",
]
