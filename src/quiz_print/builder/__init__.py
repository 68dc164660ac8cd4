"""
Module: builder

Purpose:
    Render a resolved quiz into a paginated right-to-left PDF.
    Header and question blocks are laid out on a recording surface, page
    footers are stamped in a second pass, and the result is exported with
    ReportLab.

Key Functions:
    - render_quiz(): Main entry point, Quiz → PDF bytes (never raises)
    - render_quiz_to_file(): Render and write to disk

Key Classes:
    - RenderConfig: Layout, labels, fonts and direction policy
    - RenderResult: Summary of a file render

Dependencies:
    - reportlab: PDF generation
    - quiz_print.core.models: Quiz, QuizQuestion

Used By:
    - quiz_print.cli: Command line entry point
"""

from .config import RenderConfig
from .controller import (
    RenderResult,
    build_document,
    create_surface,
    render_quiz,
    render_quiz_to_file,
)
from .output import FALLBACK_PAYLOAD, is_fallback

__all__ = [
    # Config
    "RenderConfig",
    # Controller
    "render_quiz",
    "render_quiz_to_file",
    "build_document",
    "create_surface",
    "RenderResult",
    # Fallback
    "FALLBACK_PAYLOAD",
    "is_fallback",
]
