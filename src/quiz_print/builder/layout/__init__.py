"""
Module: builder.layout

Purpose:
    Page layout for quiz rendering.
    Places the header and question blocks onto a drawing surface, then
    stamps page-number footers in a second pass.

Key Functions:
    - stamp_footers(): Footer pass
    - reverse_text(): Default RTL direction adapter

Key Classes:
    - LayoutConfig: Margins, line heights and font sizes
    - QuizLabels: Line templates and answer markers
    - LayoutEngine: Content pass
    - LayoutResult: Page count and diagnostics

Used By:
    - builder.controller: Render orchestration
"""

from .config import LayoutConfig
from .labels import QuizLabels, ARABIC_LABELS, ENGLISH_LABELS, LABEL_PRESETS
from .direction import DirectionAdapter, reverse_text, identity_text, DIRECTION_ADAPTERS
from .models import LayoutContext, LayoutResult
from .engine import LayoutEngine
from .footer import stamp_footers

__all__ = [
    # Config
    "LayoutConfig",
    "QuizLabels",
    "ARABIC_LABELS",
    "ENGLISH_LABELS",
    "LABEL_PRESETS",
    # Direction
    "DirectionAdapter",
    "reverse_text",
    "identity_text",
    "DIRECTION_ADAPTERS",
    # Models
    "LayoutContext",
    "LayoutResult",
    # Passes
    "LayoutEngine",
    "stamp_footers",
]
