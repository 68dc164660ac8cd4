"""
Module: builder.config

Purpose:
    Configuration bundle for one render: layout constants, line templates,
    fonts and the text direction policy.

Key Classes:
    - RenderConfig: Immutable render configuration

Used By:
    - builder.controller: render_quiz / render_quiz_to_file
    - quiz_print.cli: Built from command line options
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .layout.config import LayoutConfig
from .layout.direction import DirectionAdapter, reverse_text
from .layout.labels import QuizLabels
from .output.fonts import FontConfig


@dataclass(frozen=True)
class RenderConfig:
    """
    Configuration for rendering a quiz (immutable).

    Attributes:
        layout: Page geometry, line heights and font sizes
        labels: Line templates; Arabic by default
        fonts: Font names and optional TTF files
        direction: Direction adapter applied to every drawn string

    Example:
        >>> config = RenderConfig(labels=ENGLISH_LABELS)
        >>> config.layout.top_margin
        20.0
    """

    layout: LayoutConfig = field(default_factory=LayoutConfig)
    labels: QuizLabels = field(default_factory=QuizLabels)
    fonts: FontConfig = field(default_factory=FontConfig)
    direction: DirectionAdapter = reverse_text
