"""
Module: builder.layout.footer

Purpose:
    Second layout pass: stamp "page X of N" on every page.

    N is only known once the content pass has created its last page, so
    footers are written afterwards by revisiting each page of the surface
    in order. The content pass never draws in the footer area itself.

Key Functions:
    - stamp_footers(): Footer pass over all pages

Used By:
    - builder.controller: Runs after LayoutEngine.run()
"""

from __future__ import annotations

import logging
from typing import Optional

from ..output.surface import Align, DrawingSurface, FontWeight
from .config import LayoutConfig
from .direction import DirectionAdapter, reverse_text
from .labels import QuizLabels

logger = logging.getLogger(__name__)


def stamp_footers(
    surface: DrawingSurface,
    config: LayoutConfig,
    labels: Optional[QuizLabels] = None,
    direction: DirectionAdapter = reverse_text,
) -> int:
    """
    Draw a centered page-number footer on every page.

    Args:
        surface: Surface holding all content pages
        config: Layout configuration (footer offset and size)
        labels: Footer template source
        direction: Direction adapter applied to the footer text

    Returns:
        Total number of pages stamped

    Raises:
        DrawingError: If the surface rejects a page selection or draw call
    """
    labels = labels or QuizLabels()
    total = surface.page_count
    x = surface.page_width / 2
    y = surface.page_height - config.footer_offset

    for ordinal in range(1, total + 1):
        surface.set_active_page(ordinal)
        surface.set_font(FontWeight.NORMAL, config.footer_font_size)
        surface.draw_text(direction(labels.footer_line(ordinal, total)), x, y, Align.CENTER)

    logger.debug(f"Stamped footers on {total} pages")
    return total
