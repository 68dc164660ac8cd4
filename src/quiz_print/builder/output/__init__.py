"""
Module: builder.output

Purpose:
    Drawing surfaces and PDF output.
    The layout passes draw on the abstract DrawingSurface; CanvasSurface
    records those calls per page and exports a PDF using ReportLab.

Key Classes:
    - DrawingSurface: Abstract paginated canvas
    - CanvasSurface: ReportLab implementation
    - FontConfig: Font names and TTF registration
    - DrawingError: Surface failure

Dependencies:
    - reportlab: PDF generation

Used By:
    - builder.layout: Content and footer passes
    - builder.controller: Render orchestration
"""

from .surface import Align, DrawingError, DrawingSurface, FontWeight
from .fonts import FontConfig, find_arabic_font
from .canvas_surface import CanvasSurface, LineCommand, TextCommand
from .fallback import (
    FALLBACK_CONTENT_TYPE,
    FALLBACK_PAYLOAD,
    PDF_CONTENT_TYPE,
    PDF_SIGNATURE,
    content_type_of,
    is_fallback,
)

__all__ = [
    "Align",
    "DrawingError",
    "DrawingSurface",
    "FontWeight",
    "FontConfig",
    "find_arabic_font",
    "CanvasSurface",
    "LineCommand",
    "TextCommand",
    "FALLBACK_CONTENT_TYPE",
    "FALLBACK_PAYLOAD",
    "PDF_CONTENT_TYPE",
    "PDF_SIGNATURE",
    "content_type_of",
    "is_fallback",
]
