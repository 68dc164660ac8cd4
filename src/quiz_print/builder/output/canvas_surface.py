"""
Module: builder.output.canvas_surface

Purpose:
    ReportLab implementation of DrawingSurface.

    A ReportLab canvas is write-once: after showPage() a page can no longer
    be drawn on. The footer pass has to revisit every page, so draw calls
    are recorded into a page arena (one command list per ordinal) and only
    replayed onto a canvas in export_binary().

Key Classes:
    - CanvasSurface: Recording surface that exports a PDF
    - TextCommand / LineCommand: Recorded draw operations

Dependencies:
    - reportlab: PDF generation
    - builder.output.fonts: Font names and TTF registration

Used By:
    - builder.controller: One fresh surface per render
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import List, Optional, Union

from reportlab.lib.units import mm
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfgen import canvas

from ..layout.config import DEFAULT_PAGE_HEIGHT_MM, DEFAULT_PAGE_WIDTH_MM
from .fonts import FontConfig
from .surface import Align, DrawingError, DrawingSurface, FontWeight

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TextCommand:
    """A recorded draw_text call with the font active at the time."""

    text: str
    x: float
    y: float
    align: Align
    font_name: str
    font_size: float


@dataclass(frozen=True)
class LineCommand:
    """A recorded draw_line call."""

    x1: float
    y1: float
    x2: float
    y2: float
    width: float


DrawCommand = Union[TextCommand, LineCommand]


class CanvasSurface(DrawingSurface):
    """
    Recording drawing surface backed by a ReportLab canvas.

    Attributes:
        fonts: Font configuration (registered on construction)

    Example:
        >>> surface = CanvasSurface()
        >>> surface.set_font(FontWeight.BOLD, 24)
        >>> surface.draw_text("cba", 190, 20)
        >>> surface.add_page()
        2
        >>> pdf = surface.export_binary()
    """

    def __init__(
        self,
        page_width: float = DEFAULT_PAGE_WIDTH_MM,
        page_height: float = DEFAULT_PAGE_HEIGHT_MM,
        fonts: Optional[FontConfig] = None,
    ) -> None:
        self.fonts = fonts or FontConfig()
        try:
            self.fonts.register()
        except Exception as e:
            raise DrawingError(f"Failed to register fonts: {e}") from e

        self._page_width = page_width
        self._page_height = page_height
        self._pages: List[List[DrawCommand]] = [[]]
        self._active = 1
        self._font_name = self.fonts.regular
        self._font_size = 12.0
        self._metadata: dict[str, str] = {}
        self._exported = False

    # ─────────────────────────────────────────────────────────────────────
    # DrawingSurface
    # ─────────────────────────────────────────────────────────────────────

    @property
    def page_width(self) -> float:
        return self._page_width

    @property
    def page_height(self) -> float:
        return self._page_height

    @property
    def page_count(self) -> int:
        return len(self._pages)

    @property
    def active_page(self) -> int:
        return self._active

    def set_font(self, weight: FontWeight, size: float) -> None:
        name = self.fonts.name_for(weight)
        try:
            pdfmetrics.getFont(name)
        except KeyError as e:
            raise DrawingError(f"Unknown font {name!r}") from e
        if size <= 0:
            raise DrawingError(f"Font size must be positive: {size}")
        self._font_name = name
        self._font_size = size

    def draw_text(self, text: str, x: float, y: float, align: Align = Align.RIGHT) -> None:
        self._check_open()
        self._pages[self._active - 1].append(
            TextCommand(text, x, y, Align(align), self._font_name, self._font_size)
        )

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, width: float = 0.5) -> None:
        self._check_open()
        self._pages[self._active - 1].append(LineCommand(x1, y1, x2, y2, width))

    def add_page(self) -> int:
        self._check_open()
        self._pages.append([])
        self._active = len(self._pages)
        return self._active

    def set_active_page(self, ordinal: int) -> None:
        self._check_open()
        if not 1 <= ordinal <= len(self._pages):
            raise DrawingError(
                f"Invalid page ordinal {ordinal} (document has {len(self._pages)} pages)"
            )
        self._active = ordinal

    def set_metadata(self, *, title: str = "", author: str = "", subject: str = "") -> None:
        self._metadata = {"title": title, "author": author, "subject": subject}

    def export_binary(self) -> bytes:
        """
        Replay the recorded pages onto a ReportLab canvas and return the PDF.

        The canvas is created with invariant=1, so the same commands always
        produce the same bytes (no creation date or random document ID).
        """
        self._check_open()
        self._exported = True

        buffer = io.BytesIO()
        c = canvas.Canvas(
            buffer,
            pagesize=(self._page_width * mm, self._page_height * mm),
            invariant=1,
            pageCompression=1,
        )
        if self._metadata.get("title"):
            c.setTitle(self._metadata["title"])
        if self._metadata.get("author"):
            c.setAuthor(self._metadata["author"])
        if self._metadata.get("subject"):
            c.setSubject(self._metadata["subject"])

        try:
            for commands in self._pages:
                self._render_page(c, commands)
                c.showPage()
            c.save()
        except Exception as e:
            raise DrawingError(f"Failed to serialize document: {e}") from e

        data = buffer.getvalue()
        logger.debug(f"Exported {len(self._pages)} pages ({len(data)} bytes)")
        return data

    # ─────────────────────────────────────────────────────────────────────
    # Introspection
    # ─────────────────────────────────────────────────────────────────────

    def page_commands(self, ordinal: int) -> tuple[DrawCommand, ...]:
        """
        Commands recorded on a page.

        Raises:
            DrawingError: If ordinal is not in 1..page_count
        """
        if not 1 <= ordinal <= len(self._pages):
            raise DrawingError(f"Invalid page ordinal {ordinal}")
        return tuple(self._pages[ordinal - 1])

    def page_texts(self, ordinal: int) -> list[TextCommand]:
        """Text commands recorded on a page, in drawing order."""
        return [cmd for cmd in self.page_commands(ordinal) if isinstance(cmd, TextCommand)]

    # ─────────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────────

    def _check_open(self) -> None:
        if self._exported:
            raise DrawingError("Document already exported")

    def _render_page(self, c: canvas.Canvas, commands: List[DrawCommand]) -> None:
        c.setFillColorRGB(0, 0, 0)
        c.setStrokeColorRGB(0, 0, 0)
        for cmd in commands:
            if isinstance(cmd, TextCommand):
                self._draw_text_command(c, cmd)
            else:
                c.setLineWidth(cmd.width * mm)
                c.line(
                    cmd.x1 * mm, self._to_pdf_y(cmd.y1),
                    cmd.x2 * mm, self._to_pdf_y(cmd.y2),
                )

    def _draw_text_command(self, c: canvas.Canvas, cmd: TextCommand) -> None:
        c.setFont(cmd.font_name, cmd.font_size)
        x_pt = cmd.x * mm
        y_pt = self._to_pdf_y(cmd.y)
        if cmd.align is Align.RIGHT:
            c.drawRightString(x_pt, y_pt, cmd.text)
        elif cmd.align is Align.CENTER:
            c.drawCentredString(x_pt, y_pt, cmd.text)
        else:
            c.drawString(x_pt, y_pt, cmd.text)

    def _to_pdf_y(self, y_mm: float) -> float:
        """Convert a top-down mm coordinate to bottom-up PDF points."""
        return (self._page_height - y_mm) * mm
