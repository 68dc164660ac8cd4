"""
Unit tests for the ReportLab-backed recording surface.
"""

import io
from unittest.mock import patch

import pytest
from pypdf import PdfReader
from reportlab.lib.units import mm

from quiz_print.builder.output import (
    Align,
    CanvasSurface,
    DrawingError,
    FontConfig,
    FontWeight,
    LineCommand,
    PDF_SIGNATURE,
    TextCommand,
    find_arabic_font,
)


class TestPages:
    """Page arena behaviour."""

    def test_new_surface_when_created_then_one_active_page(self):
        surface = CanvasSurface()
        assert surface.page_count == 1
        assert surface.active_page == 1
        assert (surface.page_width, surface.page_height) == (210, 297)

    def test_add_page_when_called_then_appends_and_activates(self):
        surface = CanvasSurface()
        assert surface.add_page() == 2
        assert surface.add_page() == 3
        assert surface.active_page == 3
        assert surface.page_count == 3

    def test_set_active_page_when_existing_then_draws_there(self):
        surface = CanvasSurface()
        surface.add_page()
        surface.set_active_page(1)
        surface.draw_text("first", 10, 10)

        assert [c.text for c in surface.page_texts(1)] == ["first"]
        assert surface.page_texts(2) == []

    @pytest.mark.parametrize("ordinal", [0, 3, -1])
    def test_set_active_page_when_out_of_range_then_raises_error(self, ordinal):
        surface = CanvasSurface()
        surface.add_page()
        with pytest.raises(DrawingError, match="Invalid page ordinal"):
            surface.set_active_page(ordinal)


class TestFonts:
    def test_set_font_when_bold_then_recorded_on_text(self):
        surface = CanvasSurface()
        surface.set_font(FontWeight.BOLD, 16)
        surface.draw_text("x", 1, 2, Align.CENTER)

        assert surface.page_commands(1) == (
            TextCommand("x", 1, 2, Align.CENTER, "Helvetica-Bold", 16),
        )

    def test_set_font_when_unknown_font_then_raises_error(self):
        surface = CanvasSurface(fonts=FontConfig(regular="NoSuchFont-Regular"))
        with pytest.raises(DrawingError, match="Unknown font"):
            surface.set_font(FontWeight.NORMAL, 12)

    def test_init_when_font_file_missing_then_raises_error(self, tmp_path):
        fonts = FontConfig.from_files(tmp_path / "Missing.ttf")
        with pytest.raises(DrawingError, match="Failed to register fonts"):
            CanvasSurface(fonts=fonts)

    def test_from_files_when_no_bold_then_regular_used_for_bold(self, tmp_path):
        fonts = FontConfig.from_files(tmp_path / "Amiri-Regular.ttf")
        assert fonts.name_for(FontWeight.BOLD) == "Amiri-Regular"
        assert fonts.name_for(FontWeight.NORMAL) == "Amiri-Regular"


class TestExport:
    """PDF serialization."""

    def test_export_when_pages_recorded_then_pdf_with_same_page_count(self):
        surface = CanvasSurface()
        surface.draw_text("one", 100, 20)
        surface.add_page()
        surface.draw_line(20, 30, 190, 30)

        data = surface.export_binary()

        assert data.startswith(PDF_SIGNATURE)
        assert len(PdfReader(io.BytesIO(data)).pages) == 2

    def test_export_when_empty_pages_then_blank_pages_kept(self):
        surface = CanvasSurface()
        surface.add_page()
        surface.add_page()

        data = surface.export_binary()

        assert len(PdfReader(io.BytesIO(data)).pages) == 3

    def test_export_when_called_twice_then_raises_error(self):
        surface = CanvasSurface()
        surface.export_binary()
        with pytest.raises(DrawingError, match="already exported"):
            surface.export_binary()

    def test_draw_when_already_exported_then_raises_error(self):
        surface = CanvasSurface()
        surface.export_binary()
        with pytest.raises(DrawingError):
            surface.draw_text("late", 0, 0)

    def test_export_when_same_commands_then_identical_bytes(self):
        def build():
            surface = CanvasSurface()
            surface.set_metadata(title="T", author="A", subject="S")
            surface.draw_text("same", 50, 50)
            surface.add_page()
            return surface.export_binary()

        assert build() == build()

    @patch("quiz_print.builder.output.canvas_surface.canvas.Canvas")
    def test_export_when_replayed_then_converts_top_down_mm_to_points(self, mock_canvas_cls):
        surface = CanvasSurface()
        surface.draw_text("right", 190, 20, Align.RIGHT)
        surface.draw_text("center", 105, 287, Align.CENTER)
        surface.draw_line(20, 55, 190, 55, width=0.5)

        surface.export_binary()

        c = mock_canvas_cls.return_value
        c.drawRightString.assert_called_once_with(pytest.approx(190 * mm), pytest.approx(277 * mm), "right")
        c.drawCentredString.assert_called_once_with(pytest.approx(105 * mm), pytest.approx(10 * mm), "center")
        c.line.assert_called_once_with(
            pytest.approx(20 * mm), pytest.approx(242 * mm),
            pytest.approx(190 * mm), pytest.approx(242 * mm),
        )
        c.showPage.assert_called_once()
        c.save.assert_called_once()

    @patch("quiz_print.builder.output.canvas_surface.canvas.Canvas")
    def test_export_when_canvas_fails_then_raises_drawing_error(self, mock_canvas_cls):
        mock_canvas_cls.return_value.save.side_effect = RuntimeError("disk full")
        surface = CanvasSurface()

        with pytest.raises(DrawingError, match="disk full"):
            surface.export_binary()

    def test_line_command_when_recorded_then_default_width(self):
        surface = CanvasSurface()
        surface.draw_line(1, 2, 3, 4)
        assert surface.page_commands(1) == (LineCommand(1, 2, 3, 4, 0.5),)


class TestFindArabicFont:
    def test_find_when_candidate_exists_then_uses_first_existing(self, tmp_path):
        present = tmp_path / "NotoNaskhArabic-Regular.ttf"
        present.touch()

        fonts = find_arabic_font([tmp_path / "missing.ttf", present])

        assert fonts.regular_path == present
        assert fonts.regular == "NotoNaskhArabic-Regular"

    def test_find_when_no_candidate_then_none(self, tmp_path):
        assert find_arabic_font([tmp_path / "missing.ttf"]) is None
