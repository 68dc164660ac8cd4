"""
Module: builder.output.fonts

Purpose:
    Font selection and TrueType registration for the canvas surface.

    The PDF standard fonts (Helvetica) have no Arabic glyphs: Arabic text
    drawn with them comes out as placeholder boxes. Register a TTF with
    Arabic coverage for real quizzes; tests and English output can keep the
    standard fonts, which need no files.

Key Classes:
    - FontConfig: Regular/bold font names plus optional TTF files

Key Functions:
    - find_arabic_font(): Look for an Arabic-capable font on the system

Dependencies:
    - reportlab.pdfbase: Font registry
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from .surface import FontWeight

logger = logging.getLogger(__name__)

ARABIC_FONT_CANDIDATES = [
    Path("/usr/share/fonts/truetype/noto/NotoNaskhArabic-Regular.ttf"),
    Path("/usr/share/fonts/truetype/noto/NotoSansArabic-Regular.ttf"),
    Path("/usr/share/fonts/truetype/fonts-arabeyes/ae_AlArabiya.ttf"),
    Path("/usr/share/fonts/opentype/fonts-hosny-amiri/Amiri-Regular.ttf"),
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/System/Library/Fonts/Supplemental/GeezaPro.ttc"),
    Path("/Library/Fonts/Arial Unicode.ttf"),
    Path("C:/Windows/Fonts/arial.ttf"),
]


@dataclass(frozen=True)
class FontConfig:
    """
    Font configuration (immutable).

    Attributes:
        regular: Font name used for FontWeight.NORMAL
        bold: Font name used for FontWeight.BOLD
        regular_path: TTF file registered under `regular`, if any
        bold_path: TTF file registered under `bold`, if any

    Example:
        >>> FontConfig().name_for(FontWeight.BOLD)
        'Helvetica-Bold'
    """

    regular: str = "Helvetica"
    bold: str = "Helvetica-Bold"
    regular_path: Optional[Path] = None
    bold_path: Optional[Path] = None

    @classmethod
    def from_files(cls, regular_path: Path, bold_path: Optional[Path] = None) -> FontConfig:
        """
        Build a config that uses TTF files; names come from the file stems.

        Without a bold file the regular face is used for bold text too.
        """
        regular_path = Path(regular_path)
        bold_path = Path(bold_path) if bold_path else None
        return cls(
            regular=regular_path.stem,
            bold=bold_path.stem if bold_path else regular_path.stem,
            regular_path=regular_path,
            bold_path=bold_path,
        )

    def name_for(self, weight: FontWeight) -> str:
        """Font name for a weight."""
        return self.bold if weight is FontWeight.BOLD else self.regular

    def register(self) -> None:
        """
        Register the TTF files with ReportLab (no-op for standard fonts).

        Registration is process-wide and skipped for names already known.

        Raises:
            reportlab.pdfbase.ttfonts.TTFError: If a file is not a usable font
            OSError: If a file cannot be read
        """
        for name, path in ((self.regular, self.regular_path), (self.bold, self.bold_path)):
            if path is None:
                continue
            if name in pdfmetrics.getRegisteredFontNames():
                continue
            pdfmetrics.registerFont(TTFont(name, str(path)))
            logger.debug(f"Registered font {name} from {path}")


def find_arabic_font(candidates: Optional[list[Path]] = None) -> Optional[FontConfig]:
    """
    Return a FontConfig for the first Arabic-capable font found on disk.

    Args:
        candidates: Paths to try, in order (defaults to ARABIC_FONT_CANDIDATES)

    Returns:
        FontConfig using that file, or None if no candidate exists
    """
    for path in candidates if candidates is not None else ARABIC_FONT_CANDIDATES:
        if path.exists():
            logger.debug(f"Using Arabic font {path}")
            return FontConfig.from_files(path)
    logger.warning("No Arabic-capable font found; Arabic glyphs will not render")
    return None
