"""
Module: builder.output.fallback

Purpose:
    The payload returned instead of a PDF when rendering fails.

    It is plain text, so it can never be mistaken for a document: every PDF
    starts with the "%PDF-" signature, the fallback never does.
"""

from __future__ import annotations

PDF_CONTENT_TYPE = "application/pdf"
FALLBACK_CONTENT_TYPE = "text/plain"
FALLBACK_PAYLOAD = b"Error generating PDF"

PDF_SIGNATURE = b"%PDF-"


def is_fallback(data: bytes) -> bool:
    """True if data is the fallback payload rather than a rendered PDF."""
    return data == FALLBACK_PAYLOAD


def content_type_of(data: bytes) -> str:
    """Content type to serve data with."""
    return FALLBACK_CONTENT_TYPE if is_fallback(data) else PDF_CONTENT_TYPE
