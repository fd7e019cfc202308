from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Optional

from trend_report.models.trend import Trend


logger = logging.getLogger(__name__)

REPORT_TITLE = "AI Trends Report - Mechanical Engineering"
SECTION_HEADING = "Latest Trends"

# A4 in points
PAGE_WIDTH = 595
PAGE_HEIGHT = 842

LEFT_MARGIN = 72
TOP_Y = 750
LEADING = 16
TITLE_FONT_SIZE = 16
BODY_FONT_SIZE = 11

PDF_HEADER = b"%PDF-1.4\n"
PDF_EOF = b"%%EOF"

# Matches the /WinAnsiEncoding declared on the font resource.
TEXT_ENCODING = "cp1252"


class EncodingFailure(Exception):
    """The PDF output buffer could not be written."""


class LineRole(str, Enum):
    TITLE = "title"
    SUBTITLE = "subtitle"
    HEADING = "heading"
    BODY = "body"


@dataclass(frozen=True)
class TextLine:
    role: LineRole
    text: str


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _encodable(text: str) -> bool:
    try:
        text.encode(TEXT_ENCODING)
    except UnicodeEncodeError:
        return False
    return True


def _transliterate_char(char: str) -> str:
    if _encodable(char):
        return char
    if unicodedata.combining(char):
        return ""
    stripped = "".join(
        part for part in unicodedata.normalize("NFKD", char) if not unicodedata.combining(part)
    )
    if stripped and _encodable(stripped):
        return stripped
    return "?"


def transliterate(text: Optional[str]) -> str:
    """Map text onto characters the WinAnsi font encoding can show.

    Text is composed first so decomposed accents (``e`` + U+0301) stay on
    their letter. Unsupported characters are decomposed with their accents dropped
    (``ő`` -> ``o``, ``ﬁ`` -> ``fi``); anything left over becomes ``?``.
    """
    if not text:
        return ""
    text = unicodedata.normalize("NFC", text)
    if _encodable(text):
        return text
    return "".join(_transliterate_char(char) for char in text)


def escape_pdf_text(text: Optional[str]) -> str:
    # Backslashes first so the escapes added for parentheses stay single.
    if not text:
        return ""
    return (
        text.replace("\\", "\\\\")
        .replace("(", "\\(")
        .replace(")", "\\)")
        .replace("\r", " ")
        .replace("\n", " ")
    )


def as_utc(now: Optional[datetime]) -> datetime:
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now
    return now.astimezone(timezone.utc)


class PdfService:
    def compose_lines(
        self,
        trends: Iterable[Trend],
        now: Optional[datetime] = None,
    ) -> list[TextLine]:
        generated_at = as_utc(now)
        lines = [
            TextLine(LineRole.TITLE, REPORT_TITLE),
            TextLine(LineRole.SUBTITLE, f"Generated on {generated_at:%Y-%m-%d %H:%M} UTC"),
            TextLine(LineRole.BODY, ""),
            TextLine(LineRole.HEADING, SECTION_HEADING),
        ]
        for trend in trends:
            lines.append(TextLine(LineRole.BODY, f"• {trend.title}"))
            if not _is_blank(trend.summary):
                lines.append(TextLine(LineRole.BODY, f"   Summary: {trend.summary}"))
            if not _is_blank(trend.source_url):
                lines.append(TextLine(LineRole.BODY, f"   Source: {trend.source_url}"))
            lines.append(TextLine(LineRole.BODY, f"   Date: {trend.date:%Y-%m-%d}"))
            lines.append(TextLine(LineRole.BODY, ""))
        return lines

    def build_content_stream(self, lines: Iterable[TextLine]) -> bytes:
        """Page content stream drawing one text line per row from the top left.

        Lines are never wrapped and no second page is started, so a long
        report simply runs off the bottom of the page.
        """
        commands = [
            "BT",
            f"/F1 {TITLE_FONT_SIZE} Tf",
            f"1 0 0 1 {LEFT_MARGIN} {TOP_Y} Tm",
            f"{LEADING} TL",
        ]
        for idx, line in enumerate(lines):
            if idx > 0:
                commands.append("T*")
            font_size = TITLE_FONT_SIZE if line.role is LineRole.TITLE else BODY_FONT_SIZE
            commands.append(f"/F1 {font_size} Tf")
            commands.append(f"({escape_pdf_text(transliterate(line.text))}) Tj")
        return ("\n".join(commands) + "\n\nET").encode(TEXT_ENCODING)

    def _serialize_objects(self, content: bytes) -> list[bytes]:
        bodies = [
            b"<< /Type /Catalog /Pages 2 0 R >>",
            b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
            (
                f"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 {PAGE_WIDTH} {PAGE_HEIGHT}] "
                f"/Resources << /Font << /F1 4 0 R >> >> /Contents 5 0 R >>"
            ).encode("ascii"),
            b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica /Encoding /WinAnsiEncoding >>",
            f"<< /Length {len(content)} >>\nstream\n".encode("ascii") + content + b"\nendstream",
        ]
        return [
            f"{obj_id} 0 obj\n".encode("ascii") + body + b"\nendobj\n"
            for obj_id, body in enumerate(bodies, start=1)
        ]

    def _object_offsets(self, start: int, chunks: list[bytes]) -> list[int]:
        offsets: list[int] = []
        position = start
        for chunk in chunks:
            offsets.append(position)
            position += len(chunk)
        return offsets

    def _xref_and_trailer(self, offsets: list[int], xref_start: int) -> bytes:
        size = len(offsets) + 1
        rows = [f"xref\n0 {size}\n", "0000000000 65535 f \n"]
        rows.extend(f"{offset:010} 00000 n \n" for offset in offsets)
        rows.append(f"trailer\n<< /Size {size} /Root 1 0 R >>\n")
        rows.append(f"startxref\n{xref_start}\n")
        return "".join(rows).encode("ascii") + PDF_EOF

    def build_single_page(self, lines: Iterable[TextLine]) -> bytes:
        try:
            content = self.build_content_stream(lines)
            objects = self._serialize_objects(content)
            offsets = self._object_offsets(len(PDF_HEADER), objects)
            xref_start = offsets[-1] + len(objects[-1])

            out = bytearray(PDF_HEADER)
            for chunk in objects:
                out.extend(chunk)
            out.extend(self._xref_and_trailer(offsets, xref_start))
        except MemoryError as exc:
            raise EncodingFailure("Out of memory while writing PDF output") from exc
        return bytes(out)

    def generate_pdf(self, trends: Iterable[Trend], now: Optional[datetime] = None) -> bytes:
        lines = self.compose_lines(trends, now=now)
        pdf_bytes = self.build_single_page(lines)
        logger.debug("Rendered PDF report: %d lines, %d bytes", len(lines), len(pdf_bytes))
        return pdf_bytes


pdf_service = PdfService()
