from __future__ import annotations

import io
import logging
import uuid
from datetime import datetime
from typing import Iterable, Optional

from docx import Document
from docx.shared import Pt

from trend_report.models.trend import Trend
from trend_report.services.pdf_service import REPORT_TITLE, SECTION_HEADING, as_utc


logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class ReportService:
    """Builds .docx reports and keeps them, with their source trends, in memory."""

    def __init__(self) -> None:
        self._reports: dict[uuid.UUID, bytes] = {}
        self._report_trends: dict[uuid.UUID, list[Trend]] = {}

    def _add_paragraph(
        self,
        document,
        text: str,
        bold: bool = False,
        italic: bool = False,
        font_size: Optional[int] = None,
    ) -> None:
        paragraph = document.add_paragraph()
        run = paragraph.add_run(text)
        if bold:
            run.bold = True
        if italic:
            run.italic = True
        if font_size:
            run.font.size = Pt(font_size)

    def build_docx(self, trends: Iterable[Trend], now: Optional[datetime] = None) -> bytes:
        generated_at = as_utc(now)
        document = Document()

        self._add_paragraph(document, REPORT_TITLE, bold=True, font_size=16)
        self._add_paragraph(
            document,
            f"Generated on {generated_at:%Y-%m-%d %H:%M} UTC",
            italic=True,
            font_size=10,
        )
        self._add_paragraph(document, "")
        self._add_paragraph(document, SECTION_HEADING, bold=True, font_size=14)

        for trend in trends:
            document.add_paragraph(trend.title, style="List Bullet")
            document.add_paragraph(f"Summary: {trend.summary or ''}", style="List Bullet 2")
            document.add_paragraph(f"Source: {trend.source_url or ''}", style="List Bullet 2")
            document.add_paragraph(f"Date: {trend.date:%Y-%m-%d}", style="List Bullet 2")
            self._add_paragraph(document, "")

        buffer = io.BytesIO()
        document.save(buffer)
        return buffer.getvalue()

    def generate_report(self, trends: Optional[Iterable[Trend]]) -> uuid.UUID:
        trend_list = list(trends or [])
        content = self.build_docx(trend_list)
        report_id = uuid.uuid4()
        self._reports[report_id] = content
        self._report_trends[report_id] = trend_list
        logger.info(
            "Generated report %s with %d trends (%d bytes)",
            report_id,
            len(trend_list),
            len(content),
        )
        return report_id

    def get_report(self, report_id: uuid.UUID) -> Optional[bytes]:
        return self._reports.get(report_id)

    def get_report_trends(self, report_id: uuid.UUID) -> Optional[list[Trend]]:
        trends = self._report_trends.get(report_id)
        return list(trends) if trends is not None else None


report_service = ReportService()
