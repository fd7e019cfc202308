import logging
import uuid

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import Response

from trend_report.core.config import settings
from trend_report.models.report import ReportResult
from trend_report.services.pdf_service import EncodingFailure, pdf_service
from trend_report.services.report_service import DOCX_MEDIA_TYPE, report_service
from trend_report.services.trends_service import trends_service


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post(
    "",
    response_model=ReportResult,
    summary="Generate a .docx report",
    description="Generates a .docx report from current trends and returns { reportId }.",
)
async def create_report():
    trends = trends_service.get_latest_trends()
    report_id = report_service.generate_report(trends)
    return ReportResult(report_id=report_id)


@router.get(
    "/{report_id}/download",
    summary="Download a generated report",
    description="Streams the stored .docx report for the specified report id.",
)
async def download_report(report_id: uuid.UUID):
    content = report_service.get_report(report_id)
    if content is None:
        raise HTTPException(status_code=404, detail="Report not found")
    filename = f"{settings.REPORT_FILE_BASENAME}.docx"
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    return Response(content=content, media_type=DOCX_MEDIA_TYPE, headers=headers)


@router.get(
    "/{report_id}/pdf",
    summary="Get a PDF version of the report",
    description=(
        "Generates and streams a PDF built from the same data as the .docx report. "
        "Use ?inline=true to view in-browser."
    ),
    responses={200: {"content": {"application/pdf": {}}}},
)
async def download_report_pdf(
    report_id: uuid.UUID,
    inline: bool = Query(default=False, description="Render in the browser instead of downloading"),
):
    trends = report_service.get_report_trends(report_id)
    if trends is None:
        raise HTTPException(status_code=404, detail="Report not found")

    try:
        pdf_bytes = pdf_service.generate_pdf(trends)
    except EncodingFailure as exc:
        logger.exception("PDF render failed for report %s", report_id)
        raise HTTPException(status_code=500, detail=f"PDF render failed: {exc}") from exc

    filename = f"{settings.REPORT_FILE_BASENAME}.pdf"
    disposition = "inline" if inline else "attachment"
    headers = {"Content-Disposition": f'{disposition}; filename="{filename}"'}
    return Response(content=pdf_bytes, media_type="application/pdf", headers=headers)
