#!/usr/bin/env python3
"""
Write the current trends report to disk without starting the API.

Both formats into ./out:
    python3 scripts/export_report.py --out-dir out

PDF only:
    python3 scripts/export_report.py --format pdf
"""

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from trend_report.core.config import settings
from trend_report.services.pdf_service import pdf_service
from trend_report.services.report_service import report_service
from trend_report.services.trends_service import trends_service


logger = logging.getLogger("export_report")


def export_report(out_dir: Path, formats: list[str]) -> list[Path]:
    trends = trends_service.get_latest_trends()
    out_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    if "docx" in formats:
        path = out_dir / f"{settings.REPORT_FILE_BASENAME}.docx"
        path.write_bytes(report_service.build_docx(trends))
        written.append(path)
    if "pdf" in formats:
        path = out_dir / f"{settings.REPORT_FILE_BASENAME}.pdf"
        path.write_bytes(pdf_service.generate_pdf(trends))
        written.append(path)
    return written


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Export the AI trends report as .docx and/or PDF files."
    )
    parser.add_argument("--out-dir", type=Path, default=Path("."), help="Directory to write into")
    parser.add_argument(
        "--format",
        choices=["docx", "pdf", "all"],
        default="all",
        help="Which document format to write",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    formats = ["docx", "pdf"] if args.format == "all" else [args.format]
    for path in export_report(args.out_dir, formats):
        logger.info("Wrote %s (%d bytes)", path, path.stat().st_size)


if __name__ == "__main__":
    main()
