from trend_report.models.report import ReportResult
from trend_report.models.trend import Trend

__all__ = ["ReportResult", "Trend"]
