from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from trend_report.models.trend import Trend


# (title, summary, source_url, days_ago)
_CURATED_TRENDS: list[tuple[str, str, str, int]] = [
    (
        "Physics-informed Neural Networks (PINNs) for Simulation",
        "Using PINNs to accelerate FEA/CFD simulations by embedding governing equations into model training.",
        "https://example.com/pinns-mech",
        2,
    ),
    (
        "Generative Design with AI",
        "Optimization of mechanical parts using AI-driven topological generation balancing weight, stress, and manufacturability.",
        "https://example.com/generative-design",
        5,
    ),
    (
        "AI-enabled Predictive Maintenance",
        "Vibration and acoustic sensing models to predict failure in rotating machinery and bearings.",
        "https://example.com/predictive-maintenance",
        7,
    ),
    (
        "Digital Twins with ML Surrogates",
        "Hybrid approach combining physics-based digital twins with ML surrogates for rapid scenario testing.",
        "https://example.com/digital-twin-ml",
        10,
    ),
    (
        "Quality Inspection via Vision Transformers",
        "Automated defect detection on production lines using ViT-based anomaly segmentation.",
        "https://example.com/vision-transformers-qc",
        12,
    ),
]


class TrendsService:
    def get_latest_trends(self, today: Optional[date] = None) -> list[Trend]:
        """Curated static list of current AI trends in mechanical engineering."""
        today = today or datetime.now(timezone.utc).date()
        return [
            Trend(
                title=title,
                summary=summary,
                source_url=source_url,
                date=today - timedelta(days=days_ago),
            )
            for title, summary, source_url, days_ago in _CURATED_TRENDS
        ]


trends_service = TrendsService()
