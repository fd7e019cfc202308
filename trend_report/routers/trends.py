from fastapi import APIRouter

from trend_report.models.trend import Trend
from trend_report.services.trends_service import trends_service


router = APIRouter(prefix="/trends", tags=["trends"])


@router.get(
    "",
    response_model=list[Trend],
    summary="Get latest AI trends",
    description="Returns a list of mocked current AI trends in mechanical engineering.",
)
async def list_trends():
    return trends_service.get_latest_trends()
