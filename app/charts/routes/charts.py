"""Chart routes."""

from typing import Any

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.auth.dependencies import require_admin
from app.charts.schemas.chart import Chart
from app.charts.services.chart_service import ChartService
from app.core.constants import (
    DEFAULT_CHART_DAY_GROUPING,
    DEFAULT_CHART_PAST_DAYS,
    MAX_CHART_DAYS,
)
from app.core.schemas import ErrorResponse
from app.db.session import get_db

router = APIRouter(prefix="/charts", tags=["charts"])


@router.get(
    "/transactions",
    response_model=Chart,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid chart parameters."},
        401: {"model": ErrorResponse, "description": "The user is not logged in."},
        403: {"model": ErrorResponse, "description": "The user is not an admin."},
    },
)
async def get_transactions_chart(
    past_days: int = Query(
        DEFAULT_CHART_PAST_DAYS,
        alias="pastDays",
        le=MAX_CHART_DAYS,
        description="Number of days to chart",
    ),
    day_grouping: int = Query(
        DEFAULT_CHART_DAY_GROUPING,
        alias="dayGrouping",
        le=MAX_CHART_DAYS,
        description="Days per data point",
    ),
    db: Session = Depends(get_db),
    admin: dict[str, Any] = Depends(require_admin),
) -> Chart:
    """
    Get a chart of revenue from project purchases.

    Returns one stacked line series per restricted project, with one data
    point per `dayGrouping` days over the last `pastDays` days, oldest first,
    and the formatted total of all charted transactions.
    """
    return ChartService.get_transactions_chart(db, past_days, day_grouping)
