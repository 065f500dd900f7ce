"""Transactions chart service."""

import logging
from datetime import UTC, datetime, timedelta

from sqlalchemy.orm import Session

from app.charts.schemas.chart import Chart
from app.charts.services.chart_builder import build_chart, validate_chart_window
from app.core.constants import DEFAULT_CHART_DAY_GROUPING, DEFAULT_CHART_PAST_DAYS
from app.projects.repository import ProjectRepository
from app.transactions.repository import TransactionRepository

logger = logging.getLogger(__name__)


class ChartService:
    """Service for ledger-derived charts."""

    @staticmethod
    def get_transactions_chart(
        db: Session,
        past_days: int = DEFAULT_CHART_PAST_DAYS,
        day_grouping: int = DEFAULT_CHART_DAY_GROUPING,
        now: datetime | None = None,
    ) -> Chart:
        """Get revenue per restricted project, bucketed over the past days.

        Args:
            db: Database session.
            past_days: Number of days back from now to chart.
            day_grouping: Days per data point.
            now: Reference time, defaults to the current time.

        Returns:
            Chart with one series per restricted project.
        """
        validate_chart_window(past_days, day_grouping)

        now = now or datetime.now(UTC)
        transactions = TransactionRepository(db).find_since(now - timedelta(days=past_days))
        projects = ProjectRepository(db).list_restricted_projects()

        logger.info(
            "Building transactions chart: %d transactions, %d projects, %d days by %d",
            len(transactions),
            len(projects),
            past_days,
            day_grouping,
        )
        return build_chart(past_days, day_grouping, transactions, projects, now=now)
