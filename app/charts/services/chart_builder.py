"""Time-bucketed revenue chart built from the transaction ledger.

Buckets are fixed-length intervals of `day_grouping` days (24h each, UTC),
laid out backwards from `now`. Transactions are folded newest first: the
window slides back one bucket at a time until it contains the transaction,
closing (labelling) every bucket it passes, so gaps come out as zeros.
"""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from app.charts.schemas.chart import Axis, Chart, Series
from app.core.config import settings
from app.core.constants import (
    CHART_SERIES_STACK,
    CHART_SERIES_TYPE,
    MAX_CHART_DAYS,
    MONTH_GROUPING_DAYS,
    WEEK_GROUPING_DAYS,
    YEAR_GROUPING_DAYS,
)
from app.core.datetime_utils import as_utc
from app.core.exceptions import ValidationError
from app.projects.models.project import Project
from app.transactions.models.transaction import Transaction

MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

CENTS = Decimal("0.01")


def format_day(value: datetime) -> str:
    """`05 Jan` style day string (locale independent)."""
    return f"{value.day:02d} {MONTH_ABBREVIATIONS[value.month - 1]}"


def get_label_for(start: datetime, end: datetime, day_grouping: int) -> str:
    """X-axis label for the bucket [start, end) of `day_grouping` days."""
    if start.date() == end.date():
        return format_day(start)
    if day_grouping == WEEK_GROUPING_DAYS:
        return f"WB {format_day(start)}"
    if day_grouping == MONTH_GROUPING_DAYS:
        month = MONTH_ABBREVIATIONS[start.month - 1]
        return f"{month} {start.year}" if start.month == 1 else month
    if day_grouping in YEAR_GROUPING_DAYS:
        return str(start.year)
    return f"{format_day(start)} – {format_day(end)}"


def format_currency(amount: Decimal, symbol: str | None = None) -> str:
    """`£1,234.50`; negative totals render as `-£5.00`."""
    symbol = settings.CHART_CURRENCY_SYMBOL if symbol is None else symbol
    value = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def validate_chart_window(past_days: int, day_grouping: int) -> None:
    """Reject chart parameters the bucketing cannot work with."""
    if not 0 < day_grouping <= MAX_CHART_DAYS:
        raise ValidationError(
            f"dayGrouping must be between 1 and {MAX_CHART_DAYS} days", field="dayGrouping"
        )
    if not 0 <= past_days <= MAX_CHART_DAYS:
        raise ValidationError(
            f"pastDays must be between 0 and {MAX_CHART_DAYS} days", field="pastDays"
        )


def build_chart(
    past_days: int,
    day_grouping: int,
    transactions: Iterable[Transaction],
    seeded_projects: Iterable[Project],
    now: datetime | None = None,
) -> Chart:
    """Build a stacked line chart of transaction amounts per project.

    Args:
        past_days: Size of the charted window, in days back from `now`.
        day_grouping: Width of each bucket in days.
        transactions: Transactions with a project grant, newest first.
        seeded_projects: Projects that always get a series, even with no sales.
        now: End of the newest bucket. Defaults to the current time.

    Returns:
        Chart with chronological labels and one equally long series per project.

    Raises:
        ValidationError: If `day_grouping` or `past_days` is outside its allowed range.
    """
    validate_chart_window(past_days, day_grouping)

    now = as_utc(now) if now is not None else datetime.now(UTC)
    width = timedelta(days=day_grouping)
    window_start = now - timedelta(days=past_days)

    names: dict[str, str] = {}
    buckets: dict[str, list[Decimal]] = {}
    for project in seeded_projects:
        names[project.slug] = project.name
        buckets[project.slug] = []

    labels: list[str] = []
    total = Decimal("0")

    period_start = now - width
    period_end = now
    bucket_open = False

    if past_days > 0:
        for transaction in transactions:
            timestamp = as_utc(transaction.timestamp)
            if timestamp < window_start:
                break

            if not bucket_open:
                _open_bucket(buckets)
                bucket_open = True

            while timestamp < period_start:
                labels.append(get_label_for(period_start, period_end, day_grouping))
                period_start -= width
                period_end -= width
                _open_bucket(buckets)

            data = buckets.get(transaction.project_grant_slug or "")
            if data is None:
                continue

            amount = Decimal(str(transaction.amount))
            data[-1] += amount
            total += amount

    if bucket_open:
        labels.append(get_label_for(period_start, period_end, day_grouping))

    labels.reverse()
    series = [
        Series(
            name=names[slug],
            type=CHART_SERIES_TYPE,
            stack=CHART_SERIES_STACK,
            data=[float(value.quantize(CENTS, rounding=ROUND_HALF_UP)) for value in reversed(data)],
        )
        for slug, data in buckets.items()
    ]

    return Chart(
        x_axis=Axis(type="category", labels=labels, boundary_gap=False),
        y_axis=Axis(type="value"),
        series=series,
        total_value=format_currency(total),
    )


def _open_bucket(buckets: dict[str, list[Decimal]]) -> None:
    for data in buckets.values():
        data.append(Decimal("0"))
