"""
Tests for the admin transactions chart endpoint.
"""

from datetime import UTC, datetime, timedelta

import pytest

from tests.utils.factories import create_project_factory, create_transaction_factory
from tests.utils.helpers import set_access_token_cookie

CHART_URL = "/api/v1/charts/transactions"


class TestTransactionsChartAccess:
    """Only admins can read revenue charts."""

    @pytest.mark.asyncio
    async def test_requires_authentication(self, test_client):
        response = await test_client.get(CHART_URL)

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    @pytest.mark.asyncio
    async def test_rejects_invalid_token(self, test_client):
        set_access_token_cookie(test_client, "not-a-jwt")

        response = await test_client.get(CHART_URL)

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_rejects_non_admin(self, test_client, test_user_token):
        set_access_token_cookie(test_client, test_user_token)

        response = await test_client.get(CHART_URL)

        assert response.status_code == 403
        assert response.json()["error"]["code"] == "FORBIDDEN"


class TestTransactionsChart:
    """Tests for GET /charts/transactions."""

    @pytest.mark.asyncio
    async def test_returns_chart(self, test_client, test_admin_token, db_session):
        huskhomes = create_project_factory(
            db_session, slug="huskhomes", name="HuskHomes", restricted=True
        )
        now = datetime.now(UTC)
        create_transaction_factory(db_session, huskhomes, "10.00", now - timedelta(days=1))
        create_transaction_factory(db_session, huskhomes, "20.00", now - timedelta(days=10))

        set_access_token_cookie(test_client, test_admin_token)

        response = await test_client.get(CHART_URL, params={"pastDays": 14, "dayGrouping": 7})

        assert response.status_code == 200
        data = response.json()
        assert len(data["xAxis"]["labels"]) == 2
        assert all(label.startswith("WB ") for label in data["xAxis"]["labels"])
        assert data["xAxis"]["boundaryGap"] is False
        assert data["yAxis"]["type"] == "value"
        assert data["series"] == [
            {"name": "HuskHomes", "type": "line", "stack": "Total", "data": [20.0, 10.0]}
        ]
        assert data["totalValue"] == "£30.00"

    @pytest.mark.asyncio
    async def test_defaults_to_thirty_days_by_week(self, test_client, test_admin_token, db_session):
        create_project_factory(db_session, slug="huskhomes", restricted=True)

        set_access_token_cookie(test_client, test_admin_token)

        response = await test_client.get(CHART_URL)

        assert response.status_code == 200
        assert response.json()["xAxis"]["labels"] == []

    @pytest.mark.asyncio
    async def test_rejects_zero_grouping(self, test_client, test_admin_token):
        set_access_token_cookie(test_client, test_admin_token)

        response = await test_client.get(CHART_URL, params={"dayGrouping": 0})

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("param", ["pastDays", "dayGrouping"])
    async def test_rejects_oversized_window(self, test_client, test_admin_token, param):
        set_access_token_cookie(test_client, test_admin_token)

        response = await test_client.get(CHART_URL, params={param: 1_000_000})

        assert response.status_code == 422
