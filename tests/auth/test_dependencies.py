"""
Tests for the admin access dependencies.
"""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from app.auth.dependencies import get_current_principal, require_admin
from app.core.config import settings
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.core.security import create_access_token


class TestGetCurrentPrincipal:
    @pytest.mark.asyncio
    async def test_returns_claims_of_valid_token(self):
        token = create_access_token({"sub": "admin-1", "role": "admin"})

        principal = await get_current_principal(token)

        assert principal["sub"] == "admin-1"
        assert principal["type"] == "access"

    @pytest.mark.asyncio
    async def test_rejects_expired_token(self):
        token = jwt.encode(
            {"sub": "admin-1", "type": "access", "exp": datetime.now(UTC) - timedelta(minutes=1)},
            settings.SECRET_KEY,
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(UnauthorizedError):
            await get_current_principal(token)

    @pytest.mark.asyncio
    async def test_rejects_non_access_token(self):
        token = jwt.encode(
            {"sub": "admin-1", "type": "refresh"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM
        )

        with pytest.raises(UnauthorizedError):
            await get_current_principal(token)

    @pytest.mark.asyncio
    async def test_rejects_token_signed_with_other_key(self):
        token = jwt.encode({"sub": "admin-1", "type": "access"}, "other-key", algorithm="HS256")

        with pytest.raises(UnauthorizedError):
            await get_current_principal(token)


class TestRequireAdmin:
    @pytest.mark.asyncio
    async def test_allows_admin(self):
        principal = {"sub": "admin-1", "role": "admin"}

        assert await require_admin(principal) == principal

    @pytest.mark.asyncio
    async def test_forbids_other_roles(self):
        with pytest.raises(ForbiddenError):
            await require_admin({"sub": "user-1", "role": "user"})
