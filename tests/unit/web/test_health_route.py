"""
Health API tests
"""

from pathlib import Path

import httpx
import pytest

from core.config.loader import get_settings
from web.app import create_app


class TestHealth:
    """GET /api/health"""

    @pytest.mark.asyncio
    async def test_ok(self, client: httpx.AsyncClient) -> None:
        await client.post(
            "/api/expenses",
            json={
                "partner": "Alex",
                "description": "Sofa",
                "amount": "899",
                "date": "2024-04-01",
                "category": "Möbel",
            },
        )

        response = await client.get("/api/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["database"] == "connected"
        assert body["port"] == 3999
        assert body["expenses_count"] == 1
        assert body["uptime"] >= 0
        assert body["timestamp"]

    @pytest.mark.asyncio
    async def test_database_unreachable(self, temp_settings_file: Path) -> None:
        """No database file: 500 with status ERROR"""
        get_settings(temp_settings_file)
        app = create_app()

        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/health")

        assert response.status_code == 500
        body = response.json()
        assert body["status"] == "ERROR"
        assert body["message"] == "Database error"
        assert body["error"]

    @pytest.mark.asyncio
    async def test_list_without_database_is_500(self, temp_settings_file: Path) -> None:
        get_settings(temp_settings_file)
        app = create_app()

        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/expenses")

        assert response.status_code == 500
        assert response.json() == {"error": "Database unavailable"}
