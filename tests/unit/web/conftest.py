"""
Web API test fixtures

The app is built against a temporary settings.yaml. ASGITransport does
not run the lifespan, so the schema is created here.
"""

from pathlib import Path
from typing import AsyncGenerator

import httpx
import pytest_asyncio
from fastapi import FastAPI

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import get_settings
from web.app import create_app


@pytest_asyncio.fixture
async def app(temp_settings_file: Path) -> FastAPI:
    settings = get_settings(temp_settings_file)
    async with SQLiteAdapter(settings.db_path) as db:
        await init_schema(db)
    return create_app()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
