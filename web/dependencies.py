"""
Dependency injection

Dependency management with FastAPI's Depends.
"""

import logging
import sqlite3
from typing import AsyncGenerator

from fastapi import Depends

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.config.loader import Settings, get_settings
from core.errors import StorageError
from web.services.expense_service import ExpenseService

logger = logging.getLogger(__name__)


def get_app_settings() -> Settings:
    """Application settings"""
    return get_settings()


async def _open(settings: Settings, readonly: bool) -> SQLiteAdapter:
    db = SQLiteAdapter(settings.db_path, readonly=readonly)
    try:
        await db.connect()
    except (sqlite3.Error, OSError) as e:
        logger.error(
            "Database unavailable",
            extra={"db_path": str(settings.db_path), "error": str(e)},
        )
        raise StorageError("Database unavailable") from e
    return db


async def get_db(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[SQLiteAdapter, None]:
    """DB session (read-only)"""
    db = await _open(settings, readonly=True)
    try:
        yield db
    finally:
        await db.close()


async def get_db_write(
    settings: Settings = Depends(get_app_settings),
) -> AsyncGenerator[SQLiteAdapter, None]:
    """DB session (writable, create/delete)"""
    db = await _open(settings, readonly=False)
    try:
        yield db
    finally:
        await db.close()


def get_expense_service(
    db: SQLiteAdapter = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> ExpenseService:
    """Read-side expense service"""
    return ExpenseService(db, settings.partners)


def get_expense_service_write(
    db: SQLiteAdapter = Depends(get_db_write),
    settings: Settings = Depends(get_app_settings),
) -> ExpenseService:
    """Write-side expense service"""
    return ExpenseService(db, settings.partners)
