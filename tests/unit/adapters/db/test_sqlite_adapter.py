"""
SQLite adapter tests

SQLiteAdapter and related functions.
"""

import sqlite3
from pathlib import Path

import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import (
    SQLiteAdapter,
    create_connection,
    init_schema,
)


class TestCreateConnection:
    """create_connection tests"""

    @pytest.mark.asyncio
    async def test_create_connection(self, tmp_path: Path) -> None:
        db_path = tmp_path / "test.db"

        conn = await create_connection(db_path)

        assert conn is not None

        # WAL mode
        cursor = await conn.execute("PRAGMA journal_mode")
        row = await cursor.fetchone()
        assert row[0].upper() == "WAL"

        await conn.close()

    @pytest.mark.asyncio
    async def test_creates_parent_directory(self, tmp_path: Path) -> None:
        db_path = tmp_path / "subdir" / "test.db"

        conn = await create_connection(db_path)

        assert db_path.parent.exists()

        await conn.close()

    @pytest.mark.asyncio
    async def test_readonly_missing_file_fails(self, tmp_path: Path) -> None:
        """Read-only connections never create the file"""
        db_path = tmp_path / "missing.db"

        with pytest.raises(sqlite3.Error):
            await create_connection(db_path, readonly=True)

        assert not db_path.exists()


class TestSQLiteAdapter:
    """SQLiteAdapter tests"""

    @pytest_asyncio.fixture
    async def adapter(self, tmp_path: Path) -> SQLiteAdapter:
        db_path = tmp_path / "test.db"
        adapter = SQLiteAdapter(db_path)
        await adapter.connect()
        yield adapter
        await adapter.close()

    @pytest.mark.asyncio
    async def test_connect_and_close(self, tmp_path: Path) -> None:
        adapter = SQLiteAdapter(tmp_path / "test.db")

        assert adapter.is_connected is False

        await adapter.connect()
        assert adapter.is_connected is True

        await adapter.close()
        assert adapter.is_connected is False

    @pytest.mark.asyncio
    async def test_execute(self, adapter: SQLiteAdapter) -> None:
        await adapter.execute("CREATE TABLE test (id INTEGER PRIMARY KEY, name TEXT)")
        await adapter.execute("INSERT INTO test (name) VALUES (?)", ("Möbel",))
        await adapter.commit()

        row = await adapter.fetchone("SELECT name FROM test WHERE id = 1")
        assert row[0] == "Möbel"

    @pytest.mark.asyncio
    async def test_fetchall(self, adapter: SQLiteAdapter) -> None:
        await adapter.execute("CREATE TABLE items (value TEXT)")
        for value in ("C", "A", "B"):
            await adapter.execute("INSERT INTO items (value) VALUES (?)", (value,))
        await adapter.commit()

        rows = await adapter.fetchall("SELECT value FROM items ORDER BY value")

        assert [r[0] for r in rows] == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_execute_not_connected(self, tmp_path: Path) -> None:
        adapter = SQLiteAdapter(tmp_path / "test.db")

        with pytest.raises(RuntimeError, match="Not connected"):
            await adapter.execute("SELECT 1")

    @pytest.mark.asyncio
    async def test_transaction_commit(self, adapter: SQLiteAdapter) -> None:
        await adapter.execute("CREATE TABLE t (v INTEGER)")
        await adapter.commit()

        async with adapter.transaction() as conn:
            await conn.execute("INSERT INTO t (v) VALUES (1)")

        row = await adapter.fetchone("SELECT COUNT(*) FROM t")
        assert row[0] == 1

    @pytest.mark.asyncio
    async def test_transaction_rollback(self, adapter: SQLiteAdapter) -> None:
        """Exception inside the block rolls back"""
        await adapter.execute("CREATE TABLE t (v INTEGER)")
        await adapter.commit()

        with pytest.raises(ValueError):
            async with adapter.transaction() as conn:
                await conn.execute("INSERT INTO t (v) VALUES (1)")
                raise ValueError("boom")

        row = await adapter.fetchone("SELECT COUNT(*) FROM t")
        assert row[0] == 0

    @pytest.mark.asyncio
    async def test_context_manager(self, tmp_path: Path) -> None:
        async with SQLiteAdapter(tmp_path / "test.db") as adapter:
            assert adapter.is_connected is True

        assert adapter.is_connected is False


class TestInitSchema:
    """init_schema tests"""

    @pytest.mark.asyncio
    async def test_creates_expenses_table(self, tmp_path: Path) -> None:
        async with SQLiteAdapter(tmp_path / "test.db") as adapter:
            await init_schema(adapter)

            assert await adapter.table_exists("expenses") is True
            assert await adapter.table_exists("nonexistent") is False

    @pytest.mark.asyncio
    async def test_idempotent(self, tmp_path: Path) -> None:
        """Running twice keeps existing rows"""
        async with SQLiteAdapter(tmp_path / "test.db") as adapter:
            await init_schema(adapter)
            await adapter.execute(
                "INSERT INTO expenses (id, partner, description, amount, date, category) "
                "VALUES ('1', 'Sebi', 'Desk', '10', '2024-01-01', 'Möbel')"
            )
            await adapter.commit()

            await init_schema(adapter)

            row = await adapter.fetchone("SELECT COUNT(*) FROM expenses")
            assert row[0] == 1

    @pytest.mark.asyncio
    async def test_created_at_default(self, tmp_path: Path) -> None:
        async with SQLiteAdapter(tmp_path / "test.db") as adapter:
            await init_schema(adapter)
            await adapter.execute(
                "INSERT INTO expenses (id, partner, description, amount, date, category) "
                "VALUES ('1', 'Sebi', 'Desk', '10', '2024-01-01', 'Möbel')"
            )
            await adapter.commit()

            row = await adapter.fetchone("SELECT created_at FROM expenses")
            assert row[0].endswith("+00:00")
