"""
Key-Value 저장소 테스트

테스트 항목:
1. SQLite 저장소 조회 (값 있음/없음)
2. 저장소 파일이 없으면 StoreUnavailableError, 이후 파일이 생기면 재연결
3. 조회마다 새로 읽음 (캐시 없음)
4. 읽기 전용 연결
5. create_store / MemoryKVStore

실행: python -m pytest test/store_test.py -v
"""

import sqlite3

import aiosqlite
import pytest
import pytest_asyncio

from store import MemoryKVStore, SqliteKVStore, StoreConfig, StoreUnavailableError, create_store
from store.sqlite import load_queries


async def seed(db_path, values: dict[str, str]) -> None:
    queries = load_queries()
    async with aiosqlite.connect(db_path) as conn:
        await queries.create_schema(conn)
        for key, value in values.items():
            await queries.put_value(conn, key=key, value=value)
        await conn.commit()


@pytest_asyncio.fixture
async def db_path(tmp_path):
    path = tmp_path / "kv.db"
    await seed(path, {"dp_log_erase": "https://api.example/erase", "dp_empty": ""})
    return path


@pytest_asyncio.fixture
async def sqlite_store(db_path):
    kv = SqliteKVStore(str(db_path))
    await kv.connect()
    yield kv
    await kv.disconnect()


class TestQueries:

    def test_kv_sql_loads_with_declared_parameters(self):
        queries = load_queries()

        for name in ("create_schema", "get_value", "put_value", "ping"):
            assert hasattr(queries, name)

    def test_query_headers_declare_parameter_lists(self):
        from store.sqlite import SQL_PATH

        headers = [
            line.split("name:", 1)[1].strip()
            for line in SQL_PATH.read_text(encoding="utf-8").splitlines()
            if line.startswith("-- name:")
        ]

        assert "get_value(key)^" in headers
        assert "put_value(key, value)!" in headers
        assert "ping()^" in headers


class TestSqliteKVStore:

    @pytest.mark.asyncio
    async def test_get_existing_key(self, sqlite_store):
        assert await sqlite_store.get("dp_log_erase") == "https://api.example/erase"

    @pytest.mark.asyncio
    async def test_get_missing_key(self, sqlite_store):
        assert await sqlite_store.get("dp_pending_task_notify") is None

    @pytest.mark.asyncio
    async def test_empty_value_returned_as_is(self, sqlite_store):
        assert await sqlite_store.get("dp_empty") == ""

    @pytest.mark.asyncio
    async def test_reads_are_not_cached(self, sqlite_store, db_path):
        assert await sqlite_store.get("dp_log_erase") == "https://api.example/erase"

        await seed(db_path, {"dp_log_erase": "https://api.example/erase-v2"})

        assert await sqlite_store.get("dp_log_erase") == "https://api.example/erase-v2"

    @pytest.mark.asyncio
    async def test_connection_is_read_only(self, sqlite_store):
        connection = await sqlite_store._ensure_connection()
        with pytest.raises(sqlite3.OperationalError):
            await connection.execute("DELETE FROM kv_entries")

    @pytest.mark.asyncio
    async def test_ping(self, sqlite_store):
        assert await sqlite_store.ping() is True


class TestUnavailableStore:

    @pytest.mark.asyncio
    async def test_missing_file_raises_unavailable(self, tmp_path):
        kv = SqliteKVStore(str(tmp_path / "missing.db"))
        await kv.connect()  # 기동 시에는 실패해도 예외 없음

        with pytest.raises(StoreUnavailableError):
            await kv.get("dp_log_erase")
        assert await kv.ping() is False

    @pytest.mark.asyncio
    async def test_reconnects_when_file_appears(self, tmp_path):
        path = tmp_path / "late.db"
        kv = SqliteKVStore(str(path))

        with pytest.raises(StoreUnavailableError):
            await kv.get("dp_log_erase")

        await seed(path, {"dp_log_erase": "https://api.example/erase"})
        try:
            assert await kv.get("dp_log_erase") == "https://api.example/erase"
        finally:
            await kv.disconnect()

    @pytest.mark.asyncio
    async def test_missing_table_raises_unavailable(self, tmp_path):
        path = tmp_path / "empty.db"
        async with aiosqlite.connect(path) as conn:
            await conn.execute("CREATE TABLE other (id INTEGER)")
            await conn.commit()

        kv = SqliteKVStore(str(path))
        try:
            with pytest.raises(StoreUnavailableError):
                await kv.get("dp_log_erase")
        finally:
            await kv.disconnect()


class TestCreateStore:

    @pytest.mark.asyncio
    async def test_memory_store(self):
        kv = create_store(StoreConfig(type="memory", values={"dp_log_erase": "https://x"}))
        assert isinstance(kv, MemoryKVStore)
        assert await kv.get("dp_log_erase") == "https://x"
        assert await kv.get("unknown") is None
        assert await kv.ping() is True

    def test_sqlite_store(self, tmp_path):
        kv = create_store(StoreConfig(type="sqlite", path=str(tmp_path / "kv.db")))
        assert isinstance(kv, SqliteKVStore)
        assert kv.path == tmp_path / "kv.db"

    def test_sqlite_store_requires_path(self):
        with pytest.raises(ValueError):
            StoreConfig(type="sqlite", path=None)
