"""
SQLite 기반 Key-Value 저장소

aiosqlite로 저장소 파일을 읽기 전용(mode=ro)으로 열고
aiosql로 관리되는 쿼리(store/sql/kv.sql)로 값을 조회합니다.
"""

import asyncio
import logging
import sqlite3
from pathlib import Path

import aiosql
import aiosqlite

from store.base import BaseKVStore
from store.exception import StoreUnavailableError

logger = logging.getLogger(__name__)

SQL_PATH = Path(__file__).parent / "sql" / "kv.sql"


def load_queries():
    """kv.sql 쿼리 로드"""
    return aiosql.from_path(str(SQL_PATH), "aiosqlite")


class SqliteKVStore(BaseKVStore):
    """
    SQLite 파일 저장소

    연결은 프로세스 전체에서 공유되며, 연결에 실패하면 다음 조회 시 다시 시도합니다.
    값은 캐시하지 않고 매 조회마다 새로 읽습니다.
    """

    def __init__(self, path: str):
        self._path = Path(path)
        self._queries = load_queries()
        self._connection: aiosqlite.Connection | None = None
        self._connect_lock = asyncio.Lock()

    @property
    def path(self) -> Path:
        return self._path

    async def connect(self) -> None:
        """저장소 연결 (실패해도 예외를 던지지 않고 조회 시 재시도)"""
        try:
            await self._ensure_connection()
        except StoreUnavailableError as e:
            logger.warning(f"Key-value store not available yet: {e}")

    async def disconnect(self) -> None:
        if self._connection is not None:
            await self._connection.close()
            self._connection = None
            logger.info(f"Key-value store closed: path={self._path}")

    async def get(self, key: str) -> str | None:
        try:
            connection = await self._ensure_connection()
            row = await self._queries.get_value(connection, key=key)
        except sqlite3.Error as e:
            raise StoreUnavailableError(f"Failed to read key '{key}': {e}") from e

        if row is None:
            return None
        return row["value"]

    async def ping(self) -> bool:
        try:
            connection = await self._ensure_connection()
            await self._queries.ping(connection)
            return True
        except (StoreUnavailableError, sqlite3.Error) as e:
            logger.debug(f"Key-value store ping failed: {e}")
            return False

    async def _ensure_connection(self) -> aiosqlite.Connection:
        """읽기 전용 연결 반환 (없으면 생성)"""
        if self._connection is not None:
            return self._connection

        async with self._connect_lock:
            if self._connection is None:
                uri = f"{self._path.resolve().as_uri()}?mode=ro"
                try:
                    connection = await aiosqlite.connect(uri, uri=True)
                except sqlite3.Error as e:
                    raise StoreUnavailableError(
                        f"Cannot open key-value store '{self._path}': {e}"
                    ) from e
                connection.row_factory = aiosqlite.Row
                self._connection = connection
                logger.info(f"Key-value store opened (read-only): path={self._path}")

        return self._connection
