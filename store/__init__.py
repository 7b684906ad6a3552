"""Key-Value 설정 저장소 패키지"""
from store.base import BaseKVStore
from store.memory import MemoryKVStore
from store.sqlite import SqliteKVStore
from store.model import StoreConfig
from store.exception import StoreError, StoreUnavailableError

__all__ = [
    "BaseKVStore",
    "MemoryKVStore",
    "SqliteKVStore",
    "StoreConfig",
    "StoreError",
    "StoreUnavailableError",
    "create_store",
]


def create_store(config: StoreConfig) -> BaseKVStore:
    """설정에 맞는 저장소 인스턴스 생성"""
    if config.type == "sqlite":
        return SqliteKVStore(config.path)
    return MemoryKVStore(config.values)
