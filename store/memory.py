"""메모리 기반 Key-Value 저장소 (로컬 개발/테스트용)"""
from collections.abc import Mapping

from store.base import BaseKVStore


class MemoryKVStore(BaseKVStore):
    """설정 파일의 store.values 매핑을 그대로 제공하는 저장소"""

    def __init__(self, values: Mapping[str, str] | None = None):
        self._values = dict(values or {})

    async def get(self, key: str) -> str | None:
        return self._values.get(key)
