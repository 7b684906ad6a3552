"""Key-Value 저장소 기본 인터페이스"""
from abc import ABC, abstractmethod


class BaseKVStore(ABC):
    """
    Key-Value 저장소 기본 클래스

    오퍼레이션 이름(key)으로 엔드포인트 URL(value)을 조회합니다.
    디스패처 입장에서는 읽기 전용입니다.
    """

    async def connect(self) -> None:
        """저장소 연결"""
        return None

    async def disconnect(self) -> None:
        """저장소 연결 해제"""
        return None

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """
        값 조회

        Args:
            key: 조회할 키

        Returns:
            저장된 문자열, 없으면 None

        Raises:
            StoreUnavailableError: 저장소 자체를 읽을 수 없는 경우
        """
        ...

    async def ping(self) -> bool:
        """저장소 상태 확인 (readiness)"""
        return True
