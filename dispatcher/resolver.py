"""설정 저장소에서 오퍼레이션의 엔드포인트 URL 조회"""

import logging

from dispatcher.model.operation import EndpointConfig
from dispatcher.model.result import ConfigError, ConfigNotFound, ConfigStoreUnavailable
from store.base import BaseKVStore
from store.exception import StoreUnavailableError

logger = logging.getLogger(__name__)


class ConfigResolver:
    """오퍼레이션 이름 -> EndpointConfig (매번 새로 읽음, 재시도/캐시 없음)"""

    def __init__(self, store: BaseKVStore):
        self._store = store

    async def resolve(self, operation_name: str) -> EndpointConfig | ConfigError:
        try:
            value = await self._store.get(operation_name)
        except StoreUnavailableError as e:
            logger.debug(f"Store read failed: operation={operation_name}, error={e}")
            return ConfigStoreUnavailable(operation=operation_name, reason=str(e))

        if not value:
            return ConfigNotFound(operation=operation_name)

        # URL 형식은 검증하지 않음 (잘못된 URL은 호출 단계에서 전송 실패로 분류)
        return EndpointConfig(url=value)
