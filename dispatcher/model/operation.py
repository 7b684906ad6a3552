"""
오퍼레이션 및 엔드포인트 모델 정의
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator


@dataclass(frozen=True)
class Operation:
    """
    유지보수 오퍼레이션

    name은 설정 저장소의 key로도 사용되며,
    schedule_expression은 기동 시점에 고정됩니다.
    """
    name: str
    schedule_expression: str
    description: str | None = None


@dataclass(frozen=True)
class EndpointConfig:
    """조회된 호출 대상 (매 트리거마다 새로 조회, 캐시하지 않음)"""
    url: str


class ApiEnvelope(BaseModel):
    """원격 엔드포인트 응답 봉투 ({"code": 0, "data": ...})"""
    model_config = ConfigDict(extra="ignore", frozen=True)

    code: StrictInt = Field(description="0이면 성공, 그 외는 애플리케이션 오류")
    data: Any = None
    message: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def _stringify_message(cls, value: Any) -> str | None:
        # message는 참고용이므로 타입이 달라도 봉투 파싱을 실패시키지 않음
        if value is None or isinstance(value, str):
            return value
        return str(value)
