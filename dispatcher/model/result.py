"""
파이프라인 단계별 결과 타입

설정 조회(ConfigError)와 엔드포인트 호출(InvokeResult) 결과를
예외 대신 값으로 표현합니다.
"""

from dataclasses import dataclass
from typing import Union

from dispatcher.model.operation import ApiEnvelope

HTTP_BODY_PLACEHOLDER = "N/A"


# ============================================
# Config Resolver 결과
# ============================================

@dataclass(frozen=True)
class ConfigNotFound:
    """저장소에 키가 없거나 값이 빈 문자열"""
    operation: str


@dataclass(frozen=True)
class ConfigStoreUnavailable:
    """저장소 읽기 자체가 실패"""
    operation: str
    reason: str


ConfigError = Union[ConfigNotFound, ConfigStoreUnavailable]


# ============================================
# Endpoint Invoker 결과
# ============================================

@dataclass(frozen=True)
class Parsed:
    """2xx 응답 + 봉투 파싱 성공"""
    envelope: ApiEnvelope


@dataclass(frozen=True)
class HttpFailure:
    """2xx가 아닌 HTTP 상태"""
    status_code: int
    body: str = HTTP_BODY_PLACEHOLDER


@dataclass(frozen=True)
class TransportFailure:
    """DNS, 연결 거부, 타임아웃, TLS 등 전송 계층 실패"""
    reason: str


@dataclass(frozen=True)
class ParseFailure:
    """2xx 응답이지만 본문이 봉투 형태가 아님"""
    reason: str


InvokeResult = Union[Parsed, HttpFailure, TransportFailure, ParseFailure]
