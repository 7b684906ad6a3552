"""
결과 분류기

전송/HTTP 계층을 먼저 보고, 그 다음 봉투의 code로 애플리케이션 성공 여부를 판단합니다.
2xx 응답이라도 code != 0 이면 ApplicationError 입니다.
"""

from dispatcher.model.outcome import (
    ApplicationError,
    ConfigNotFoundOutcome,
    ConfigStoreUnavailableOutcome,
    MalformedResponse,
    Outcome,
    ProtocolError,
    Success,
    TransportError,
)
from dispatcher.model.result import (
    ConfigError,
    ConfigNotFound,
    ConfigStoreUnavailable,
    HttpFailure,
    InvokeResult,
    ParseFailure,
    Parsed,
    TransportFailure,
)


def classify(result: InvokeResult) -> Outcome:
    """InvokeResult -> Outcome (부수효과 없음)"""
    if isinstance(result, TransportFailure):
        return TransportError(reason=result.reason)

    if isinstance(result, HttpFailure):
        return ProtocolError(status=result.status_code, body=result.body)

    if isinstance(result, ParseFailure):
        return MalformedResponse(reason=result.reason)

    if isinstance(result, Parsed):
        envelope = result.envelope
        if envelope.code == 0:
            return Success(message=envelope.message)
        return ApplicationError(code=envelope.code, message=envelope.message)

    raise TypeError(f"Unknown invoke result: {result!r}")


def classify_config_error(error: ConfigError) -> Outcome:
    """ConfigError -> Outcome (1:1 매핑)"""
    if isinstance(error, ConfigNotFound):
        return ConfigNotFoundOutcome(operation=error.operation)

    if isinstance(error, ConfigStoreUnavailable):
        return ConfigStoreUnavailableOutcome(operation=error.operation, reason=error.reason)

    raise TypeError(f"Unknown config error: {error!r}")
