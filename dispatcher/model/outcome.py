"""
디스패치 결과(Outcome) 정의

트리거 1회당 정확히 하나의 Outcome이 만들어지고, 로그로 남긴 뒤 버려집니다.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, ClassVar, Union


class OutcomeKind(str, Enum):
    """결과 종류 (닫힌 집합)"""
    SUCCESS = "success"
    APPLICATION_ERROR = "application_error"
    PROTOCOL_ERROR = "protocol_error"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_RESPONSE = "malformed_response"
    CONFIG_NOT_FOUND = "config_not_found"
    CONFIG_STORE_UNAVAILABLE = "config_store_unavailable"


@dataclass(frozen=True)
class Success:
    kind: ClassVar[OutcomeKind] = OutcomeKind.SUCCESS
    message: str | None = None


@dataclass(frozen=True)
class ApplicationError:
    kind: ClassVar[OutcomeKind] = OutcomeKind.APPLICATION_ERROR
    code: int
    message: str | None = None


@dataclass(frozen=True)
class ProtocolError:
    kind: ClassVar[OutcomeKind] = OutcomeKind.PROTOCOL_ERROR
    status: int
    body: str


@dataclass(frozen=True)
class TransportError:
    kind: ClassVar[OutcomeKind] = OutcomeKind.TRANSPORT_ERROR
    reason: str = ""


@dataclass(frozen=True)
class MalformedResponse:
    kind: ClassVar[OutcomeKind] = OutcomeKind.MALFORMED_RESPONSE
    reason: str = ""


@dataclass(frozen=True)
class ConfigNotFoundOutcome:
    kind: ClassVar[OutcomeKind] = OutcomeKind.CONFIG_NOT_FOUND
    operation: str


@dataclass(frozen=True)
class ConfigStoreUnavailableOutcome:
    kind: ClassVar[OutcomeKind] = OutcomeKind.CONFIG_STORE_UNAVAILABLE
    operation: str
    reason: str = ""


Outcome = Union[
    Success,
    ApplicationError,
    ProtocolError,
    TransportError,
    MalformedResponse,
    ConfigNotFoundOutcome,
    ConfigStoreUnavailableOutcome,
]


@dataclass(frozen=True)
class UnknownSchedule:
    """매칭되는 오퍼레이션이 없는 트리거 (no-op, Outcome 아님)"""
    schedule_expression: str


def is_success(outcome: Outcome) -> bool:
    return outcome.kind is OutcomeKind.SUCCESS


def outcome_to_dict(outcome: Outcome) -> dict[str, Any]:
    """로그/API 응답용 dict 변환"""
    return {"kind": outcome.kind.value, **asdict(outcome)}
