"""Dispatcher 모델 패키지"""

from dispatcher.model.dispatcher import DispatcherConfig, HttpConfig, ScheduleEntry
from dispatcher.model.operation import ApiEnvelope, EndpointConfig, Operation
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
from dispatcher.model.outcome import (
    ApplicationError,
    ConfigNotFoundOutcome,
    ConfigStoreUnavailableOutcome,
    MalformedResponse,
    Outcome,
    OutcomeKind,
    ProtocolError,
    Success,
    TransportError,
    UnknownSchedule,
    is_success,
    outcome_to_dict,
)

__all__ = [
    'DispatcherConfig',
    'HttpConfig',
    'ScheduleEntry',
    'ApiEnvelope',
    'EndpointConfig',
    'Operation',
    'ConfigError',
    'ConfigNotFound',
    'ConfigStoreUnavailable',
    'HttpFailure',
    'InvokeResult',
    'ParseFailure',
    'Parsed',
    'TransportFailure',
    'ApplicationError',
    'ConfigNotFoundOutcome',
    'ConfigStoreUnavailableOutcome',
    'MalformedResponse',
    'Outcome',
    'OutcomeKind',
    'ProtocolError',
    'Success',
    'TransportError',
    'UnknownSchedule',
    'is_success',
    'outcome_to_dict',
]
