"""Dispatcher 모듈 - 크론 트리거 -> 유지보수 엔드포인트 호출 파이프라인"""

from dispatcher.main import Dispatcher
from dispatcher.router import CronRouter
from dispatcher.resolver import ConfigResolver
from dispatcher.invoker import EndpointInvoker
from dispatcher.classifier import classify, classify_config_error
from dispatcher.schedule import ScheduleTable
from dispatcher.model.dispatcher import DispatcherConfig, HttpConfig, ScheduleEntry
from dispatcher.exception import (
    DispatcherError,
    ConfigurationError,
    CronParseError,
    DuplicateScheduleError,
)

__all__ = [
    "Dispatcher",
    "CronRouter",
    "ConfigResolver",
    "EndpointInvoker",
    "classify",
    "classify_config_error",
    "ScheduleTable",
    "DispatcherConfig",
    "HttpConfig",
    "ScheduleEntry",
    "DispatcherError",
    "ConfigurationError",
    "CronParseError",
    "DuplicateScheduleError",
]
