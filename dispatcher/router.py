"""
크론 라우터

발화된 트리거의 크론 표현식을 스케줄 테이블과 비교하여 오퍼레이션을 찾고,
설정 조회 -> 엔드포인트 호출 -> 결과 분류 순서로 파이프라인을 실행합니다.
"""

import logging

from dispatcher.classifier import classify, classify_config_error
from dispatcher.invoker import EndpointInvoker
from dispatcher.model.operation import EndpointConfig, Operation
from dispatcher.model.outcome import Outcome, UnknownSchedule, is_success, outcome_to_dict
from dispatcher.resolver import ConfigResolver
from dispatcher.schedule import ScheduleTable

logger = logging.getLogger(__name__)


class CronRouter:
    """
    크론 표현식 -> 오퍼레이션 디스패처

    파이프라인 실행 간 공유하는 가변 상태가 없으므로
    여러 트리거가 동시에 들어와도 잠금이 필요 없습니다.
    """

    def __init__(self, table: ScheduleTable, resolver: ConfigResolver, invoker: EndpointInvoker):
        self._table = table
        self._resolver = resolver
        self._invoker = invoker

    @property
    def table(self) -> ScheduleTable:
        return self._table

    async def on_trigger(self, schedule_expression: str) -> Outcome | UnknownSchedule:
        """
        트리거 처리

        Args:
            schedule_expression: 트리거를 발생시킨 크론 표현식

        Returns:
            매칭 시 Outcome, 매칭되지 않으면 UnknownSchedule (설정 조회/HTTP 호출 없음)
        """
        operation = self._table.match(schedule_expression)
        if operation is None:
            logger.info(
                f"Unknown schedule: '{schedule_expression}'",
                extra={"event": "unknown_schedule", "schedule": schedule_expression},
            )
            return UnknownSchedule(schedule_expression=schedule_expression)

        outcome = await self.run(operation)
        self._report(operation, outcome)
        return outcome

    async def run(self, operation: Operation) -> Outcome:
        """오퍼레이션 1회 실행 (설정 조회 -> 호출 -> 분류)"""
        resolved = await self._resolver.resolve(operation.name)
        if not isinstance(resolved, EndpointConfig):
            return classify_config_error(resolved)

        logger.debug(f"Invoking endpoint: operation={operation.name}, url={resolved.url}")
        result = await self._invoker.invoke(resolved.url)
        return classify(result)

    @staticmethod
    def _report(operation: Operation, outcome: Outcome) -> None:
        """디스패치 결과 1건당 구조화 로그 1줄"""
        fields = outcome_to_dict(outcome)
        extra = {
            "event": "dispatch_outcome",
            "operation": operation.name,
            "schedule": operation.schedule_expression,
            **{f"outcome_{key}" if key in _RESERVED_LOG_KEYS else key: value
               for key, value in fields.items()},
        }

        if is_success(outcome):
            logger.info(f"Operation succeeded: operation={operation.name}", extra=extra)
        else:
            logger.error(
                f"Operation failed: operation={operation.name}, kind={fields['kind']}, "
                f"detail={_detail(fields)}",
                extra=extra,
            )


# LogRecord 속성과 이름이 겹치면 logging이 KeyError를 던짐
_RESERVED_LOG_KEYS = frozenset({"message", "msg", "args", "name", "module", "filename", "levelname"})


def _detail(fields: dict) -> str:
    return ", ".join(f"{key}={value!r}" for key, value in fields.items() if key != "kind")
