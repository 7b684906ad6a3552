"""
스케줄 테이블

크론 표현식 문자열 -> 오퍼레이션 매핑. 기동 시점에 한 번 만들어지고 이후 변경되지 않습니다.
"""

import logging
from collections.abc import Iterable, Iterator
from datetime import datetime
from types import MappingProxyType

from croniter import croniter

from dispatcher.exception import CronParseError, DuplicateScheduleError
from dispatcher.model.dispatcher import ScheduleEntry
from dispatcher.model.operation import Operation

logger = logging.getLogger(__name__)


class ScheduleTable:
    """
    정적 디스패치 테이블

    매칭은 크론 표현식 문자열의 완전 일치로만 판단합니다.
    (현재 시각에 실행할 차례인지 계산하지 않음)
    """

    def __init__(self, operations: Iterable[Operation]):
        table: dict[str, Operation] = {}
        names: set[str] = set()

        for operation in operations:
            if not operation.name:
                raise ValueError("Operation name must not be empty")
            if not croniter.is_valid(operation.schedule_expression):
                raise CronParseError(operation.schedule_expression)
            if operation.schedule_expression in table:
                raise DuplicateScheduleError("cron_expression", operation.schedule_expression)
            if operation.name in names:
                raise DuplicateScheduleError("operation", operation.name)

            table[operation.schedule_expression] = operation
            names.add(operation.name)

        self._table = MappingProxyType(table)

    @classmethod
    def from_entries(cls, entries: Iterable[ScheduleEntry]) -> "ScheduleTable":
        """설정 파일의 schedules 항목으로 테이블 생성"""
        return cls(
            Operation(
                name=entry.operation,
                schedule_expression=entry.cron_expression,
                description=entry.description,
            )
            for entry in entries
        )

    def match(self, schedule_expression: str) -> Operation | None:
        """크론 표현식에 묶인 오퍼레이션 반환 (없으면 None)"""
        return self._table.get(schedule_expression)

    @property
    def expressions(self) -> list[str]:
        return list(self._table)

    def next_fire_time(self, schedule_expression: str, base: datetime) -> datetime:
        """base 이후 첫 실행 시각"""
        return croniter(schedule_expression, base).get_next(datetime)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self._table.values())

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, schedule_expression: object) -> bool:
        return schedule_expression in self._table
