"""트리거/스케줄 비즈니스 로직 핸들러"""

import logging
from datetime import datetime, timezone

from admin.api.model.schedule import ScheduleResponse
from admin.api.model.trigger import TriggerResponse
from dispatcher.model.outcome import UnknownSchedule, outcome_to_dict
from dispatcher.router import CronRouter
from store.base import BaseKVStore

logger = logging.getLogger(__name__)


class TriggerHandler:
    """수동 트리거 및 스케줄 조회 핸들러"""

    def __init__(self, router: CronRouter, store: BaseKVStore):
        self._router = router
        self._store = store

    def get_schedules(self, now: datetime | None = None) -> list[ScheduleResponse]:
        """스케줄 테이블과 다음 실행 시각(UTC)"""
        now = now or datetime.now(timezone.utc)
        table = self._router.table
        return [
            ScheduleResponse(
                cron_expression=operation.schedule_expression,
                operation=operation.name,
                description=operation.description,
                next_run_at=table.next_fire_time(operation.schedule_expression, now),
            )
            for operation in table
        ]

    async def trigger(self, cron_expression: str) -> TriggerResponse:
        """트리거 1회 전달 (스케줄 발화와 동일한 파이프라인)"""
        logger.info(f"Manual trigger requested: schedule='{cron_expression}'")
        result = await self._router.on_trigger(cron_expression)

        if isinstance(result, UnknownSchedule):
            return TriggerResponse(matched=False, schedule=cron_expression)

        operation = self._router.table.match(cron_expression)
        return TriggerResponse(
            matched=True,
            schedule=cron_expression,
            operation=operation.name if operation else None,
            outcome=outcome_to_dict(result),
        )

    async def is_store_ready(self) -> bool:
        return await self._store.ping()
