"""
Dispatcher: 크론 트리거 발화 모듈

스케줄 테이블의 크론 표현식들 중 가장 빨리 도래하는 시각까지 대기한 뒤,
그 시각에 해당하는 표현식들을 트리거로 CronRouter에 전달합니다.
트리거마다 독립된 태스크로 실행되어 서로 영향을 주지 않습니다.

실행 방법:
    python -m dispatcher.main
    python main.py dispatcher
"""

import asyncio
import logging
from datetime import datetime, timezone

from dispatcher.model.dispatcher import DispatcherConfig
from dispatcher.model.outcome import Outcome, UnknownSchedule
from dispatcher.router import CronRouter

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    크론 트리거 Dispatcher

    실행 시점 계산은 croniter(UTC)로 하고, 실제 매칭/실행은 CronRouter가 담당합니다.
    같은 시각이 두 번 발화되지 않도록 마지막 발화 시각을 기준으로 다음 시각을 계산합니다.
    """

    def __init__(self, config: DispatcherConfig, router: CronRouter):
        """
        Args:
            config: Dispatcher 설정
            router: 트리거를 처리할 라우터
        """
        self._config = config
        self._router = router
        self._running = False
        self._stop_event: asyncio.Event | None = None
        self._last_fired_at: datetime | None = None
        self._running_tasks: set[asyncio.Task] = set()

    async def start(self) -> None:
        """Dispatcher 메인 루프 시작"""
        if self._running:
            logger.warning("Dispatcher is already running")
            return

        if not len(self._router.table):
            logger.warning("Schedule table is empty, dispatcher has nothing to fire")

        self._running = True
        self._stop_event = asyncio.Event()

        logger.info(
            f"Dispatcher started (schedules={len(self._router.table)}, "
            f"shutdown_timeout={self._config.shutdown_timeout_seconds}s)"
        )

        try:
            await self._main_loop()
        except asyncio.CancelledError:
            logger.info("Dispatcher cancelled")
        except Exception as e:
            logger.error(f"Dispatcher error: {e}", exc_info=True)
            raise
        finally:
            await self._wait_running_tasks()
            self._running = False
            logger.info("Dispatcher stopped")

    async def stop(self) -> None:
        """Dispatcher graceful shutdown"""
        if not self._running:
            return

        logger.info("Stopping dispatcher...")
        self._running = False
        if self._stop_event:
            self._stop_event.set()

    async def fire(self, schedule_expression: str) -> Outcome | UnknownSchedule:
        """트리거 1회 즉시 전달 (수동 실행용)"""
        return await self._router.on_trigger(schedule_expression)

    async def _main_loop(self) -> None:
        """메인 루프: 다음 발화 시각까지 대기 후 트리거 전달"""
        while self._running:
            now = self._now()
            base = max(now, self._last_fired_at) if self._last_fired_at else now

            fire_at, expressions = self._next_due(base)
            if fire_at is None:
                await self._stop_event.wait()
                break

            sleep_seconds = max((fire_at - now).total_seconds(), 0.0)
            logger.debug(f"Next fire at {fire_at.isoformat()} ({sleep_seconds:.1f}s): {expressions}")

            if await self._sleep(sleep_seconds):
                break

            self._last_fired_at = fire_at
            for expression in expressions:
                self._spawn(expression, fire_at)

    def _next_due(self, base: datetime) -> tuple[datetime | None, list[str]]:
        """
        base 이후 가장 빠른 발화 시각과 그 시각에 발화할 표현식 목록

        Returns:
            (발화 시각, 크론 표현식 목록), 테이블이 비어 있으면 (None, [])
        """
        table = self._router.table
        fire_times = {
            expression: table.next_fire_time(expression, base)
            for expression in table.expressions
        }
        if not fire_times:
            return None, []

        fire_at = min(fire_times.values())
        return fire_at, [e for e, t in fire_times.items() if t == fire_at]

    def _spawn(self, schedule_expression: str, fire_at: datetime) -> None:
        """트리거 1건을 독립 태스크로 실행"""
        logger.debug(f"Trigger fired: schedule='{schedule_expression}', at={fire_at.isoformat()}")
        task = asyncio.create_task(self._dispatch(schedule_expression))
        self._running_tasks.add(task)
        task.add_done_callback(self._running_tasks.discard)

    async def _dispatch(self, schedule_expression: str) -> None:
        """트리거 처리 (태스크 경계에서 예외 격리)"""
        try:
            await self._router.on_trigger(schedule_expression)
        except Exception as e:
            # 한 트리거의 예외가 다른 트리거나 메인 루프에 영향을 주지 않음
            logger.error(
                f"Unexpected error dispatching schedule '{schedule_expression}': {e}",
                exc_info=True,
            )

    async def _sleep(self, seconds: float) -> bool:
        """
        인터럽트 가능한 sleep

        Returns:
            True: stop 요청으로 깨어남
        """
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=seconds)
            return True
        except asyncio.TimeoutError:
            return False

    async def _wait_running_tasks(self) -> None:
        """실행 중인 파이프라인 완료 대기 (graceful shutdown)"""
        if not self._running_tasks:
            return

        logger.info(f"Waiting for {len(self._running_tasks)} running dispatches...")

        try:
            await asyncio.wait_for(
                asyncio.gather(*self._running_tasks, return_exceptions=True),
                timeout=self._config.shutdown_timeout_seconds
            )
            logger.info("All dispatches completed")
        except asyncio.TimeoutError:
            logger.warning(
                f"Shutdown timeout ({self._config.shutdown_timeout_seconds}s), "
                f"{len(self._running_tasks)} dispatches still running"
            )
            for task in list(self._running_tasks):
                task.cancel()

    @staticmethod
    def _now() -> datetime:
        return datetime.now(timezone.utc)

    @property
    def is_running(self) -> bool:
        """실행 중 여부"""
        return self._running

    @property
    def running_task_count(self) -> int:
        """실행 중인 디스패치 수"""
        return len(self._running_tasks)


if __name__ == "__main__":
    from maintd.bootstrap import configure_logging, load_settings, run_services

    settings = load_settings()
    configure_logging(settings)
    asyncio.run(run_services(settings, ["dispatcher"]))
