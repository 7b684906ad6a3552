"""
maintd 구성 요소 조립

설정 로드/검증, 저장소와 HTTP 클라이언트 생성, 라우터 조립,
Dispatcher와 Admin API 실행을 담당합니다.
"""

import asyncio
import logging
import signal
import sys
from dataclasses import dataclass
from pathlib import Path

import httpx
import yaml
from pydantic import ValidationError

from common.config import AdminConfig, LoggingConfig, load_config
from common.logging import setup_logging
from dispatcher.exception import ConfigurationError
from dispatcher.invoker import EndpointInvoker
from dispatcher.main import Dispatcher
from dispatcher.model.dispatcher import DispatcherConfig, HttpConfig
from dispatcher.resolver import ConfigResolver
from dispatcher.router import CronRouter
from dispatcher.schedule import ScheduleTable
from store import BaseKVStore, StoreConfig, create_store

logger = logging.getLogger(__name__)

VALID_MODULES = ("dispatcher", "admin")


@dataclass(frozen=True)
class Settings:
    """검증된 전체 설정"""
    dispatcher: DispatcherConfig
    http: HttpConfig
    store: StoreConfig
    admin: AdminConfig
    logging: LoggingConfig


def parse_settings(config: dict) -> Settings:
    """설정 dict 검증"""
    try:
        return Settings(
            dispatcher=DispatcherConfig(**(config.get("dispatcher") or {})),
            http=HttpConfig(**(config.get("http") or {})),
            store=StoreConfig(**(config.get("store") or {})),
            admin=AdminConfig(**(config.get("admin") or {})),
            logging=LoggingConfig(**(config.get("logging") or {})),
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_settings(config_dir: str | Path | None = None) -> Settings:
    """config/*.yaml 로드 후 검증"""
    try:
        config = load_config(config_dir)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e
    return parse_settings(config)


def configure_logging(settings: Settings) -> None:
    setup_logging(
        level=settings.logging.level,
        json_format=settings.logging.json_format,
        log_file=settings.logging.log_file,
    )


def create_http_client() -> httpx.AsyncClient:
    """프로세스 공유 HTTP 클라이언트 (타임아웃은 요청마다 EndpointInvoker가 지정)"""
    return httpx.AsyncClient(follow_redirects=True)


def build_router(settings: Settings, store: BaseKVStore, client: httpx.AsyncClient) -> CronRouter:
    """스케줄 테이블/설정 조회기/호출기를 묶어 CronRouter 생성"""
    table = ScheduleTable.from_entries(settings.dispatcher.schedules)
    return CronRouter(
        table=table,
        resolver=ConfigResolver(store),
        invoker=EndpointInvoker(client, settings.http.timeout_seconds),
    )


async def run_services(
    settings: Settings,
    modules: list[str],
    stop_event: asyncio.Event | None = None,
) -> None:
    """
    Dispatcher / Admin API 실행 (종료 시그널까지)

    Args:
        settings: 검증된 설정
        modules: 실행할 모듈 목록 (dispatcher, admin)
        stop_event: 외부에서 종료를 요청할 이벤트 (None이면 새로 생성)
    """
    store = create_store(settings.store)
    await store.connect()

    if stop_event is None:
        stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()

    def signal_handler():
        logger.info("Received shutdown signal")
        stop_event.set()

    # Windows는 add_signal_handler를 지원하지 않음
    signals = (signal.SIGINT, signal.SIGTERM) if sys.platform != "win32" else ()
    for sig in signals:
        loop.add_signal_handler(sig, signal_handler)

    try:
        async with create_http_client() as client:
            router = build_router(settings, store, client)

            tasks = []
            if "dispatcher" in modules:
                tasks.append(asyncio.create_task(_run_dispatcher(settings, router, stop_event)))
                logger.info("Dispatcher started")
            if "admin" in modules:
                tasks.append(asyncio.create_task(_run_admin(settings, router, store, stop_event)))
                logger.info("Admin API started")

            try:
                await asyncio.gather(*tasks)
            except asyncio.CancelledError:
                logger.info("Tasks cancelled")
    finally:
        for sig in signals:
            loop.remove_signal_handler(sig)
        await store.disconnect()
        logger.info("All modules stopped")


async def _run_dispatcher(settings: Settings, router: CronRouter, stop_event: asyncio.Event) -> None:
    """Dispatcher 실행"""
    dispatcher = Dispatcher(settings.dispatcher, router)

    async def wait_stop():
        await stop_event.wait()
        await dispatcher.stop()

    stopper = asyncio.create_task(wait_stop())
    try:
        await dispatcher.start()
    finally:
        stopper.cancel()


async def _run_admin(
    settings: Settings,
    router: CronRouter,
    store: BaseKVStore,
    stop_event: asyncio.Event,
) -> None:
    """Admin API 실행"""
    import uvicorn
    from admin.main import create_app

    app = create_app(router, store, settings.admin.cors_origins)
    uv_config = uvicorn.Config(
        app,
        host=settings.admin.host,
        port=settings.admin.port,
        log_level="info",
    )
    server = uvicorn.Server(uv_config)

    async def wait_stop():
        await stop_event.wait()
        server.should_exit = True

    stopper = asyncio.create_task(wait_stop())
    try:
        await server.serve()
    finally:
        stopper.cancel()
