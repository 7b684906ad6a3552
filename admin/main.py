"""Admin API 서버 진입점"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from admin.api.handler.trigger import TriggerHandler
from admin.api.router.api import router
from dispatcher.router import CronRouter
from maintd import __version__
from store.base import BaseKVStore

logger = logging.getLogger(__name__)


def create_app(cron_router: CronRouter, store: BaseKVStore, cors_origins: list[str] | None = None) -> FastAPI:
    """
    FastAPI 앱 생성

    저장소/HTTP 클라이언트의 생명주기는 호출자(bootstrap)가 관리합니다.

    Args:
        cron_router: 트리거를 처리할 라우터
        store: readiness 확인용 저장소
        cors_origins: 허용 origin 목록 (기본: 전체)
    """
    app = FastAPI(
        title="maintd Admin API",
        description="유지보수 디스패처 상태 조회 및 수동 트리거",
        version=__version__,
    )

    # CORS 설정
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins or ['*'],
        allow_methods=['GET', 'POST'],
        allow_headers=['*'],
    )

    app.state.trigger_handler = TriggerHandler(cron_router, store)

    # API 라우터 등록
    app.include_router(router)

    return app
