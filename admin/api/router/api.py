"""Admin API 라우터 (모든 API 통합)"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from admin.api.handler.trigger import TriggerHandler
from admin.api.model.common import HealthResponse, ReadyResponse
from admin.api.model.schedule import ScheduleListResponse
from admin.api.model.trigger import TriggerRequest, TriggerResponse
from maintd import __version__

logger = logging.getLogger(__name__)

router = APIRouter()


def get_trigger_handler(request: Request) -> TriggerHandler:
    """앱 생성 시 주입된 핸들러"""
    return request.app.state.trigger_handler


# ============================================
# SCHEDULE API
# ============================================

@router.get("/api/schedules", response_model=ScheduleListResponse, tags=["Schedule"])
async def get_schedules(handler: TriggerHandler = Depends(get_trigger_handler)):
    """스케줄 테이블 조회"""
    items = handler.get_schedules()
    return ScheduleListResponse(items=items, total=len(items))


# ============================================
# TRIGGER API
# ============================================

@router.post("/api/triggers", response_model=TriggerResponse, tags=["Trigger"])
async def post_trigger(
    request: TriggerRequest,
    handler: TriggerHandler = Depends(get_trigger_handler),
):
    """
    트리거 수동 전달

    매칭되지 않는 표현식은 오류가 아니라 matched=false로 응답합니다.
    파이프라인 실패도 HTTP 오류가 아니라 outcome.kind로 표현됩니다.
    """
    return await handler.trigger(request.cron_expression)


# ============================================
# Health Check
# ============================================

@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """서버 상태 확인 (liveness probe)"""
    return HealthResponse(status="healthy", version=__version__)


@router.get("/ready", response_model=ReadyResponse, tags=["Health"])
async def ready_check(handler: TriggerHandler = Depends(get_trigger_handler)):
    """설정 저장소 상태 확인 (readiness probe)"""
    if await handler.is_store_ready():
        return ReadyResponse(status="ready", store="ok")
    return JSONResponse(
        status_code=503,
        content={"status": "not ready", "store": "unavailable"}
    )
