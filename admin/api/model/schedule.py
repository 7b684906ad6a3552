"""스케줄 테이블 조회 모델"""

from datetime import datetime

from pydantic import BaseModel


class ScheduleResponse(BaseModel):
    """스케줄 한 줄"""
    cron_expression: str
    operation: str
    description: str | None = None
    next_run_at: datetime


class ScheduleListResponse(BaseModel):
    """스케줄 목록 응답"""
    items: list[ScheduleResponse]
    total: int
