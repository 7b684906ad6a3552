"""
Dispatcher 설정 모델 정의
"""

from pydantic import BaseModel, Field


class ScheduleEntry(BaseModel):
    """크론 표현식 -> 오퍼레이션 매핑 한 줄"""
    cron_expression: str = Field(min_length=1)
    operation: str = Field(min_length=1, description="설정 저장소 key로 쓰이는 오퍼레이션 이름")
    description: str | None = None


DEFAULT_SCHEDULES = [
    ScheduleEntry(cron_expression="30 2 * * sun", operation="dp_log_erase",
                  description="오래된 로그 삭제"),
    ScheduleEntry(cron_expression="0/5 0-15 * * *", operation="dp_zombie_task_stop",
                  description="좀비 태스크 정리"),
    ScheduleEntry(cron_expression="0/15 0-15 * * *", operation="dp_pending_task_notify",
                  description="대기 중 태스크 알림"),
]


class DispatcherConfig(BaseModel):
    """Dispatcher 설정"""
    schedules: list[ScheduleEntry] = Field(default_factory=lambda: list(DEFAULT_SCHEDULES))
    shutdown_timeout_seconds: int = Field(default=30, ge=1, le=600)


class HttpConfig(BaseModel):
    """엔드포인트 호출 설정"""
    timeout_seconds: float = Field(default=30.0, gt=0, le=600)
