"""수동 트리거 모델"""

from typing import Any

from pydantic import BaseModel, Field


class TriggerRequest(BaseModel):
    """트리거 요청 (크론 표현식 문자열 그대로 매칭)"""
    cron_expression: str = Field(..., min_length=1, max_length=100, examples=["30 2 * * sun"])


class TriggerResponse(BaseModel):
    """트리거 결과"""
    matched: bool
    schedule: str
    operation: str | None = None
    outcome: dict[str, Any] | None = Field(default=None, description="kind 및 결과별 필드")
