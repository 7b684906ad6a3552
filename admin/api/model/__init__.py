"""Admin API 모델 패키지"""

from admin.api.model.common import HealthResponse, ReadyResponse
from admin.api.model.schedule import ScheduleListResponse, ScheduleResponse
from admin.api.model.trigger import TriggerRequest, TriggerResponse

__all__ = [
    'HealthResponse',
    'ReadyResponse',
    'ScheduleListResponse',
    'ScheduleResponse',
    'TriggerRequest',
    'TriggerResponse',
]
