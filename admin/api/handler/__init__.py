"""Admin API 핸들러 패키지"""

from admin.api.handler.trigger import TriggerHandler

__all__ = ['TriggerHandler']
