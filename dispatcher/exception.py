"""
Dispatcher 관련 예외 클래스 정의

기동/설정 단계에서만 사용합니다. 파이프라인 실행 결과는 Outcome 값으로 표현됩니다.
"""


class DispatcherError(Exception):
    """Dispatcher 기본 예외"""
    pass


class ConfigurationError(DispatcherError):
    """설정 파일 로드/검증 실패"""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class CronParseError(DispatcherError):
    """크론 표현식 파싱 실패"""
    def __init__(self, cron_expression: str, message: str = None):
        self.cron_expression = cron_expression
        self.message = message or f"Invalid cron expression: {cron_expression}"
        super().__init__(self.message)


class DuplicateScheduleError(DispatcherError):
    """스케줄 테이블 중복 (같은 크론 표현식 또는 같은 오퍼레이션)"""
    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        self.message = f"Duplicate {field} in schedule table: '{value}'"
        super().__init__(self.message)
