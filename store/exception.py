"""
저장소 관련 예외 클래스 정의
"""


class StoreError(Exception):
    """저장소 기본 예외"""
    pass


class StoreUnavailableError(StoreError):
    """저장소 읽기 실패 (연결 불가, 파일 없음 등)"""
    def __init__(self, message: str = None):
        self.message = message or "Key-value store is unavailable"
        super().__init__(self.message)
