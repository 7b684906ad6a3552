"""maintd - 크론 트리거 기반 유지보수 엔드포인트 디스패처"""

__version__ = "0.1.0"
