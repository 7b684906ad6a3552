"""
maintd 통합 진입점

Dispatcher, Admin API를 한 번에 실행합니다.

사용법:
    python main.py                    # 전체 실행
    python main.py dispatcher         # Dispatcher만
    python main.py admin              # Admin API만
    python main.py dispatcher admin   # 복수 선택
"""

import sys
import os

# Windows 인코딩 설정 (cp949 -> UTF-8)
if sys.platform == "win32":
    os.environ["PYTHONUTF8"] = "1"

import asyncio
import logging

from dispatcher.exception import DispatcherError
from maintd.bootstrap import VALID_MODULES, configure_logging, load_settings, run_services

logger = logging.getLogger(__name__)


async def main(modules: list[str]):
    """메인 함수"""
    settings = load_settings()
    configure_logging(settings)
    await run_services(settings, modules)


if __name__ == "__main__":
    # 인자 파싱
    args = sys.argv[1:]

    if args:
        modules = [m for m in args if m in VALID_MODULES]
        if not modules:
            print(f"Usage: python main.py [dispatcher] [admin]")
            sys.exit(1)
    else:
        modules = list(VALID_MODULES)

    print(f"Starting maintd: {', '.join(modules)}")
    try:
        asyncio.run(main(modules))
    except DispatcherError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nShutdown requested by user")
