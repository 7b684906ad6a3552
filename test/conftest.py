"""
테스트 공용 fixture

- RecordingStore: 조회한 key를 기록하는 메모리 저장소
- FakeEndpoint: httpx.MockTransport 기반 원격 엔드포인트 (요청 기록)
"""

import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest
import pytest_asyncio

# 프로젝트 루트 경로 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from dispatcher.invoker import EndpointInvoker
from dispatcher.model.dispatcher import DEFAULT_SCHEDULES
from dispatcher.resolver import ConfigResolver
from dispatcher.router import CronRouter
from dispatcher.schedule import ScheduleTable
from store.base import BaseKVStore
from store.exception import StoreUnavailableError

TEST_TIMEOUT_SECONDS = 5.0


class RecordingStore(BaseKVStore):
    """조회 이력을 남기는 테스트용 저장소"""

    def __init__(self, values: dict[str, str] | None = None, unavailable: bool = False):
        self.values = dict(values or {})
        self.unavailable = unavailable
        self.reads: list[str] = []

    async def get(self, key: str) -> str | None:
        self.reads.append(key)
        if self.unavailable:
            raise StoreUnavailableError("store is down")
        return self.values.get(key)

    async def ping(self) -> bool:
        return not self.unavailable


class BrokenStream(httpx.AsyncByteStream):
    """본문을 읽으려 하면 연결이 끊기는 스트림"""

    async def __aiter__(self):
        raise httpx.ReadError("connection reset while reading body")
        yield b""  # pragma: no cover


class FakeEndpoint:
    """URL별 응답을 등록해 두는 가짜 원격 엔드포인트"""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.client: httpx.AsyncClient | None = None

    def respond(self, url: str, status_code: int = 200, json=None, text: str | None = None) -> None:
        if json is not None:
            self._routes[url] = lambda request: httpx.Response(status_code, json=json)
        else:
            self._routes[url] = lambda request: httpx.Response(status_code, text=text or "")

    def respond_with(self, url: str, factory: Callable[[httpx.Request], httpx.Response]) -> None:
        self._routes[url] = factory

    def fail(self, url: str, error_type: type[httpx.RequestError], message: str = "boom") -> None:
        def raise_error(request: httpx.Request) -> httpx.Response:
            raise error_type(message, request=request)
        self._routes[url] = raise_error

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get(str(request.url))
        if route is None:
            return httpx.Response(404, text="no route")
        return route(request)


@pytest_asyncio.fixture
async def endpoint():
    """FakeEndpoint + 연결된 httpx.AsyncClient"""
    fake = FakeEndpoint()
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake.handle)) as client:
        fake.client = client
        yield fake


@pytest.fixture
def store():
    return RecordingStore()


@pytest.fixture
def schedule_table():
    return ScheduleTable.from_entries(DEFAULT_SCHEDULES)


@pytest.fixture
def invoker(endpoint):
    return EndpointInvoker(endpoint.client, TEST_TIMEOUT_SECONDS)


@pytest.fixture
def cron_router(schedule_table, store, invoker):
    return CronRouter(table=schedule_table, resolver=ConfigResolver(store), invoker=invoker)
