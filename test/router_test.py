"""
Cron Router 테스트

테스트 항목:
1. 알려진 크론 표현식은 묶인 오퍼레이션 하나만 실행
2. 알 수 없는 표현식은 UnknownSchedule, 설정 조회/HTTP 호출 없음
3. 설정이 없으면 HTTP 호출 없이 ConfigNotFound
4. 시나리오: Success / ProtocolError / ApplicationError
5. 같은 파이프라인 반복 실행 시 상태 누적 없음
6. 동시 트리거 간 격리

실행: python -m pytest test/router_test.py -v
"""

import asyncio
import logging

import httpx
import pytest

from dispatcher.model import (
    ApplicationError,
    ConfigNotFoundOutcome,
    ConfigStoreUnavailableOutcome,
    ProtocolError,
    Success,
    TransportError,
    UnknownSchedule,
)

ERASE_URL = "https://api.example/erase"
STOP_URL = "https://api.example/stop"
NOTIFY_URL = "https://api.example/notify"

BINDINGS = [
    ("30 2 * * sun", "dp_log_erase", ERASE_URL),
    ("0/5 0-15 * * *", "dp_zombie_task_stop", STOP_URL),
    ("0/15 0-15 * * *", "dp_pending_task_notify", NOTIFY_URL),
]


@pytest.fixture
def configured_store(store):
    for _, key, url in BINDINGS:
        store.values[key] = url
    return store


class TestRouting:
    """크론 표현식 매칭"""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("expression,operation,url", BINDINGS)
    async def test_known_expression_invokes_bound_operation_only(
        self, cron_router, configured_store, endpoint, expression, operation, url
    ):
        for _, _, any_url in BINDINGS:
            endpoint.respond(any_url, 200, json={"code": 0})

        outcome = await cron_router.on_trigger(expression)

        assert outcome == Success()
        assert configured_store.reads == [operation]
        assert [str(r.url) for r in endpoint.requests] == [url]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("expression", [
        "* * * * *",
        "30 2 * * SUN",
        "30 2 * * sun ",
        "*/5 0-15 * * *",
        "",
    ])
    async def test_unknown_expression_is_noop(self, cron_router, configured_store, endpoint, expression):
        result = await cron_router.on_trigger(expression)

        assert result == UnknownSchedule(schedule_expression=expression)
        assert configured_store.reads == []
        assert endpoint.requests == []

    @pytest.mark.asyncio
    async def test_unknown_schedule_logged_as_info(self, cron_router, caplog):
        with caplog.at_level(logging.INFO, logger="dispatcher.router"):
            await cron_router.on_trigger("1 1 1 1 1")

        records = [r for r in caplog.records if getattr(r, "event", None) == "unknown_schedule"]
        assert len(records) == 1
        assert records[0].levelno == logging.INFO
        assert records[0].schedule == "1 1 1 1 1"


class TestScenarios:
    """파이프라인 시나리오"""

    @pytest.mark.asyncio
    async def test_log_erase_success(self, cron_router, store, endpoint):
        store.values["dp_log_erase"] = ERASE_URL
        endpoint.respond(ERASE_URL, 200, json={"code": 0})

        outcome = await cron_router.on_trigger("30 2 * * sun")

        assert outcome == Success()

    @pytest.mark.asyncio
    async def test_zombie_stop_server_error(self, cron_router, store, endpoint):
        store.values["dp_zombie_task_stop"] = STOP_URL
        endpoint.respond(STOP_URL, 500, text="server error")

        outcome = await cron_router.on_trigger("0/5 0-15 * * *")

        assert outcome == ProtocolError(status=500, body="server error")

    @pytest.mark.asyncio
    async def test_missing_config_short_circuits(self, cron_router, store, endpoint):
        outcome = await cron_router.on_trigger("0/15 0-15 * * *")

        assert outcome == ConfigNotFoundOutcome(operation="dp_pending_task_notify")
        assert store.reads == ["dp_pending_task_notify"]
        assert endpoint.requests == []

    @pytest.mark.asyncio
    async def test_store_unavailable_short_circuits(self, cron_router, store, endpoint):
        store.unavailable = True

        outcome = await cron_router.on_trigger("30 2 * * sun")

        assert isinstance(outcome, ConfigStoreUnavailableOutcome)
        assert endpoint.requests == []

    @pytest.mark.asyncio
    async def test_200_with_nonzero_code_is_application_error(self, cron_router, store, endpoint):
        store.values["dp_log_erase"] = ERASE_URL
        endpoint.respond(ERASE_URL, 200, json={"code": 7})

        outcome = await cron_router.on_trigger("30 2 * * sun")

        assert outcome == ApplicationError(code=7)

    @pytest.mark.asyncio
    async def test_transport_failure(self, cron_router, store, endpoint):
        store.values["dp_log_erase"] = ERASE_URL
        endpoint.fail(ERASE_URL, httpx.ConnectError, "connection refused")

        outcome = await cron_router.on_trigger("30 2 * * sun")

        assert isinstance(outcome, TransportError)

    @pytest.mark.asyncio
    async def test_failure_logged_with_outcome_fields(self, cron_router, store, endpoint, caplog):
        store.values["dp_zombie_task_stop"] = STOP_URL
        endpoint.respond(STOP_URL, 500, text="server error")

        with caplog.at_level(logging.INFO, logger="dispatcher.router"):
            await cron_router.on_trigger("0/5 0-15 * * *")

        records = [r for r in caplog.records if getattr(r, "event", None) == "dispatch_outcome"]
        assert len(records) == 1
        record = records[0]
        assert record.levelno == logging.ERROR
        assert record.operation == "dp_zombie_task_stop"
        assert record.kind == "protocol_error"
        assert record.status == 500
        assert record.body == "server error"


class TestIsolation:
    """실행 간 상태 공유 없음"""

    @pytest.mark.asyncio
    async def test_repeated_runs_are_idempotent(self, cron_router, store, endpoint):
        store.values["dp_log_erase"] = ERASE_URL
        endpoint.respond(ERASE_URL, 200, json={"code": 0})

        first = await cron_router.on_trigger("30 2 * * sun")
        second = await cron_router.on_trigger("30 2 * * sun")

        assert first == second == Success()
        assert len(endpoint.requests) == 2

    @pytest.mark.asyncio
    async def test_concurrent_triggers_do_not_affect_each_other(
        self, cron_router, configured_store, endpoint
    ):
        endpoint.respond(ERASE_URL, 200, json={"code": 0})
        endpoint.respond(STOP_URL, 500, text="server error")
        endpoint.respond(NOTIFY_URL, 200, json={"code": 3})

        erase, stop, notify = await asyncio.gather(
            cron_router.on_trigger("30 2 * * sun"),
            cron_router.on_trigger("0/5 0-15 * * *"),
            cron_router.on_trigger("0/15 0-15 * * *"),
        )

        assert erase == Success()
        assert stop == ProtocolError(status=500, body="server error")
        assert notify == ApplicationError(code=3)
