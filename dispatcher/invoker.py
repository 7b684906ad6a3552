"""
엔드포인트 호출기

URL로 GET 요청을 한 번 보내고, 전송/응답 결과를 InvokeResult로 정규화합니다.
"""

import logging

import httpx
from pydantic import ValidationError

from dispatcher.model.operation import ApiEnvelope
from dispatcher.model.result import (
    HTTP_BODY_PLACEHOLDER,
    HttpFailure,
    InvokeResult,
    ParseFailure,
    Parsed,
    TransportFailure,
)

logger = logging.getLogger(__name__)


class EndpointInvoker:
    """
    엔드포인트 호출기

    헤더/본문/인증 없이 GET 한 번만 시도합니다 (재시도 없음).
    HTTP 클라이언트는 프로세스 전체에서 공유되는 인스턴스를 주입받습니다.
    """

    def __init__(self, client: httpx.AsyncClient, timeout_seconds: float):
        self._client = client
        self._timeout = httpx.Timeout(timeout_seconds)

    @property
    def timeout(self) -> httpx.Timeout:
        return self._timeout

    async def invoke(self, url: str) -> InvokeResult:
        """
        엔드포인트 호출

        Args:
            url: 호출할 URL

        Returns:
            Parsed | HttpFailure | TransportFailure | ParseFailure
        """
        try:
            async with self._client.stream("GET", url, timeout=self._timeout) as response:
                if not response.is_success:
                    body = await self._read_body_text(response)
                    logger.debug(f"Non-2xx response: url={url}, status={response.status_code}")
                    return HttpFailure(status_code=response.status_code, body=body)

                content = await response.aread()

        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"Transport failure: url={url}, error={e!r}")
            return TransportFailure(reason=_describe(e))

        try:
            envelope = ApiEnvelope.model_validate_json(content)
        except ValidationError as e:
            return ParseFailure(reason=f"{e.error_count()} validation error(s): {_first_error(e)}")

        return Parsed(envelope=envelope)

    @staticmethod
    async def _read_body_text(response: httpx.Response) -> str:
        """실패 응답 본문 읽기 (읽지 못해도 상태 코드 실패를 가리지 않음)"""
        try:
            await response.aread()
            return response.text
        except (httpx.HTTPError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read error body: status={response.status_code}, error={e!r}")
            return HTTP_BODY_PLACEHOLDER


def _describe(error: Exception) -> str:
    message = str(error)
    return f"{type(error).__name__}: {message}" if message else type(error).__name__


def _first_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ())) or "body"
    return f"{location}: {first.get('msg', '')}"
