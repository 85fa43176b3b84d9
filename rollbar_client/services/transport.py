"""payload 전송 + 응답 파싱"""

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from rollbar_client.core.config import ClientConfig
from rollbar_client.core.errors import (
    ConfigurationError,
    DecodeError,
    EncodingError,
    RemoteRejectionError,
    RequestError,
    TransportError,
)
from rollbar_client.core.logger import Logger, NullLogger, log_quietly
from rollbar_client.models.payload import Payload
from rollbar_client.models.response import Response
from rollbar_client.version import USER_AGENT

logger = logging.getLogger(__name__)

MASKED_TOKEN = "********"


def _trace(log: Logger, msg: str, *args: Any) -> None:
    log_quietly(log, "debug", msg, *args)


def parse_response(
    body: bytes,
    *,
    debug: bool = False,
    logger: Logger | None = None,
    endpoint: str = "",
) -> Response:
    """응답 body → Response.

    body는 이미 전부 읽어둔 bytes이므로 트레이스 후에도 같은 값으로 디코딩한다.
    """
    if debug and logger is not None:
        _trace(logger, "-----> %s (response)", endpoint)
        try:
            formatted = json.dumps(json.loads(body), indent=2)
        except ValueError as e:
            _trace(logger, "failed to unmarshal payload: %s", e)
        else:
            _trace(logger, "%s", formatted)
        _trace(logger, "<----- %s (response)", endpoint)

    try:
        return Response.model_validate_json(body)
    except ValidationError as e:
        raise DecodeError(f"failed to decode response: {e}") from e


class Transport:
    """Rollbar item API로 POST (호출당 정확히 1회, 재시도 없음).

    취소는 asyncio에 맡긴다. CancelledError는 감싸지 않고 그대로 전파되므로
    호출자의 timeout/취소와 네트워크 실패가 구분된다.
    """

    def __init__(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient,
        log: Logger | None = None,
    ):
        self.config = config
        self._client = http_client
        self._log = log or NullLogger()

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    def _encode(self, payload: Payload) -> bytes:
        try:
            return payload.to_json().encode()
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodingError(f"failed to encode payload: {e}") from e

    def _trace_request(self, payload: Payload) -> None:
        masked = payload.model_copy(update={"access_token": MASKED_TOKEN})
        _trace(self._log, "-----> %s (request)", self.endpoint)
        try:
            _trace(self._log, "%s", masked.to_json(indent=2))
        except (PydanticSerializationError, TypeError, ValueError) as e:
            _trace(self._log, "failed to marshal payload: %s", e)
        _trace(self._log, "<----- %s (request)", self.endpoint)

    def _build_request(self, content: bytes) -> httpx.Request:
        try:
            return self._client.build_request(
                "POST",
                self.endpoint,
                content=content,
                headers={
                    "Content-Type": "application/json",
                    "User-Agent": USER_AGENT,
                },
            )
        except httpx.InvalidURL as e:
            raise RequestError(f"failed to create POST request: {e}") from e

    async def post(self, payload: Payload) -> Response:
        """payload 전송 후 디코딩된 응답 반환. 실패 시 RollbarError 하위 예외."""
        if not payload.access_token:
            raise ConfigurationError("empty access token")

        content = self._encode(payload)
        if self.config.debug:
            self._trace_request(payload)

        request = self._build_request(content)
        try:
            resp = await self._client.send(request)
        except httpx.UnsupportedProtocol as e:
            raise RequestError(f"invalid endpoint {self.endpoint!r}: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"failed to POST to {self.endpoint}: {e}") from e

        if resp.status_code != httpx.codes.OK:
            logger.debug("Rollbar rejected item: %s %s", resp.status_code, resp.reason_phrase)
            raise RemoteRejectionError(resp.status_code, resp.reason_phrase)

        return parse_response(
            resp.content,
            debug=self.config.debug,
            logger=self._log,
            endpoint=self.endpoint,
        )
